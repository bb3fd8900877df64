"""
In-Memory Store
===============

Dict-backed customer, order and product repositories sharing one store.
Used when STORAGE_BACKEND=memory and by the test suite.
"""
import threading
from datetime import datetime
from typing import Dict, List, Optional

from storefront.domain.models.customer import Customer
from storefront.domain.models.order import Order
from storefront.domain.models.page import Page
from storefront.domain.models.product import Product
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.domain.repositories.order_repository import OrderRepository
from storefront.domain.repositories.product_repository import ProductRepository
from storefront.utils.datetime_utils import ensure_utc


class InMemoryStore:
    """Tables shared by the in-memory repositories."""

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.customers: Dict[int, Customer] = {}
        self.orders: Dict[int, Order] = {}
        self.products: Dict[int, Product] = {}
        self._next_order_id = 1

    def next_order_id(self) -> int:
        order_id = self._next_order_id
        self._next_order_id += 1
        return order_id


def _slice(items: list, page: int, page_size: int) -> list:
    skip = (page - 1) * page_size
    return items[skip:skip + page_size]


class InMemoryOrderRepository(OrderRepository):
    """In-memory implementation of OrderRepository."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    def create(self, order: Order) -> Order:
        with self._store.lock:
            saved = order.model_copy(update={"id": self._store.next_order_id()})
            self._store.orders[saved.id] = saved
        return saved

    def count_since(self, customer_id: int, since: datetime) -> int:
        since = ensure_utc(since)
        with self._store.lock:
            return sum(
                1 for order in self._store.orders.values()
                if order.customer_id == customer_id and order.order_date >= since
            )

    def customer_has_any_order(self, customer_id: int) -> bool:
        with self._store.lock:
            return any(order.customer_id == customer_id for order in self._store.orders.values())

    def find_by_customer_id(self, customer_id: int) -> List[Order]:
        with self._store.lock:
            orders = [order for order in self._store.orders.values() if order.customer_id == customer_id]
        return sorted(orders, key=lambda order: order.order_date)


class InMemoryCustomerRepository(CustomerRepository):
    """In-memory implementation of CustomerRepository."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    def create(self, customer: Customer) -> Customer:
        with self._store.lock:
            if customer.id in self._store.customers:
                raise ValueError(f"Customer with ID {customer.id} already exists")
            self._store.customers[customer.id] = customer.model_copy(update={"orders": []})
        return customer

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        with self._store.lock:
            customer = self._store.customers.get(customer_id)
        return customer.model_copy() if customer else None

    def list_page(self, page: int, page_size: int) -> Page[Customer]:
        with self._store.lock:
            ordered = [self._store.customers[key] for key in sorted(self._store.customers)]
            selected = _slice(ordered, page, page_size)
            customers = [
                customer.model_copy(update={
                    "orders": sorted(
                        (o for o in self._store.orders.values() if o.customer_id == customer.id),
                        key=lambda order: order.order_date,
                    )
                })
                for customer in selected
            ]
            total_count = len(ordered)
        return Page[Customer].build(customers, total_count, page, page_size)

    def delete(self, customer_id: int) -> bool:
        with self._store.lock:
            if self._store.customers.pop(customer_id, None) is None:
                return False
            for order_id in [key for key, o in self._store.orders.items() if o.customer_id == customer_id]:
                del self._store.orders[order_id]
        return True

    def count(self) -> int:
        with self._store.lock:
            return len(self._store.customers)


class InMemoryProductRepository(ProductRepository):
    """In-memory implementation of ProductRepository."""

    def __init__(self, store: InMemoryStore):
        self._store = store

    def create(self, product: Product) -> Product:
        with self._store.lock:
            if product.id in self._store.products:
                raise ValueError(f"Product with ID {product.id} already exists")
            self._store.products[product.id] = product
        return product

    def list_page(self, page: int, page_size: int) -> Page[Product]:
        with self._store.lock:
            ordered = [self._store.products[key] for key in sorted(self._store.products)]
        return Page[Product].build(_slice(ordered, page, page_size), len(ordered), page, page_size)

    def count(self) -> int:
        with self._store.lock:
            return len(self._store.products)
