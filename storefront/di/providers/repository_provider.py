from typing import TYPE_CHECKING
from ...core.config import Settings
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.repositories.product_repository import ProductRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the database handle from the database provider and creates repository instances.
        """
        if container.has("memory_store"):
            from ...infrastructure.memory.memory_store import (
                InMemoryCustomerRepository,
                InMemoryOrderRepository,
                InMemoryProductRepository,
            )
            store = container.get("memory_store")
            order_repository = InMemoryOrderRepository(store)
            customer_repository = InMemoryCustomerRepository(store)
            product_repository = InMemoryProductRepository(store)
        else:
            from ...infrastructure.db.mongo_customer_repository import MongoCustomerRepository
            from ...infrastructure.db.mongo_order_repository import MongoOrderRepository
            from ...infrastructure.db.mongo_product_repository import MongoProductRepository
            settings = container.get(Settings)
            mongo_client = container.get("mongo_client")
            order_repository = MongoOrderRepository(
                mongo_client.get_collection(settings.orders_collection),
                mongo_client.get_collection(settings.counters_collection),
            )
            customer_repository = MongoCustomerRepository(
                mongo_client.get_collection(settings.customers_collection),
                order_repository,
            )
            product_repository = MongoProductRepository(
                mongo_client.get_collection(settings.products_collection),
            )

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(OrderRepository, order_repository)
        container.register_singleton(CustomerRepository, customer_repository)
        container.register_singleton(ProductRepository, product_repository)
