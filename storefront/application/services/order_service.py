"""
Order Service
=============

Application service for order payment and order history.
"""
from decimal import Decimal
from typing import List, Union

from storefront.application.use_cases.order.pay_order import PayOrderUseCase
from storefront.domain.exceptions import CustomerNotFoundError
from storefront.domain.models.order import Order
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.domain.repositories.order_repository import OrderRepository
from storefront.payments.registry import PaymentProcessorRegistry
from storefront.utils.clock import Clock


class OrderService:
    """Application service for order operations."""

    def __init__(
        self,
        repository: OrderRepository,
        customer_repository: CustomerRepository,
        payment_registry: PaymentProcessorRegistry,
        clock: Clock,
    ):
        self._repository = repository
        self._customer_repository = customer_repository
        self._payment_registry = payment_registry
        self._pay_use_case = PayOrderUseCase(repository, customer_repository, payment_registry, clock)

    async def pay_order(self, payment_method: str, amount: Union[Decimal, int, float, str], customer_id: int) -> Order:
        """Pay for and record an order."""
        return await self._pay_use_case.execute(payment_method, amount, customer_id)

    def list_orders_for_customer(self, customer_id: int) -> List[Order]:
        """
        All orders of a customer, oldest first.

        Raises:
            CustomerNotFoundError: the customer does not exist
        """
        if self._customer_repository.find_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)
        return self._repository.find_by_customer_id(customer_id)

    def payment_methods(self) -> List[str]:
        """Supported payment method tokens."""
        return self._payment_registry.methods
