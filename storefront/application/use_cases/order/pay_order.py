"""
Pay Order Use Case
==================

Runs a payment through the processor registered for the requested method
and, once it is accepted, persists the order.

Eligibility is not re-checked here; callers run CanPurchaseUseCase first.
"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Union

from storefront.domain.exceptions import CustomerNotFoundError, InvalidArgumentError, PaymentFailedError
from storefront.domain.models.order import Order, to_money
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.domain.repositories.order_repository import OrderRepository
from storefront.payments.registry import PaymentProcessorRegistry
from storefront.utils.clock import Clock

logger = logging.getLogger(__name__)


class PayOrderUseCase:
    """Use case for paying and recording an order."""

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
        self._clock = clock

    async def execute(self, payment_method: str, amount: Union[Decimal, int, float, str], customer_id: int) -> Order:
        """
        Pay for an order and persist it.

        Args:
            payment_method: Method token (case-insensitive)
            amount: Amount to charge
            customer_id: Customer placing the order

        Returns:
            The persisted order with its assigned id

        Raises:
            UnsupportedPaymentMethodError: no processor for payment_method
            InvalidArgumentError: amount or customer_id is malformed
            CustomerNotFoundError: the customer does not exist; nothing is charged
            PaymentFailedError: the processor declined; nothing is persisted
        """
        processor = self._payment_registry.resolve(payment_method)

        try:
            value = to_money(amount)
        except InvalidOperation:
            raise InvalidArgumentError("amount", amount, "must be a decimal number")
        if not value.is_finite():
            raise InvalidArgumentError("amount", amount, "must be a decimal number")
        if value < 0:
            raise InvalidArgumentError("amount", amount, "must not be negative")
        if customer_id <= 0:
            raise InvalidArgumentError("customer_id", customer_id, "must be a positive identifier")

        if self._customer_repository.find_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)

        logger.info(f"Processing {processor.method} payment of {value} for customer {customer_id}")
        approved = await processor.process_payment(value)
        if not approved:
            logger.warning(f"{processor.method} payment of {value} for customer {customer_id} was declined")
            raise PaymentFailedError(processor.method, value)

        order = Order(value=value, customer_id=customer_id, order_date=self._clock.now())
        saved = self._repository.create(order)
        logger.info(f"Order {saved.id} recorded for customer {customer_id} ({value} via {processor.method})")
        return saved
