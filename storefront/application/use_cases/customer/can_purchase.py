"""
Can Purchase Use Case
=====================

Decides whether a customer may make a purchase right now.
"""
from datetime import timezone, tzinfo
from decimal import Decimal, InvalidOperation
from typing import Union

# Registers the built-in eligibility rules
import storefront.application.eligibility  # noqa: F401
from storefront.application.eligibility.context import EligibilityDecision, PurchaseContext
from storefront.application.eligibility.engine import evaluate_rules
from storefront.domain.exceptions import CustomerNotFoundError, InvalidArgumentError
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.domain.repositories.order_repository import OrderRepository
from storefront.utils.clock import Clock


class CanPurchaseUseCase:
    """Use case for the purchase eligibility check."""

    def __init__(
        self,
        customer_repository: CustomerRepository,
        order_repository: OrderRepository,
        clock: Clock,
        business_timezone: tzinfo = timezone.utc,
    ):
        self._customer_repository = customer_repository
        self._order_repository = order_repository
        self._clock = clock
        self._business_timezone = business_timezone

    def execute(self, customer_id: int, purchase_value: Union[Decimal, int, float, str]) -> bool:
        """
        Check whether the customer may purchase `purchase_value` now.

        Returns:
            True if every business rule passes, False otherwise

        Raises:
            InvalidArgumentError: non-positive customer_id or purchase_value
            CustomerNotFoundError: the customer does not exist
        """
        return self.evaluate(customer_id, purchase_value).allowed

    def evaluate(self, customer_id: int, purchase_value: Union[Decimal, int, float, str]) -> EligibilityDecision:
        """Same as execute(), but also reports which rule denied the purchase."""
        if customer_id <= 0:
            raise InvalidArgumentError("customer_id", customer_id, "must be a positive identifier")

        try:
            value = Decimal(str(purchase_value))
        except InvalidOperation:
            raise InvalidArgumentError("purchase_value", purchase_value, "must be a decimal number")
        if not value.is_finite() or value <= 0:
            raise InvalidArgumentError("purchase_value", purchase_value, "must be greater than zero")

        # Business Rule: Non registered Customers cannot purchase
        if self._customer_repository.find_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)

        context = PurchaseContext(
            customer_id=customer_id,
            purchase_value=value,
            now=self._clock.now(),
            business_timezone=self._business_timezone,
            orders=self._order_repository,
        )
        return evaluate_rules(context)
