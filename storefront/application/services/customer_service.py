"""
Customer Service
================

Application service for customer-related operations.
Orchestrates use cases and coordinates business logic.
"""
from datetime import timezone, tzinfo
from decimal import Decimal
from typing import Union

from storefront.application.eligibility.context import EligibilityDecision
from storefront.application.use_cases.customer.can_purchase import CanPurchaseUseCase
from storefront.application.use_cases.customer.list_customers import ListCustomersUseCase
from storefront.domain.models.customer import Customer
from storefront.domain.models.page import Page
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.domain.repositories.order_repository import OrderRepository
from storefront.utils.clock import Clock


class CustomerService:
    """Application service for customer operations."""

    def __init__(
        self,
        repository: CustomerRepository,
        order_repository: OrderRepository,
        clock: Clock,
        business_timezone: tzinfo = timezone.utc,
        page_size: int = 10,
    ):
        self._repository = repository
        self._order_repository = order_repository
        self._list_use_case = ListCustomersUseCase(repository, page_size)
        self._can_purchase_use_case = CanPurchaseUseCase(repository, order_repository, clock, business_timezone)

    def list_customers(self, page: int) -> Page[Customer]:
        """List one page of customers with their orders."""
        return self._list_use_case.execute(page)

    def can_purchase(self, customer_id: int, purchase_value: Union[Decimal, int, float, str]) -> bool:
        """Check whether a customer may purchase now."""
        return self._can_purchase_use_case.execute(customer_id, purchase_value)

    def evaluate_purchase(self, customer_id: int, purchase_value: Union[Decimal, int, float, str]) -> EligibilityDecision:
        """Eligibility check that also names the denying rule."""
        return self._can_purchase_use_case.evaluate(customer_id, purchase_value)
