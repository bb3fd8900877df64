"""
Customer DTO
============

Pydantic models for customer API responses.
"""
from datetime import tzinfo
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel

from storefront.application.dto.order_dto import OrderResponse
from storefront.domain.models.customer import Customer
from storefront.domain.models.page import Page


class CustomerResponse(BaseModel):
    """DTO for customer data with its orders."""
    id: int
    name: str
    first_time_buyer: bool
    orders: List[OrderResponse]

    @classmethod
    def from_entity(cls, customer: Customer, display_zone: tzinfo) -> "CustomerResponse":
        return cls(
            id=customer.id,
            name=customer.name,
            first_time_buyer=customer.is_first_time_buyer(),
            orders=[OrderResponse.from_entity(order, display_zone) for order in customer.orders],
        )


class CustomerListResponse(BaseModel):
    """DTO for one page of customers."""
    has_next: bool
    total_count: int
    current_page: int
    page_size: int
    customers: List[CustomerResponse]

    @classmethod
    def from_page(cls, page: Page[Customer], display_zone: tzinfo) -> "CustomerListResponse":
        return cls(
            has_next=page.has_next,
            total_count=page.total_count,
            current_page=page.current_page,
            page_size=page.page_size,
            customers=[CustomerResponse.from_entity(customer, display_zone) for customer in page.items],
        )


class CanPurchaseResponse(BaseModel):
    """DTO for an eligibility check."""
    customer_id: int
    purchase_value: Decimal
    can_purchase: bool
    reason: Optional[str] = None
