"""
Customer Model
==============

Domain model representing a customer and (optionally) the orders it owns.
"""
from typing import List
from pydantic import BaseModel, Field

from storefront.domain.models.order import Order


class Customer(BaseModel):
    """
    Domain model representing a customer.

    orders is only populated by listing reads; eligibility checks query the
    order store directly.
    """
    id: int = Field(..., gt=0, description="Unique identifier for the customer")
    name: str = Field(..., description="Display name")
    orders: List[Order] = Field(default_factory=list, description="Orders owned by the customer")

    def is_first_time_buyer(self) -> bool:
        """True if the customer has never placed an order."""
        return not self.orders
