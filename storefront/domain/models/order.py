"""
Order Model
===========

Domain model representing a paid order.
"""
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional
from pydantic import BaseModel, Field, field_validator

from storefront.utils.datetime_utils import ensure_utc

CENTS = Decimal("0.01")


def to_money(value) -> Decimal:
    """Quantize a monetary value to two decimal places."""
    return Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP)


class Order(BaseModel):
    """
    Domain model representing an order.

    order_date is always stored as timezone-aware UTC; conversion to a
    display zone happens in the API layer.
    """
    id: Optional[int] = Field(None, description="Identifier assigned by the store on insert")
    value: Decimal = Field(..., ge=0, description="Order value (2 decimal places)")
    customer_id: int = Field(..., gt=0, description="Owning customer ID")
    order_date: datetime = Field(..., description="Creation instant (UTC)")

    @field_validator("value", mode="before")
    @classmethod
    def _quantize_value(cls, value):
        return to_money(value)

    @field_validator("order_date")
    @classmethod
    def _normalize_order_date(cls, value: datetime) -> datetime:
        return ensure_utc(value)
