"""
Order DTO
=========

Pydantic models for order API requests and responses.
"""
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from storefront.domain.models.order import Order
from storefront.utils.datetime_utils import to_zone


class PayOrderRequest(BaseModel):
    """DTO for paying an order."""
    payment_method: str = Field(..., description="Payment method token (pix, creditcard, paypal)")
    amount: Decimal = Field(..., description="Amount to charge")
    customer_id: int = Field(..., description="Customer placing the order")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "payment_method": "pix",
                "amount": "75.00",
                "customer_id": 1,
            }
        }
    )


class OrderResponse(BaseModel):
    """DTO for order data. order_date is rendered in the display timezone."""
    id: Optional[int]
    value: Decimal
    customer_id: int
    order_date: datetime

    @classmethod
    def from_entity(cls, order: Order, display_zone: tzinfo) -> "OrderResponse":
        return cls(
            id=order.id,
            value=order.value,
            customer_id=order.customer_id,
            order_date=to_zone(order.order_date, display_zone),
        )


class PaymentMethodsResponse(BaseModel):
    """DTO listing the supported payment methods."""
    methods: List[str]
