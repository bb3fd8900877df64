"""
Eligibility context
-------------------

Everything a rule may look at for one purchase request.
"""
from dataclasses import dataclass
from datetime import datetime, tzinfo
from decimal import Decimal
from typing import Optional

from storefront.domain.repositories.order_repository import OrderRepository


@dataclass(frozen=True)
class PurchaseContext:
    customer_id: int
    purchase_value: Decimal
    now: datetime  # UTC
    business_timezone: tzinfo
    orders: OrderRepository


@dataclass(frozen=True)
class EligibilityDecision:
    """Outcome of an eligibility check. `reason` names the denying rule."""
    allowed: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.allowed
