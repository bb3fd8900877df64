"""
Rule: first_purchase_cap
------------------------

A customer that never bought before can make a first purchase of at most
FIRST_PURCHASE_LIMIT.
"""
from decimal import Decimal

from storefront.application.eligibility.context import PurchaseContext
from storefront.application.eligibility.registry import register_rule

FIRST_PURCHASE_LIMIT = Decimal("100")


@register_rule("first_purchase_cap", priority=20)
def evaluate_first_purchase_cap(context: PurchaseContext) -> bool:
    if context.purchase_value <= FIRST_PURCHASE_LIMIT:
        return True
    return context.orders.customer_has_any_order(context.customer_id)
