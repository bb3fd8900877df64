"""
Rule: purchase_frequency
------------------------

A customer can purchase only a single time per rolling calendar month.
Orders dated on or after (now - 1 month) block the purchase.
"""
from storefront.application.eligibility.context import PurchaseContext
from storefront.application.eligibility.registry import register_rule
from storefront.utils.datetime_utils import subtract_months


@register_rule("purchase_frequency", priority=10)
def evaluate_purchase_frequency(context: PurchaseContext) -> bool:
    since = subtract_months(context.now, 1)
    return context.orders.count_since(context.customer_id, since) == 0
