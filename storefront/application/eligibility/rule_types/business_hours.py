"""
Rule: business_hours
--------------------

Purchases are accepted Monday to Friday, from 08:00 through 18:59 local
time in the business timezone (hours 8 and 18 both count).
"""
from storefront.application.eligibility.context import PurchaseContext
from storefront.application.eligibility.registry import register_rule
from storefront.utils.datetime_utils import to_zone

OPENING_HOUR = 8
CLOSING_HOUR = 18
WORKING_DAYS = range(0, 5)  # Monday..Friday (datetime.weekday())


@register_rule("business_hours", priority=30)
def evaluate_business_hours(context: PurchaseContext) -> bool:
    local_now = to_zone(context.now, context.business_timezone)
    return OPENING_HOUR <= local_now.hour <= CLOSING_HOUR and local_now.weekday() in WORKING_DAYS
