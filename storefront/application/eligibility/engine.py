"""
Eligibility engine
------------------

Engine is rule-agnostic. It runs the handlers registered in rules_registry
in priority order and stops at the first one that denies the purchase.
"""
import logging
from typing import List, Optional, Tuple

from storefront.application.eligibility.context import EligibilityDecision, PurchaseContext
from storefront.application.eligibility.registry import RuleHandler, ordered_rules

logger = logging.getLogger(__name__)


def evaluate_rules(
    context: PurchaseContext,
    rules: Optional[List[Tuple[str, RuleHandler]]] = None,
) -> EligibilityDecision:
    """
    Evaluate rules against a purchase (first denial wins).

    - context: the purchase being checked
    - rules: (name, handler) pairs; defaults to the registered rules

    Returns:
      EligibilityDecision(allowed=True) or the decision naming the denying rule
    """
    for rule_name, handler in (rules if rules is not None else ordered_rules()):
        if not handler(context):
            logger.info(
                f"Customer {context.customer_id} denied purchase of {context.purchase_value} "
                f"by rule '{rule_name}'"
            )
            return EligibilityDecision(allowed=False, reason=rule_name)
    return EligibilityDecision(allowed=True)
