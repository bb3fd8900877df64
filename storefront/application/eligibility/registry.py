"""
Rule registry
-------------

Provides a simple registry + decorator for eligibility rule handlers.
Each rule registers a callable and a priority; lower priorities run first.
A handler returns True when the purchase passes the rule.
"""
from typing import Callable, List, Tuple

from storefront.application.eligibility.context import PurchaseContext

RuleHandler = Callable[[PurchaseContext], bool]

rules_registry: List[Tuple[int, str, RuleHandler]] = []


def register_rule(rule_name: str, priority: int) -> Callable[[RuleHandler], RuleHandler]:
    """
    Decorator to register a rule handler under a name and priority.
    """
    def decorator(handler_function: RuleHandler) -> RuleHandler:
        if any(name == rule_name for _, name, _ in rules_registry):
            raise ValueError(f"Eligibility rule '{rule_name}' is already registered")
        rules_registry.append((priority, rule_name, handler_function))
        rules_registry.sort(key=lambda entry: entry[0])
        return handler_function
    return decorator


def ordered_rules() -> List[Tuple[str, RuleHandler]]:
    """Registered rules in evaluation order."""
    return [(name, handler) for _, name, handler in rules_registry]
