from datetime import timezone
from decimal import Decimal

import pytest

import storefront.application.eligibility  # noqa: F401
from storefront.application.eligibility.context import PurchaseContext
from storefront.application.eligibility.engine import evaluate_rules
from storefront.application.eligibility.registry import ordered_rules, register_rule
from tests.conftest import THURSDAY_10AM


@pytest.fixture
def context(order_repository) -> PurchaseContext:
    return PurchaseContext(
        customer_id=1,
        purchase_value=Decimal("50"),
        now=THURSDAY_10AM,
        business_timezone=timezone.utc,
        orders=order_repository,
    )


def test_built_in_rules_run_in_priority_order():
    assert [name for name, _ in ordered_rules()] == [
        "purchase_frequency",
        "first_purchase_cap",
        "business_hours",
    ]


def test_first_denial_short_circuits(context):
    calls = []

    def allow(ctx):
        calls.append("allow")
        return True

    def deny(ctx):
        calls.append("deny")
        return False

    def never(ctx):
        calls.append("never")
        return True

    decision = evaluate_rules(context, [("allow", allow), ("deny", deny), ("never", never)])

    assert decision.allowed is False
    assert decision.reason == "deny"
    assert calls == ["allow", "deny"]


def test_no_rules_means_allowed(context):
    assert evaluate_rules(context, []).allowed is True


def test_registered_rules_allow_a_clean_purchase(context):
    assert evaluate_rules(context).allowed is True


def test_duplicate_rule_name_is_rejected():
    with pytest.raises(ValueError):
        register_rule("business_hours", priority=99)(lambda ctx: True)
    assert len(ordered_rules()) == 3
