"""
Eligibility rules package
-------------------------

Purpose:
- Define the business rules a purchase must satisfy.
- Evaluate them in priority order; the first denial wins.

Auto-registration:
- Import rule type modules here so they register themselves in the registry.
"""

# Ensure rule types register on package import
from storefront.application.eligibility.rule_types import purchase_frequency  # noqa: F401
from storefront.application.eligibility.rule_types import first_purchase_cap  # noqa: F401
from storefront.application.eligibility.rule_types import business_hours  # noqa: F401
