"""
Payments package
----------------

Purpose:
- Define one PaymentProcessor per supported payment method.
- Resolve a method token to its processor through an immutable registry.

Auto-registration:
- Import processor modules here so they register themselves in the catalogue.
"""

# Ensure built-in processors register on package import
from storefront.payments.processors import pix  # noqa: F401
from storefront.payments.processors import credit_card  # noqa: F401
from storefront.payments.processors import paypal  # noqa: F401
