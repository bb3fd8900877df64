"""
Storefront
==========

Storefront backend: product/customer listings, purchase eligibility
and order payment.
"""

__version__ = "1.0.0"
