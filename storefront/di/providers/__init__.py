"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .clock_provider import ClockProvider
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .payment_provider import PaymentProvider
from .customer_provider import CustomerProvider
from .order_provider import OrderProvider
from .product_provider import ProductProvider

__all__ = [
    "ClockProvider",
    "DatabaseProvider",
    "RepositoryProvider",
    "PaymentProvider",
    "CustomerProvider",
    "OrderProvider",
    "ProductProvider",
]
