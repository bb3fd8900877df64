"""
Dependency Container
====================

Dependency injection for FastAPI routes.
Provides singleton instances of services and settings from the DI container.
"""
from datetime import tzinfo

from storefront.application.services.customer_service import CustomerService
from storefront.application.services.order_service import OrderService
from storefront.application.services.product_service import ProductService
from storefront.core.config import Settings
from storefront.di.container import get_container
from storefront.utils.datetime_utils import get_zone


def get_customer_service() -> CustomerService:
    """
    Get customer service instance (singleton).

    Returns:
        CustomerService instance
    """
    return get_container().get(CustomerService)


def get_order_service() -> OrderService:
    """
    Get order service instance (singleton).

    Returns:
        OrderService instance
    """
    return get_container().get(OrderService)


def get_product_service() -> ProductService:
    """
    Get product service instance (singleton).

    Returns:
        ProductService instance
    """
    return get_container().get(ProductService)


def get_display_zone() -> tzinfo:
    """Timezone used to render order timestamps in responses."""
    return get_zone(get_container().get(Settings).display_timezone)
