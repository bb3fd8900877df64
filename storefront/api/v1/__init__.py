"""
API v1 Package
===============

Version 1 API controllers.
"""
from .customer_controller import router as customer_router
from .order_controller import router as order_router
from .product_controller import router as product_router

__all__ = ["customer_router", "order_router", "product_router"]
