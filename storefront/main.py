"""
FastAPI Application
===================

Main FastAPI app setup with all routes and middleware.
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import __version__
from storefront.api.v1 import customer_router, order_router, product_router
from storefront.core.config import Settings, get_settings
from storefront.di.container import get_container
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.domain.repositories.product_repository import ProductRepository
from storefront.infrastructure.seed import seed_database

logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Logging configuration
    - CORS middleware configuration
    - API route registration
    - Startup/shutdown event handlers (seeding)

    Returns:
        Configured FastAPI application instance
    """
    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    # Create FastAPI app
    application = FastAPI(
        title="Storefront API",
        description="Product and customer listings, purchase eligibility and order payment",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add CORS middleware
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    application.include_router(product_router, prefix="/api/v1/products")
    application.include_router(customer_router, prefix="/api/v1/customers")
    application.include_router(order_router, prefix="/api/v1/orders")

    @application.on_event("startup")
    async def startup_event():
        """
        Build the DI container and seed the store when requested.
        The in-memory store starts empty, so it is always seeded.
        """
        container = get_container()
        settings = container.get(Settings)
        if settings.seed_on_startup or settings.storage_backend == "memory":
            seed_database(container.get(CustomerRepository), container.get(ProductRepository))
        logger.info("Storefront API started")

    @application.on_event("shutdown")
    async def shutdown_event():
        """Close the database connection."""
        container = get_container()
        if container.has("mongo_client"):
            container.get("mongo_client").close()
        logger.info("Storefront API stopped")

    @application.get("/")
    async def root():
        """Root endpoint - health check."""
        return {
            "status": "running",
            "service": "Storefront API",
            "version": __version__,
            "docs": "/docs"
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


# Create application instance
app = create_application()
