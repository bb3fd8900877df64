# Standard library imports
import os
from typing import Final, FrozenSet, Optional
from dotenv import load_dotenv


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Storage backend: "mongo" or "memory"
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "mongo").strip().lower()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "storefront")

        # Collection Names
        self.customers_collection: Final[str] = os.getenv("CUSTOMERS_COLLECTION", "customers")
        self.orders_collection: Final[str] = os.getenv("ORDERS_COLLECTION", "orders")
        self.products_collection: Final[str] = os.getenv("PRODUCTS_COLLECTION", "products")
        self.counters_collection: Final[str] = os.getenv("COUNTERS_COLLECTION", "counters")

        # Timezone Configuration
        # Business hours are checked in BUSINESS_TIMEZONE; responses are rendered in DISPLAY_TIMEZONE.
        self.business_timezone: Final[str] = os.getenv("BUSINESS_TIMEZONE", "UTC")
        self.display_timezone: Final[str] = os.getenv("DISPLAY_TIMEZONE", "America/Sao_Paulo")

        # Listing Configuration
        self.page_size: Final[int] = int(os.getenv("PAGE_SIZE", "10"))

        # Payment Configuration
        # Multiplier applied to each provider's simulated latency (0 disables the delay)
        self.payment_latency_scale: Final[float] = float(os.getenv("PAYMENT_LATENCY_SCALE", "1.0"))
        # Comma-separated method tokens whose processors decline every payment
        self.payment_failing_methods: Final[FrozenSet[str]] = frozenset(
            token.strip().lower()
            for token in os.getenv("PAYMENT_FAILING_METHODS", "").split(",")
            if token.strip()
        )

        # Startup
        self.seed_on_startup: Final[bool] = os.getenv(
            "SEED_ON_STARTUP", "false"
        ).lower() in ("true", "1", "yes")

        # Logging
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
