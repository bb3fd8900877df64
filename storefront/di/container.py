# Standard library imports
from typing import Optional

# Local application imports
from storefront.core.config import Settings, get_settings
from storefront.utils.clock import Clock
from .base_container import BaseContainer
from .providers import (
    ClockProvider,
    DatabaseProvider,
    RepositoryProvider,
    PaymentProvider,
    CustomerProvider,
    OrderProvider,
    ProductProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings and Clock (ClockProvider)
    2. Database connections (DatabaseProvider)
    3. Repositories (RepositoryProvider) - depends on database
    4. Payment processors (PaymentProvider) - depends on settings
    5. Services (Customer/Order/Product providers) - depend on all of the above
    """

    def __init__(self, settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> None:
        super().__init__()
        self.register_singleton(Settings, settings or get_settings())
        if clock is not None:
            self.register_singleton(Clock, clock)
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: clock → database → repositories → payments → services
        """
        ClockProvider.register(self)
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        PaymentProvider.register(self)
        CustomerProvider.register(self)
        OrderProvider.register(self)
        ProductProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[DIContainer]) -> None:
    """Replace (or clear) the global container."""
    global _container
    _container = container
