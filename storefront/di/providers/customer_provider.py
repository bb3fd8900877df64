from typing import TYPE_CHECKING
from ...application.services.customer_service import CustomerService
from ...core.config import Settings
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.order_repository import OrderRepository
from ...utils.clock import Clock
from ...utils.datetime_utils import get_zone

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CustomerProvider:
    """Customer service provider - registers customer-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register customer service.
        Service is created with repositories and clock from container.
        """
        settings = container.get(Settings)
        container.register_singleton(
            CustomerService,
            CustomerService(
                repository=container.get(CustomerRepository),
                order_repository=container.get(OrderRepository),
                clock=container.get(Clock),
                business_timezone=get_zone(settings.business_timezone),
                page_size=settings.page_size,
            )
        )
