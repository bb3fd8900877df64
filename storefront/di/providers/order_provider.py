from typing import TYPE_CHECKING
from ...application.services.order_service import OrderService
from ...domain.repositories.customer_repository import CustomerRepository
from ...domain.repositories.order_repository import OrderRepository
from ...payments.registry import PaymentProcessorRegistry
from ...utils.clock import Clock

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class OrderProvider:
    """Order service provider - registers order-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register order service.
        Service is created with repositories, payment registry and clock from container.
        """
        container.register_singleton(
            OrderService,
            OrderService(
                repository=container.get(OrderRepository),
                customer_repository=container.get(CustomerRepository),
                payment_registry=container.get(PaymentProcessorRegistry),
                clock=container.get(Clock),
            )
        )
