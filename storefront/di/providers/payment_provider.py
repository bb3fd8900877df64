from typing import TYPE_CHECKING
from ...core.config import Settings
from ...payments import catalogue  # noqa: F401  (also registers built-in processors)
from ...payments.registry import PaymentProcessorRegistry

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PaymentProvider:
    """Payment provider - builds the processor registry from the catalogue"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Instantiate every catalogued processor once and register the registry.
        Methods listed in PAYMENT_FAILING_METHODS get processors that decline.
        """
        settings = container.get(Settings)
        processors = [
            processor_class(
                latency_scale=settings.payment_latency_scale,
                fail=token in settings.payment_failing_methods,
            )
            for token, processor_class in catalogue.processor_catalogue.items()
        ]
        container.register_singleton(PaymentProcessorRegistry, PaymentProcessorRegistry(processors))
