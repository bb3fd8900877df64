"""
Payment processor registry
--------------------------

Immutable lookup table from method token to processor instance. Built once
at startup and injected wherever payments are dispatched.
"""
from types import MappingProxyType
from typing import Iterable, List, Mapping

from storefront.domain.exceptions import UnsupportedPaymentMethodError
from storefront.payments.base import PaymentProcessor


class PaymentProcessorRegistry:
    """Maps case-insensitive method tokens to processors."""

    def __init__(self, processors: Iterable[PaymentProcessor]):
        table = {}
        for processor in processors:
            token = processor.method.strip().lower()
            if token in table:
                raise ValueError(f"Duplicate payment processor for method '{token}'")
            table[token] = processor
        self._processors: Mapping[str, PaymentProcessor] = MappingProxyType(table)

    @property
    def methods(self) -> List[str]:
        """Registered method tokens, in registration order."""
        return list(self._processors.keys())

    def resolve(self, method: str) -> PaymentProcessor:
        """
        Find the processor for a method token.

        Raises:
            UnsupportedPaymentMethodError: if no processor matches
        """
        processor = self._processors.get((method or "").strip().lower())
        if processor is None:
            raise UnsupportedPaymentMethodError(method)
        return processor

    def __contains__(self, method: str) -> bool:
        return (method or "").strip().lower() in self._processors

    def __len__(self) -> int:
        return len(self._processors)
