"""
Processor catalogue
-------------------

Provides a simple catalogue + decorator for processor classes.
Each built-in processor registers its class under its method token.
"""
from typing import Callable, Dict, Type

from storefront.payments.base import PaymentProcessor

processor_catalogue: Dict[str, Type[PaymentProcessor]] = {}


def register_processor(processor_class: Type[PaymentProcessor]) -> Type[PaymentProcessor]:
    """
    Class decorator to register a processor under its `method` token.
    Registering the same token twice is an error.
    """
    token = processor_class.method.strip().lower()
    if not token:
        raise ValueError(f"{processor_class.__name__} does not declare a payment method")
    if token in processor_catalogue:
        raise ValueError(f"Payment method '{token}' is already registered")
    processor_catalogue[token] = processor_class
    return processor_class
