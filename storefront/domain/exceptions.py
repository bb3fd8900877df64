"""
Domain Exceptions
=================

Errors raised by the application layer. The API layer maps them to HTTP
status codes; nothing else catches them.

A denied purchase is not an error: eligibility checks return False.
"""
from decimal import Decimal
from typing import Any


class StorefrontError(Exception):
    """Base class for all storefront errors."""


class InvalidArgumentError(StorefrontError, ValueError):
    """A caller supplied a structurally invalid value."""

    def __init__(self, argument: str, value: Any, message: str):
        self.argument = argument
        self.value = value
        super().__init__(f"{argument}: {message} (got {value!r})")


class NotFoundError(StorefrontError, LookupError):
    """A referenced record does not exist."""


class CustomerNotFoundError(NotFoundError):
    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(f"Customer Id {customer_id} does not exist")


class UnsupportedPaymentMethodError(StorefrontError):
    """No payment processor is registered for the requested method."""

    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Payment method '{method}' is not supported")


class PaymentFailedError(StorefrontError):
    """The payment processor declined the payment; nothing was persisted."""

    def __init__(self, method: str, amount: Decimal):
        self.method = method
        self.amount = amount
        super().__init__(f"Payment processing failed for method '{method}' (amount {amount})")
