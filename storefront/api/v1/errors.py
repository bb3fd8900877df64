"""
Error mapping
=============

Translate domain exceptions into HTTPExceptions.
"""
from fastapi import HTTPException, status

from storefront.domain.exceptions import (
    InvalidArgumentError,
    NotFoundError,
    PaymentFailedError,
    StorefrontError,
    UnsupportedPaymentMethodError,
)

STATUS_BY_ERROR = (
    (InvalidArgumentError, status.HTTP_400_BAD_REQUEST),
    (UnsupportedPaymentMethodError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (PaymentFailedError, status.HTTP_402_PAYMENT_REQUIRED),
)


def to_http_exception(error: StorefrontError) -> HTTPException:
    for error_type, status_code in STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))
