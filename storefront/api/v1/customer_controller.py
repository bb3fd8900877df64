"""
Customer Controller
===================

FastAPI controller for customer listing and purchase eligibility.
"""
from datetime import tzinfo
from decimal import Decimal

from fastapi import APIRouter, Depends, Query

from storefront.api.v1.dependencies import get_customer_service, get_display_zone
from storefront.api.v1.errors import to_http_exception
from storefront.application.dto.customer_dto import CanPurchaseResponse, CustomerListResponse
from storefront.application.services.customer_service import CustomerService
from storefront.domain.exceptions import StorefrontError

router = APIRouter(tags=["customers"])


@router.get(
    "",
    response_model=CustomerListResponse,
    summary="List customers",
    description="Get one page of customers with their orders. Order dates are rendered in the display timezone."
)
async def list_customers(
    page: int = Query(1, description="Page number (1-based)"),
    service: CustomerService = Depends(get_customer_service),
    display_zone: tzinfo = Depends(get_display_zone),
) -> CustomerListResponse:
    try:
        return CustomerListResponse.from_page(service.list_customers(page), display_zone)
    except StorefrontError as e:
        raise to_http_exception(e)


@router.get(
    "/{customer_id}/can-purchase",
    response_model=CanPurchaseResponse,
    summary="Check purchase eligibility",
    description="""
    Check whether a customer may purchase the given value right now.

    A purchase is allowed when the customer has no order in the last
    calendar month, a first purchase does not exceed 100, and the request
    falls on a weekday between 08:00 and 18:59 (business timezone).
    """
)
async def can_purchase(
    customer_id: int,
    value: Decimal = Query(..., description="Purchase value"),
    service: CustomerService = Depends(get_customer_service),
) -> CanPurchaseResponse:
    try:
        decision = service.evaluate_purchase(customer_id, value)
    except StorefrontError as e:
        raise to_http_exception(e)

    return CanPurchaseResponse(
        customer_id=customer_id,
        purchase_value=value,
        can_purchase=decision.allowed,
        reason=decision.reason,
    )
