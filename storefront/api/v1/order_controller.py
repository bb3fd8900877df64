"""
Order Controller
================

FastAPI controller for order payment and order history.
"""
from datetime import tzinfo
import logging

from typing import List

from fastapi import APIRouter, Depends, Query, status

from storefront.api.v1.dependencies import get_display_zone, get_order_service
from storefront.api.v1.errors import to_http_exception
from storefront.application.dto.order_dto import OrderResponse, PaymentMethodsResponse, PayOrderRequest
from storefront.application.services.order_service import OrderService
from storefront.domain.exceptions import StorefrontError

logger = logging.getLogger(__name__)
router = APIRouter(tags=["orders"])


@router.post(
    "/pay",
    response_model=OrderResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Pay for an order",
    description="""
    Charge the amount through the requested payment method and record the order.

    Eligibility is not checked here; call the customer can-purchase endpoint first.
    A declined payment records nothing.
    """
)
async def pay_order(
    request: PayOrderRequest,
    service: OrderService = Depends(get_order_service),
    display_zone: tzinfo = Depends(get_display_zone),
) -> OrderResponse:
    try:
        order = await service.pay_order(request.payment_method, request.amount, request.customer_id)
    except StorefrontError as e:
        logger.warning(f"Payment rejected: {e}")
        raise to_http_exception(e)
    return OrderResponse.from_entity(order, display_zone)


@router.get(
    "/payment-methods",
    response_model=PaymentMethodsResponse,
    summary="List payment methods",
)
async def payment_methods(service: OrderService = Depends(get_order_service)) -> PaymentMethodsResponse:
    return PaymentMethodsResponse(methods=service.payment_methods())


@router.get(
    "",
    response_model=List[OrderResponse],
    summary="List a customer's orders",
    description="Orders of one customer, oldest first, with dates in the display timezone.",
)
async def list_orders(
    customer_id: int = Query(..., description="Customer whose orders to list"),
    service: OrderService = Depends(get_order_service),
    display_zone: tzinfo = Depends(get_display_zone),
) -> List[OrderResponse]:
    try:
        orders = service.list_orders_for_customer(customer_id)
    except StorefrontError as e:
        raise to_http_exception(e)
    return [OrderResponse.from_entity(order, display_zone) for order in orders]
