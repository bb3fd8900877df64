"""
Product Controller
==================

FastAPI controller for product listing.
"""
from fastapi import APIRouter, Depends, Query

from storefront.api.v1.dependencies import get_product_service
from storefront.api.v1.errors import to_http_exception
from storefront.application.dto.product_dto import ProductListResponse
from storefront.application.services.product_service import ProductService
from storefront.domain.exceptions import StorefrontError

router = APIRouter(tags=["products"])


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List products",
    description="Get one page of products ordered by id."
)
async def list_products(
    page: int = Query(1, description="Page number (1-based)"),
    service: ProductService = Depends(get_product_service),
) -> ProductListResponse:
    try:
        return ProductListResponse.from_page(service.list_products(page))
    except StorefrontError as e:
        raise to_http_exception(e)
