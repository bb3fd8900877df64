"""
Product DTO
===========

Pydantic models for product API responses.
"""
from typing import List
from pydantic import BaseModel

from storefront.domain.models.page import Page
from storefront.domain.models.product import Product


class ProductResponse(BaseModel):
    id: int
    name: str


class ProductListResponse(BaseModel):
    """DTO for one page of products."""
    has_next: bool
    total_count: int
    current_page: int
    page_size: int
    products: List[ProductResponse]

    @classmethod
    def from_page(cls, page: Page[Product]) -> "ProductListResponse":
        return cls(
            has_next=page.has_next,
            total_count=page.total_count,
            current_page=page.current_page,
            page_size=page.page_size,
            products=[ProductResponse(id=product.id, name=product.name) for product in page.items],
        )
