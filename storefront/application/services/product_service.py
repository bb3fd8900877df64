"""
Product Service
===============

Application service for product listing.
"""
from storefront.application.use_cases.product.list_products import ListProductsUseCase
from storefront.domain.models.page import Page
from storefront.domain.models.product import Product
from storefront.domain.repositories.product_repository import ProductRepository


class ProductService:
    """Application service for product operations."""

    def __init__(self, repository: ProductRepository, page_size: int = 10):
        self._repository = repository
        self._list_use_case = ListProductsUseCase(repository, page_size)

    def list_products(self, page: int) -> Page[Product]:
        return self._list_use_case.execute(page)
