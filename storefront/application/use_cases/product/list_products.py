"""
List Products Use Case
======================

Returns one page of products.
"""
from storefront.domain.exceptions import InvalidArgumentError
from storefront.domain.models.page import Page
from storefront.domain.models.product import Product
from storefront.domain.repositories.product_repository import ProductRepository


class ListProductsUseCase:
    """Use case for paginated product listing."""

    def __init__(self, repository: ProductRepository, page_size: int = 10):
        self._repository = repository
        self._page_size = page_size

    def execute(self, page: int) -> Page[Product]:
        if page < 1:
            raise InvalidArgumentError("page", page, "pages start at 1")
        return self._repository.list_page(page, self._page_size)
