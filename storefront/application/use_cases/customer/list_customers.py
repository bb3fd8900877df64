"""
List Customers Use Case
=======================

Returns one page of customers with their orders.
"""
from storefront.domain.exceptions import InvalidArgumentError
from storefront.domain.models.customer import Customer
from storefront.domain.models.page import Page
from storefront.domain.repositories.customer_repository import CustomerRepository


class ListCustomersUseCase:
    """Use case for paginated customer listing."""

    def __init__(self, repository: CustomerRepository, page_size: int = 10):
        self._repository = repository
        self._page_size = page_size

    def execute(self, page: int) -> Page[Customer]:
        if page < 1:
            raise InvalidArgumentError("page", page, "pages start at 1")
        return self._repository.list_page(page, self._page_size)
