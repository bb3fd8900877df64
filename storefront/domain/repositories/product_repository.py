"""
Product Repository Interface
============================

Abstract interface for product data access.
"""
from abc import ABC, abstractmethod

from storefront.domain.models.page import Page
from storefront.domain.models.product import Product


class ProductRepository(ABC):
    """Abstract repository interface for product operations."""

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Create a new product."""
        pass

    @abstractmethod
    def list_page(self, page: int, page_size: int) -> Page[Product]:
        """Return one page of products ordered by id."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count products."""
        pass
