"""
Customer Repository Interface
=============================

Abstract interface for customer data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Optional

from storefront.domain.models.customer import Customer
from storefront.domain.models.page import Page


class CustomerRepository(ABC):
    """Abstract repository interface for customer operations."""

    @abstractmethod
    def create(self, customer: Customer) -> Customer:
        """Create a new customer (the id is supplied by the caller)."""
        pass

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        """Find a customer by its ID. Orders are not loaded."""
        pass

    @abstractmethod
    def list_page(self, page: int, page_size: int) -> Page[Customer]:
        """Return one page of customers, each with its orders loaded."""
        pass

    @abstractmethod
    def delete(self, customer_id: int) -> bool:
        """Delete a customer together with all of its orders."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count customers."""
        pass
