"""
Order Repository Interface
==========================

Abstract interface for order data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from storefront.domain.models.order import Order


class OrderRepository(ABC):
    """Abstract repository interface for order operations."""

    @abstractmethod
    def create(self, order: Order) -> Order:
        """
        Persist a new order.

        Args:
            order: Order entity without an id

        Returns:
            The persisted order carrying its newly assigned id
        """
        pass

    @abstractmethod
    def count_since(self, customer_id: int, since: datetime) -> int:
        """Count a customer's orders dated on or after `since`."""
        pass

    @abstractmethod
    def customer_has_any_order(self, customer_id: int) -> bool:
        """Check whether a customer has ever placed an order."""
        pass

    @abstractmethod
    def find_by_customer_id(self, customer_id: int) -> List[Order]:
        """Find all orders for a customer, oldest first."""
        pass
