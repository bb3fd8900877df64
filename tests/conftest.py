"""
Pytest configuration and fixtures.
"""
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from storefront.application.use_cases.customer.can_purchase import CanPurchaseUseCase
from storefront.core.config import Settings
from storefront.domain.models.customer import Customer
from storefront.domain.models.order import Order
from storefront.infrastructure.memory.memory_store import (
    InMemoryCustomerRepository,
    InMemoryOrderRepository,
    InMemoryProductRepository,
    InMemoryStore,
)
from storefront.utils.clock import FixedClock

# Thursday, inside business hours
THURSDAY_10AM = datetime(2023, 6, 15, 10, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings(monkeypatch) -> Settings:
    """Test settings: in-memory store, no simulated payment latency."""
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("PAYMENT_LATENCY_SCALE", "0")
    monkeypatch.setenv("BUSINESS_TIMEZONE", "UTC")
    monkeypatch.setenv("DISPLAY_TIMEZONE", "America/Sao_Paulo")
    monkeypatch.setenv("PAGE_SIZE", "10")
    monkeypatch.delenv("PAYMENT_FAILING_METHODS", raising=False)
    return Settings()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(THURSDAY_10AM)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def customer_repository(store: InMemoryStore) -> InMemoryCustomerRepository:
    return InMemoryCustomerRepository(store)


@pytest.fixture
def order_repository(store: InMemoryStore) -> InMemoryOrderRepository:
    return InMemoryOrderRepository(store)


@pytest.fixture
def product_repository(store: InMemoryStore) -> InMemoryProductRepository:
    return InMemoryProductRepository(store)


@pytest.fixture
def add_customer(customer_repository):
    def _add(customer_id: int = 1, name: str = "Test Customer") -> Customer:
        return customer_repository.create(Customer(id=customer_id, name=name))
    return _add


@pytest.fixture
def add_order(order_repository):
    def _add(order_date: datetime, customer_id: int = 1, value: str = "50") -> Order:
        return order_repository.create(
            Order(value=Decimal(value), customer_id=customer_id, order_date=order_date)
        )
    return _add


@pytest.fixture
def can_purchase(customer_repository, order_repository, clock) -> CanPurchaseUseCase:
    return CanPurchaseUseCase(customer_repository, order_repository, clock)
