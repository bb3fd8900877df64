from decimal import Decimal

import pytest

from storefront.application.services.customer_service import CustomerService
from storefront.application.services.order_service import OrderService
from storefront.application.services.product_service import ProductService
from storefront.core.config import Settings
from storefront.di.container import DIContainer
from storefront.domain.exceptions import CustomerNotFoundError, PaymentFailedError
from storefront.domain.models.customer import Customer
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.payments.registry import PaymentProcessorRegistry
from storefront.utils.clock import Clock, SystemClock


def test_memory_container_wires_services(settings, clock):
    container = DIContainer(settings=settings, clock=clock)

    assert container.get(Clock) is clock
    assert isinstance(container.get(CustomerService), CustomerService)
    assert isinstance(container.get(OrderService), OrderService)
    assert isinstance(container.get(ProductService), ProductService)
    assert container.get(PaymentProcessorRegistry).methods == ["pix", "creditcard", "paypal"]
    assert not container.has("mongo_client")


def test_system_clock_is_the_default(settings):
    assert isinstance(DIContainer(settings=settings).get(Clock), SystemClock)


def test_unknown_registration_raises(settings, clock):
    with pytest.raises(ValueError):
        DIContainer(settings=settings, clock=clock).get("nothing")


def test_unknown_backend_is_rejected(monkeypatch):
    monkeypatch.setenv("STORAGE_BACKEND", "sqlite")
    with pytest.raises(ValueError, match="sqlite"):
        DIContainer(settings=Settings())


@pytest.mark.asyncio
async def test_failing_methods_setting_injects_declines(monkeypatch, settings, clock):
    monkeypatch.setenv("PAYMENT_FAILING_METHODS", " PayPal , creditcard")
    container = DIContainer(settings=Settings(), clock=clock)
    container.get(CustomerRepository).create(Customer(id=1, name="C"))
    service = container.get(OrderService)

    with pytest.raises(PaymentFailedError):
        await service.pay_order("paypal", Decimal("10"), 1)
    with pytest.raises(PaymentFailedError):
        await service.pay_order("creditcard", Decimal("10"), 1)

    order = await service.pay_order("pix", Decimal("10"), 1)
    assert service.list_orders_for_customer(1) == [order]


@pytest.mark.asyncio
async def test_order_service_requires_an_existing_customer(settings, clock):
    service = DIContainer(settings=settings, clock=clock).get(OrderService)

    with pytest.raises(CustomerNotFoundError):
        await service.pay_order("pix", Decimal("10"), 7)
    with pytest.raises(CustomerNotFoundError):
        service.list_orders_for_customer(7)


def test_settings_defaults(monkeypatch):
    for name in ("STORAGE_BACKEND", "BUSINESS_TIMEZONE", "DISPLAY_TIMEZONE", "PAGE_SIZE",
                 "PAYMENT_LATENCY_SCALE", "PAYMENT_FAILING_METHODS", "SEED_ON_STARTUP"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings()

    assert settings.storage_backend == "mongo"
    assert settings.business_timezone == "UTC"
    assert settings.display_timezone == "America/Sao_Paulo"
    assert settings.page_size == 10
    assert settings.payment_latency_scale == 1.0
    assert settings.payment_failing_methods == frozenset()
    assert settings.seed_on_startup is False
