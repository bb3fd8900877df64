from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.use_cases.customer.list_customers import ListCustomersUseCase
from storefront.application.use_cases.product.list_products import ListProductsUseCase
from storefront.domain.exceptions import InvalidArgumentError
from storefront.domain.models.customer import Customer
from storefront.infrastructure.seed import seed_database
from tests.conftest import THURSDAY_10AM


@pytest.fixture
def seeded(customer_repository, product_repository):
    seed_database(customer_repository, product_repository)


def test_seed_inserts_twenty_of_each_once(seeded, customer_repository, product_repository):
    seed_database(customer_repository, product_repository)

    assert customer_repository.count() == 20
    assert product_repository.count() == 20
    assert customer_repository.find_by_id(1).name == "Lorene Friesen"


@pytest.mark.parametrize(
    "page, size, has_next, first_id",
    [(1, 10, True, 1), (2, 10, False, 11), (3, 0, False, None)],
)
def test_product_pages(seeded, product_repository, page, size, has_next, first_id):
    result = ListProductsUseCase(product_repository, page_size=10).execute(page)

    assert len(result.items) == size
    assert result.has_next is has_next
    assert result.total_count == 20
    assert result.current_page == page
    if first_id is not None:
        assert result.items[0].id == first_id


def test_customer_page_includes_orders(seeded, customer_repository, add_order):
    add_order(THURSDAY_10AM, customer_id=2)
    add_order(THURSDAY_10AM - timedelta(days=40), customer_id=2)

    result = ListCustomersUseCase(customer_repository, page_size=5).execute(1)

    assert [c.id for c in result.items] == [1, 2, 3, 4, 5]
    assert result.has_next is True
    assert result.items[0].orders == []
    assert result.items[0].is_first_time_buyer()
    assert [o.order_date for o in result.items[1].orders] == [
        THURSDAY_10AM - timedelta(days=40),
        THURSDAY_10AM,
    ]


@pytest.mark.parametrize("page", [0, -1])
def test_pages_start_at_one(customer_repository, product_repository, page):
    with pytest.raises(InvalidArgumentError):
        ListCustomersUseCase(customer_repository).execute(page)
    with pytest.raises(InvalidArgumentError):
        ListProductsUseCase(product_repository).execute(page)


def test_find_by_id_does_not_load_orders(customer_repository, add_customer, add_order):
    add_customer(1)
    add_order(THURSDAY_10AM)

    assert customer_repository.find_by_id(1).orders == []
    assert customer_repository.find_by_id(2) is None


def test_deleting_a_customer_deletes_its_orders(customer_repository, order_repository, add_customer, add_order):
    add_customer(1)
    add_customer(2)
    add_order(THURSDAY_10AM, customer_id=1)
    add_order(THURSDAY_10AM, customer_id=2)

    assert customer_repository.delete(1) is True
    assert customer_repository.delete(1) is False
    assert order_repository.find_by_customer_id(1) == []
    assert len(order_repository.find_by_customer_id(2)) == 1


def test_duplicate_customer_is_rejected(customer_repository, add_customer):
    add_customer(1)
    with pytest.raises(ValueError):
        customer_repository.create(Customer(id=1, name="Again"))


def test_count_since_compares_instants_across_zones(order_repository, add_order):
    add_order(datetime(2023, 6, 15, 7, 0, tzinfo=timezone(timedelta(hours=-3))))  # 10:00 UTC

    assert order_repository.count_since(1, datetime(2023, 6, 15, 10, 0, tzinfo=timezone.utc)) == 1
    assert order_repository.count_since(1, datetime(2023, 6, 15, 10, 0, 1, tzinfo=timezone.utc)) == 0
    assert order_repository.customer_has_any_order(1) is True
    assert order_repository.customer_has_any_order(2) is False
