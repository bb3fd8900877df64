"""
Seed data
---------

Purpose:
- Insert the initial customers and products so a fresh store has
  something to list and purchase against.

Only empty collections are seeded; existing data is never touched.
"""
import logging

from storefront.domain.models.customer import Customer
from storefront.domain.models.product import Product
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.domain.repositories.product_repository import ProductRepository

logger = logging.getLogger(__name__)

CUSTOMER_NAMES = [
    "Lorene Friesen", "Esther Cronin", "Angelica Tromp", "Brittany Wunsch",
    "Edgar Gislason", "Elvira Goyette", "Katrina Rodriguez", "Mable Kuvalis",
    "Beverly Cassin", "Clinton Jacobson", "Heather King", "Ethel Huel",
    "Veronica Hodkiewicz", "Christopher Ernser", "Nicole Ebert", "Ryan Blanda",
    "Sandra Huel", "Carlos Kuvalis", "Aubrey Ernser", "Lauren Hills",
]

PRODUCT_NAMES = [
    "Refined Steel Table", "Handmade Soft Tuna", "Ergonomic Rubber Car", "Incredible Fresh Mouse",
    "Gorgeous Frozen Fish", "Small Concrete Fish", "Tasty Cotton Cheese", "Rustic Rubber Pants",
    "Handcrafted Plastic Chips", "Gorgeous Concrete Tuna", "Small Cotton Bike", "Practical Cotton Hat",
    "Unbranded Metal Cheese", "Rustic Cotton Pizza", "Tasty Frozen Car", "Intelligent Plastic Hat",
    "Licensed Metal Chips", "Unbranded Frozen Mouse", "Licensed Cotton Table", "Sleek Fresh Sausages",
]


def seed_database(customer_repository: CustomerRepository, product_repository: ProductRepository) -> None:
    """Insert customers and products (ids starting at 1) into empty stores."""
    if customer_repository.count() == 0:
        for customer_id, name in enumerate(CUSTOMER_NAMES, start=1):
            customer_repository.create(Customer(id=customer_id, name=name))
        logger.info(f"Seeded {len(CUSTOMER_NAMES)} customers")

    if product_repository.count() == 0:
        for product_id, name in enumerate(PRODUCT_NAMES, start=1):
            product_repository.create(Product(id=product_id, name=name))
        logger.info(f"Seeded {len(PRODUCT_NAMES)} products")
