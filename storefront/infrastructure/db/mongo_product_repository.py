"""
MongoDB Product Repository
==========================

Concrete implementation of ProductRepository using MongoDB.
"""
from pymongo import ASCENDING
from pymongo.collection import Collection

from storefront.domain.constants.product_fields import ProductFields
from storefront.domain.models.page import Page
from storefront.domain.models.product import Product
from storefront.domain.repositories.product_repository import ProductRepository


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository."""

    def __init__(self, collection: Collection):
        self._collection = collection

    def create(self, product: Product) -> Product:
        self._collection.insert_one({
            ProductFields.MONGO_ID: product.id,
            ProductFields.ID: product.id,
            ProductFields.NAME: product.name,
        })
        return product

    def list_page(self, page: int, page_size: int) -> Page[Product]:
        total_count = self._collection.count_documents({})
        docs = (
            self._collection.find({})
            .sort(ProductFields.ID, ASCENDING)
            .skip((page - 1) * page_size)
            .limit(page_size)
        )
        products = [Product(id=doc[ProductFields.ID], name=doc[ProductFields.NAME]) for doc in docs]
        return Page[Product].build(products, total_count, page, page_size)

    def count(self) -> int:
        return self._collection.count_documents({})
