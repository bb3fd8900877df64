"""
MongoDB Customer Repository
===========================

Concrete implementation of CustomerRepository using MongoDB.
Orders live in their own collection; listing joins them in.
"""
from collections import defaultdict
from typing import Optional
from pymongo import ASCENDING
from pymongo.collection import Collection

from storefront.domain.constants.customer_fields import CustomerFields
from storefront.domain.models.customer import Customer
from storefront.domain.models.page import Page
from storefront.domain.repositories.customer_repository import CustomerRepository
from storefront.infrastructure.db.mongo_order_repository import MongoOrderRepository


class MongoCustomerRepository(CustomerRepository):
    """MongoDB implementation of CustomerRepository."""

    def __init__(self, collection: Collection, order_repository: MongoOrderRepository):
        self._collection = collection
        self._order_repository = order_repository

    def _to_entity(self, doc: dict) -> Customer:
        """Convert MongoDB document to Customer entity."""
        return Customer(id=doc[CustomerFields.ID], name=doc[CustomerFields.NAME])

    def _to_document(self, customer: Customer) -> dict:
        """Convert Customer entity to MongoDB document (orders are stored separately)."""
        return {
            CustomerFields.MONGO_ID: customer.id,
            CustomerFields.ID: customer.id,
            CustomerFields.NAME: customer.name,
        }

    def create(self, customer: Customer) -> Customer:
        self._collection.insert_one(self._to_document(customer))
        return customer

    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        doc = self._collection.find_one({CustomerFields.ID: customer_id})
        return self._to_entity(doc) if doc else None

    def list_page(self, page: int, page_size: int) -> Page[Customer]:
        total_count = self._collection.count_documents({})
        docs = list(
            self._collection.find({})
            .sort(CustomerFields.ID, ASCENDING)
            .skip((page - 1) * page_size)
            .limit(page_size)
        )
        customers = [self._to_entity(doc) for doc in docs]

        orders_by_customer = defaultdict(list)
        for order in self._order_repository.find_by_customer_ids([c.id for c in customers]):
            orders_by_customer[order.customer_id].append(order)
        for customer in customers:
            customer.orders = orders_by_customer[customer.id]

        return Page[Customer].build(customers, total_count, page, page_size)

    def delete(self, customer_id: int) -> bool:
        """Delete a customer; its orders go with it."""
        result = self._collection.delete_one({CustomerFields.ID: customer_id})
        if result.deleted_count:
            self._order_repository.delete_by_customer_id(customer_id)
        return result.deleted_count > 0

    def count(self) -> int:
        return self._collection.count_documents({})
