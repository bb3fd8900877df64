"""
MongoDB Order Repository
========================

Concrete implementation of OrderRepository using MongoDB.
"""
import logging
from datetime import datetime
from typing import List
from bson.decimal128 import Decimal128
from pymongo import ASCENDING
from pymongo.collection import Collection

from storefront.domain.constants.order_fields import OrderFields
from storefront.domain.models.order import Order
from storefront.domain.repositories.order_repository import OrderRepository
from storefront.infrastructure.db.mongo_sequence import MongoSequence
from storefront.utils.datetime_utils import ensure_utc

logger = logging.getLogger(__name__)


class MongoOrderRepository(OrderRepository):
    """MongoDB implementation of OrderRepository."""

    SEQUENCE_NAME = "orders"

    def __init__(self, collection: Collection, counters: Collection):
        self._collection = collection
        self._sequence = MongoSequence(counters, self.SEQUENCE_NAME)
        self._collection.create_index([(OrderFields.CUSTOMER_ID, ASCENDING), (OrderFields.ORDER_DATE, ASCENDING)])

    @staticmethod
    def to_entity(doc: dict) -> Order:
        """Convert MongoDB document to Order entity."""
        value = doc[OrderFields.VALUE]
        if isinstance(value, Decimal128):
            value = value.to_decimal()
        return Order(
            id=doc[OrderFields.ID],
            value=value,
            customer_id=doc[OrderFields.CUSTOMER_ID],
            order_date=doc[OrderFields.ORDER_DATE],
        )

    @staticmethod
    def to_document(order: Order) -> dict:
        """Convert Order entity to MongoDB document."""
        return {
            OrderFields.MONGO_ID: order.id,
            OrderFields.ID: order.id,
            OrderFields.VALUE: Decimal128(order.value),
            OrderFields.CUSTOMER_ID: order.customer_id,
            OrderFields.ORDER_DATE: ensure_utc(order.order_date),
        }

    def create(self, order: Order) -> Order:
        """Insert an order under a freshly allocated id."""
        saved = order.model_copy(update={"id": self._sequence.next_value()})
        self._collection.insert_one(self.to_document(saved))
        return saved

    def count_since(self, customer_id: int, since: datetime) -> int:
        return self._collection.count_documents({
            OrderFields.CUSTOMER_ID: customer_id,
            OrderFields.ORDER_DATE: {"$gte": ensure_utc(since)},
        })

    def customer_has_any_order(self, customer_id: int) -> bool:
        return self._collection.count_documents({OrderFields.CUSTOMER_ID: customer_id}, limit=1) > 0

    def find_by_customer_id(self, customer_id: int) -> List[Order]:
        docs = self._collection.find({OrderFields.CUSTOMER_ID: customer_id}).sort(OrderFields.ORDER_DATE, ASCENDING)
        return [self.to_entity(doc) for doc in docs]

    def find_by_customer_ids(self, customer_ids: List[int]) -> List[Order]:
        """Orders for several customers at once (used by customer listing)."""
        docs = self._collection.find({OrderFields.CUSTOMER_ID: {"$in": customer_ids}}).sort(OrderFields.ORDER_DATE, ASCENDING)
        return [self.to_entity(doc) for doc in docs]

    def delete_by_customer_id(self, customer_id: int) -> int:
        result = self._collection.delete_many({OrderFields.CUSTOMER_ID: customer_id})
        return result.deleted_count
