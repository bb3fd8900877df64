"""
MongoDB Sequences
=================

Integer identity columns on top of MongoDB: one counter document per
sequence, incremented atomically.
"""
from pymongo import ReturnDocument
from pymongo.collection import Collection


class MongoSequence:
    """Monotonic integer ids backed by a counters collection."""

    def __init__(self, counters: Collection, name: str):
        self._counters = counters
        self._name = name

    def next_value(self) -> int:
        """Allocate the next id."""
        result = self._counters.find_one_and_update(
            {"_id": self._name},
            {"$inc": {"value": 1}},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        return int(result["value"])

