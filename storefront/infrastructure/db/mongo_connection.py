"""
MongoDB Client
==============

Lazily connected MongoDB client shared by all repositories.
"""
import logging
from typing import Optional
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

logger = logging.getLogger(__name__)


class MongoClientManager:
    """
    Owns one MongoClient and hands out collections of the configured database.

    The client is created on first use; timestamps come back timezone-aware
    (tz_aware=True) so order dates compare correctly against UTC instants.
    """

    def __init__(self, uri: str, database_name: str):
        if not uri:
            raise RuntimeError("MONGO_URI not set. Please configure it in your .env file.")
        self._uri = uri
        self._database_name = database_name
        self._client: Optional[MongoClient] = None

    @property
    def database(self) -> Database:
        if self._client is None:
            self._client = MongoClient(self._uri, tz_aware=True)
            logger.info(f"Connected to MongoDB: {self._database_name}")
        return self._client[self._database_name]

    def get_collection(self, collection_name: str) -> Collection:
        """
        Get a MongoDB collection.

        Args:
            collection_name: Name of the collection

        Returns:
            MongoDB Collection object
        """
        return self.database[collection_name]

    def close(self) -> None:
        """Close MongoDB connection (reopened on next use)."""
        if self._client is not None:
            self._client.close()
            self._client = None

