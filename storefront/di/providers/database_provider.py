import logging
from typing import TYPE_CHECKING
from ...core.config import Settings
from ...infrastructure.memory.memory_store import InMemoryStore

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database handle for the configured backend.
        Change STORAGE_BACKEND, and all repositories automatically get the new store.
        """
        settings = container.get(Settings)

        if settings.storage_backend == "memory":
            container.register_singleton("memory_store", InMemoryStore())
        elif settings.storage_backend == "mongo":
            from ...infrastructure.db.mongo_connection import MongoClientManager
            container.register_singleton(
                "mongo_client",
                MongoClientManager(settings.mongo_uri, settings.mongo_database_name),
            )
        else:
            raise ValueError(f"Unknown STORAGE_BACKEND '{settings.storage_backend}' (expected 'mongo' or 'memory')")

        logger.info(f"Using '{settings.storage_backend}' storage backend")
