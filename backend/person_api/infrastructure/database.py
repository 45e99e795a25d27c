"""Document Store Manager: one shared motor client with an explicit lifecycle.

Invariants:
    - Exactly one AsyncIOMotorClient per process, created by init_store() in the
      FastAPI lifespan and closed by close_store() on shutdown
    - Pool sizing and timeouts come from Settings, never from module constants
    - Driver exceptions surface as DatabaseError (core/errors.py) with the raw
      driver message
"""

import logging
from typing import AsyncGenerator

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from person_api.config import Settings
from person_api.core.errors import DatabaseError

logger = logging.getLogger(__name__)


class DocumentStoreManager:
    """Owns the driver client and hands out the person collection."""

    def __init__(self, settings: Settings):
        self.client = AsyncIOMotorClient(
            settings.mongodb_uri,
            maxPoolSize=settings.mongodb_max_pool_size,
            minPoolSize=settings.mongodb_min_pool_size,
            serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
        )
        self.database_name = settings.database_name
        self.collection_name = settings.collection_name

    def collection(self) -> AsyncIOMotorCollection:
        return self.client[self.database_name][self.collection_name]

    async def ping(self) -> None:
        """Round-trip to the primary; raises DatabaseError when unreachable."""
        try:
            await self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Document store ping failed: {e}")
            raise DatabaseError(str(e), "ping")

    async def health_check(self) -> bool:
        """Check store connectivity (for readiness probes)."""
        try:
            await self.ping()
            return True
        except DatabaseError:
            return False

    def close(self) -> None:
        self.client.close()


# Singleton (initialized on startup)
store_manager: DocumentStoreManager | None = None


async def init_store(settings: Settings) -> DocumentStoreManager:
    """Create the shared client and verify the store answers before serving."""
    global store_manager
    manager = DocumentStoreManager(settings)
    try:
        await manager.ping()
    except DatabaseError:
        manager.close()
        raise
    store_manager = manager
    logger.info(
        f"Connected to document store {settings.database_name}.{settings.collection_name}",
    )
    return manager


def close_store() -> None:
    global store_manager
    if store_manager:
        store_manager.close()
        logger.info("Document store connections closed")
    store_manager = None


async def get_collection() -> AsyncGenerator[AsyncIOMotorCollection, None]:
    """FastAPI dependency for the person collection."""
    if not store_manager:
        raise RuntimeError("Document store not initialized")
    yield store_manager.collection()
