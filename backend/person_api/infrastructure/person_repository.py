"""Mongo Person Repository: one driver call per method, errors mapped once.

Invariants:
    - Every method issues exactly one collection call
    - Inserted/updated documents always carry all four person fields
    - PyMongoError never escapes: it becomes DatabaseError(str(e), operation)
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from bson import ObjectId
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from person_api.core.errors import DatabaseError
from person_api.infrastructure.database import get_collection
from person_api.schemas.person import DeleteResult, InsertResult, UpdateResult

logger = logging.getLogger(__name__)


class MongoPersonRepository:
    """PersonRepository backed by a motor collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    @asynccontextmanager
    async def _operation(self, name: str, person_id: ObjectId | None = None) -> AsyncGenerator[None, None]:
        try:
            yield
        except PyMongoError as e:
            logger.error(
                f"Person {name} failed: {e}",
                extra={"operation": name, "person_id": str(person_id) if person_id else None},
            )
            raise DatabaseError(str(e), name)

    async def find(self, person_id: ObjectId | None = None) -> list[dict]:
        query = {"_id": person_id} if person_id is not None else {}
        async with self._operation("find", person_id):
            return await self._collection.find(query).to_list(length=None)

    async def insert(self, fields: dict) -> InsertResult:
        # insert_one writes the generated _id back into the dict it receives
        async with self._operation("insert"):
            result = await self._collection.insert_one(dict(fields))
        logger.info(
            f"Person inserted: {result.inserted_id}",
            extra={"operation": "insert", "person_id": str(result.inserted_id)},
        )
        return InsertResult.from_driver(result)

    async def overwrite(self, person_id: ObjectId, fields: dict) -> UpdateResult:
        async with self._operation("update", person_id):
            result = await self._collection.update_one(
                {"_id": person_id}, {"$set": fields},
            )
        return UpdateResult.from_driver(result)

    async def delete(self, person_id: ObjectId) -> DeleteResult:
        async with self._operation("delete", person_id):
            result = await self._collection.delete_one({"_id": person_id})
        return DeleteResult.from_driver(result)


def get_person_repository(
    collection: AsyncIOMotorCollection = Depends(get_collection),
) -> MongoPersonRepository:
    """FastAPI dependency: repository bound to the shared collection."""
    return MongoPersonRepository(collection)
