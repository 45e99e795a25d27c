"""Boundary Protocols: contract between routes and the persistence shell.

Invariants:
    - Routes depend on PersonRepository, never on the driver directly
    - Each method performs exactly one store round-trip
    - Implementations raise DatabaseError for store failures; empty results are
      returned as-is (mapping emptiness to 404 is the caller's decision)
"""

from typing import Protocol

from bson import ObjectId

from person_api.schemas.person import DeleteResult, InsertResult, UpdateResult


class PersonRepository(Protocol):
    """Contract for person persistence, implemented by infrastructure/."""
    async def find(self, person_id: ObjectId | None = None) -> list[dict]: ...
    async def insert(self, fields: dict) -> InsertResult: ...
    async def overwrite(self, person_id: ObjectId, fields: dict) -> UpdateResult: ...
    async def delete(self, person_id: ObjectId) -> DeleteResult: ...
