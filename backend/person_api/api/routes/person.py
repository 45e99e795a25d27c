"""Person Routes: four HTTP verbs mapped onto four repository calls.

Invariants:
    - Each handler performs exactly one repository call
    - Path identifiers are parsed before the store is touched; malformed ids
      raise InvalidIdentifierError (400) instead of widening the filter
    - An empty read result is PersonNotFoundError (404); update/delete results
      are passed through even when nothing matched
"""

import logging

from fastapi import APIRouter, Depends

from person_api.core.domain_types import parse_person_id
from person_api.core.errors import PersonNotFoundError
from person_api.core.format_documents import format_documents
from person_api.core.repository_protocols import PersonRepository
from person_api.infrastructure.person_repository import get_person_repository
from person_api.schemas.person import (
    DeleteResult, InsertResult, PersonWrite, UpdateResult,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/person", tags=["person"])


@router.get("")
@router.get("/", include_in_schema=False)
async def list_persons(
    repo: PersonRepository = Depends(get_person_repository),
) -> list[dict]:
    """Every document in the collection."""
    documents = await repo.find()
    if not documents:
        raise PersonNotFoundError()
    return format_documents(documents)


@router.get("/{person_id}")
async def get_person(
    person_id: str, repo: PersonRepository = Depends(get_person_repository),
) -> list[dict]:
    """Documents whose _id equals person_id (a one-element array when found)."""
    documents = await repo.find(parse_person_id(person_id))
    if not documents:
        raise PersonNotFoundError(person_id)
    return format_documents(documents)


@router.post("", response_model=InsertResult)
@router.post("/", response_model=InsertResult, include_in_schema=False)
async def create_person(
    body: PersonWrite, repo: PersonRepository = Depends(get_person_repository),
):
    return await repo.insert(body.to_document())


@router.put("/{person_id}", response_model=UpdateResult)
async def update_person(
    person_id: str,
    body: PersonWrite,
    repo: PersonRepository = Depends(get_person_repository),
):
    """Overwrite all four fields; fields missing from the body become null."""
    oid = parse_person_id(person_id)
    result = await repo.overwrite(oid, body.to_document())
    if result.matched_count == 0:
        logger.info(
            f"Update matched no person {person_id}",
            extra={"operation": "update", "person_id": person_id},
        )
    return result


@router.delete("/{person_id}", response_model=DeleteResult)
async def delete_person(
    person_id: str, repo: PersonRepository = Depends(get_person_repository),
):
    oid = parse_person_id(person_id)
    return await repo.delete(oid)
