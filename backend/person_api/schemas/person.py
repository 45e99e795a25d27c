"""Person Schemas: request body parsing and driver result envelopes.

Invariants:
    - PersonWrite accepts lowercase, capitalized (FirstName) and snake_case keys
    - PersonWrite never carries an identifier; `_id`/`id` in a body are ignored
    - to_document() always yields all four stored keys (None when omitted),
      which is what makes PUT a full overwrite
    - Result envelopes expose driver counts/ids as JSON-safe values
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from person_api.core.domain_types import PersonField
from person_api.core.format_documents import format_value


class PersonWrite(BaseModel):
    """Body of POST /person and PUT /person/{id}."""
    model_config = ConfigDict(extra="ignore")

    firstname: str | None = Field(
        None, validation_alias=AliasChoices("firstname", "FirstName", "first_name"),
    )
    lastname: str | None = Field(
        None, validation_alias=AliasChoices("lastname", "LastName", "last_name"),
    )
    email: str | None = Field(
        None, validation_alias=AliasChoices("email", "Email"),
    )
    age: int | None = Field(
        None, validation_alias=AliasChoices("age", "Age"),
    )

    def to_document(self) -> dict:
        """Stored form: every PersonField key present."""
        data = self.model_dump()
        return {f.value: data[f.value] for f in PersonField}


class InsertResult(BaseModel):
    inserted_id: str

    @classmethod
    def from_driver(cls, result: Any) -> "InsertResult":
        return cls(inserted_id=format_value(result.inserted_id))


class UpdateResult(BaseModel):
    matched_count: int
    modified_count: int
    upserted_id: str | None = None

    @classmethod
    def from_driver(cls, result: Any) -> "UpdateResult":
        upserted = result.upserted_id
        return cls(
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_id=format_value(upserted) if upserted is not None else None,
        )


class DeleteResult(BaseModel):
    deleted_count: int

    @classmethod
    def from_driver(cls, result: Any) -> "DeleteResult":
        return cls(deleted_count=result.deleted_count)
