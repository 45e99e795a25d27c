"""Domain Types: identifier and field names for the person resource.

Invariants:
    - parse_person_id never returns an empty filter for bad input: it raises
    - PersonField lists every stored field; writes always set all of them
"""

from enum import Enum

from bson import ObjectId

from person_api.core.errors import InvalidIdentifierError


class PersonField(str, Enum):
    """Stored document keys (lowercase, as persisted in the collection)."""
    FIRST_NAME = "firstname"
    LAST_NAME = "lastname"
    EMAIL = "email"
    AGE = "age"


def parse_person_id(raw: str) -> ObjectId:
    """Parse a path identifier into an ObjectId or raise InvalidIdentifierError."""
    if not isinstance(raw, str) or not ObjectId.is_valid(raw):
        raise InvalidIdentifierError(str(raw))
    return ObjectId(raw)
