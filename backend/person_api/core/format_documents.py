"""Document Formatting: driver values to JSON-safe values.

Invariants:
    - ObjectId renders as its 24-char hex string
    - datetime renders as ISO-8601
    - Dicts and lists are walked recursively; other values pass through untouched
    - Input documents are never mutated
"""

from datetime import datetime
from typing import Any

from bson import ObjectId


def format_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: format_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [format_value(item) for item in value]
    return value


def format_document(document: dict) -> dict:
    """Raw stored document, with `_id` and nested BSON types made JSON-safe."""
    return format_value(document)


def format_documents(documents: list[dict]) -> list[dict]:
    return [format_document(d) for d in documents]
