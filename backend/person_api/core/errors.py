"""Error Hierarchy: typed, categorized exceptions for every Person API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Only a malformed path identifier is a client error (400); every other
      failure besides not-found is a generic 500 carrying the raw message
    - to_response() produces the single REST error envelope used by all handlers
    - DatabaseError and BodyParseError keep the raw underlying message
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    PARSE = "parse"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped details attached to an error for logs and clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    person_id: str | None = None
    operation: str | None = None


class PersonApiError(Exception):
    """Base exception for all Person API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "person_id": self.context.person_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(PersonApiError):
    """Path identifier is not a valid ObjectId."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.person_id = raw_id
        super().__init__(
            f"'{raw_id}' is not a valid person identifier "
            "(expected a 24-character hex string)",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.raw_id = raw_id


class PersonNotFoundError(PersonApiError):
    """Read matched no documents."""
    def __init__(self, person_id: str | None = None, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.person_id = person_id
        message = (
            f"Person '{person_id}' not found" if person_id
            else "No person documents found"
        )
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.person_id = person_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PersonApiError):
    """Document store operation failed. Message is the raw driver text."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation


class BodyParseError(PersonApiError):
    """Request body could not be decoded into a person. Message is the raw decoder text."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PARSE_ERROR", ErrorCategory.PARSE,
            ErrorSeverity.ERROR, context, 500,
        )
