"""Error Handlers: global exception handlers for the Person API.

Invariants:
    - PersonApiError → structured JSON with error code, message, severity
    - RequestValidationError on a body → BodyParseError (500, raw decoder text)
    - Exception (catch-all) → 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from person_api.core.errors import BodyParseError, PersonApiError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_person_api_error_handler(app)
    _register_body_parse_error_handler(app)
    _register_generic_error_handler(app)


def _register_person_api_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PersonApiError)
    async def person_api_error_handler(request: Request, exc: PersonApiError):
        """Handle all Person API domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"PersonApiError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_body_parse_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def body_parse_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Undecodable bodies are a generic failure, not a client error."""
        error = BodyParseError(_raw_parse_message(exc))
        logger.error(
            f"Body parse error on {request.url.path}: {error.message}",
            extra={"error_code": error.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=error.http_status, content=error.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _raw_parse_message(exc: RequestValidationError) -> str:
    """Decoder messages joined as `loc: msg`, using the JSON decoder's own text when present."""
    parts = []
    for e in exc.errors():
        loc = ".".join(str(part) for part in e["loc"])
        ctx = e.get("ctx") or {}
        msg = str(ctx["error"]) if "error" in ctx else e["msg"]
        parts.append(f"{loc}: {msg}")
    return "; ".join(parts)
