"""Person API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PersonApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Document store client created on startup and closed on shutdown via the
      lifespan context manager; Settings are passed in explicitly
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from person_api.api.error_handlers import register_error_handlers
from person_api.api.routes import health, person
from person_api.config import get_settings
from person_api.infrastructure.database import close_store, init_store
from person_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    await init_store(settings)
    logger.info(f"Person API listening on port {settings.port}")
    yield
    close_store()
    logger.info("Person API shut down")


app = FastAPI(title="Person API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(person.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
