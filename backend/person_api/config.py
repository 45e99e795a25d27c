"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Every value has a default that matches a local single-node MongoDB
    - get_settings() is cached (lru_cache): single instance per process
    - The Settings object is handed to the store manager at startup, never
      read from module globals by the data path
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Document store
    mongodb_uri: str = "mongodb://localhost:27011"
    database_name: str = "personsdb"
    collection_name: str = "person"
    mongodb_max_pool_size: int = 100
    mongodb_min_pool_size: int = 0
    mongodb_server_selection_timeout_ms: int = 5000

    @field_validator("mongodb_uri", mode="before")
    @classmethod
    def require_mongodb_scheme(cls, v: str) -> str:
        """Only mongodb:// and mongodb+srv:// URIs are accepted."""
        if isinstance(v, str) and not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("mongodb_uri must start with mongodb:// or mongodb+srv://")
        return v

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
