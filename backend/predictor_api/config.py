"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Connection URI comes from the environment (credentials never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against a local mongod
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Document store
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_database: str = "mindsdb"
    mongo_collection: str = "predictors"
    mongo_connect_timeout_seconds: float = 10.0

    @field_validator("mongo_database", "mongo_collection")
    @classmethod
    def reject_blank_names(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("database and collection names cannot be blank")
        return v

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
