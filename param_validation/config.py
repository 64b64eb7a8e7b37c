"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the demo runs with no .env file

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    host: str = "127.0.0.1"
    port: int = Field(8000, ge=1, le=65535)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Validation messages — catalog locale for default constraint text
    message_locale: str = "en"

    @field_validator("message_locale", mode="before")
    @classmethod
    def normalize_locale(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip() or "en"
        return v

    # Background work
    worker_pool_size: int = Field(4, ge=1)

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
