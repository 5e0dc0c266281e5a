"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - log_format is always one of LogFormat's values after validation

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box for local development
    - CORS default admits any scheme/port on host localhost only
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from bookshelf.core.domain_types import LogFormat


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Service
    app_name: str = "bookshelf-api"
    app_version: str = "1.0.0"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Store
    seed_books: bool = True

    # API
    cors_origin_regex: str = r"^https?://localhost(:\d+)?$"
    force_https: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = LogFormat.JSON.value

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        v = str(v).strip().lower()
        if v not in {f.value for f in LogFormat}:
            raise ValueError(f"log_format must be one of: {', '.join(f.value for f in LogFormat)}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
