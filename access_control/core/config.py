"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (e.g. SECRET_KEY) are validated at
load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except secret_key, validated
    in validate_required.
    """

    # App
    app_name: str = "access-control"
    app_version: str = "0.1.0"
    debug: bool = False

    # Database: any async SQLAlchemy URL (postgresql+asyncpg, sqlite+aiosqlite)
    database_url: str = "sqlite+aiosqlite:///./access_control.db"
    database_echo: bool = False
    # Create tables on startup (local SQLite / tests). Production schemas come from Alembic.
    database_auto_create: bool = False
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    # SQLite only: IMMEDIATE takes the write lock at BEGIN so concurrent writers queue on
    # busy_timeout instead of failing on lock upgrade.
    sqlite_begin_mode: str = "IMMEDIATE"
    sqlite_busy_timeout_ms: int = 5000

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_id_header: str = "X-Request-ID"
    write_rate_limit: str = "120/minute"  # per client address, SlowAPI syntax

    # Permission catalog: description stored on auto-created entries ({code} placeholder).
    permission_description_template: str = "Auto-generated permission for {code}"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env and derived constraints."""
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL must not be empty. "
                "Set in environment or .env file."
            )
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if "{code}" not in self.permission_description_template:
            raise ValueError(
                "PERMISSION_DESCRIPTION_TEMPLATE must contain the '{code}' placeholder."
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
