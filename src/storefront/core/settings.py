"""Process-wide settings for storefront-admin.

Configuration is read from environment variables and an optional ``.env``
file.  Variable names are unprefixed (``DATABASE_MODE``, ``DB_HOST``, …) so
the same ``.env`` works for every process that talks to the database.

Manifesto:
    Configuration should be explicit, validated, and environment-driven.

    - **Pydantic validation:** Type-checked when the settings are built
    - **Environment-driven:** Reads from env vars and .env files
    - **One active dialect:** ``DATABASE_MODE`` picks the engine once per process
    - **Sensible defaults:** PostgreSQL, small pool, INFO logging

Features:
    - **StorefrontSettings:** database, pool and logging knobs
    - **get_settings():** cached singleton, built on first use
    - **Extra ignore:** Unknown env vars don't cause startup failures

Examples:
    >>> from storefront.core.settings import StorefrontSettings
    >>> s = StorefrontSettings(database_mode="mysql", db_host="localhost")
    >>> s.db_port
    3306
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """Settings shared by the API server and the CLI.

    Fields
    ──────
    database_mode     : ``postgresql`` (default) or ``mysql``
    database_url      : PostgreSQL DSN (asyncpg)
    database_ssl      : asyncpg ssl mode (``disable``, ``prefer``, ``require``…)
    db_host … db_name : MySQL connection parameters (aiomysql)
    db_pool_*         : pool sizing for both engines
    log_level         : structlog log level
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Dialect ──────────────────────────────────────────────────
    database_mode: str = Field(default="postgresql", description="Active SQL dialect")

    # ── PostgreSQL ───────────────────────────────────────────────
    database_url: str | None = Field(default=None, description="PostgreSQL connection URL")
    database_ssl: str = Field(default="prefer", description="asyncpg ssl mode")

    # ── MySQL ────────────────────────────────────────────────────
    db_host: str | None = Field(default=None, description="MySQL host")
    db_port: int = Field(default=3306, description="MySQL port")
    db_user: str | None = Field(default=None, description="MySQL user")
    db_password: str | None = Field(default=None, description="MySQL password")
    db_name: str | None = Field(default=None, description="MySQL database name")

    # ── Pool ─────────────────────────────────────────────────────
    db_pool_min_size: int = Field(default=1, ge=0)
    db_pool_max_size: int = Field(default=10, ge=1)
    db_command_timeout: float = Field(default=60.0, gt=0)

    # ── Observability ────────────────────────────────────────────
    debug: bool = False
    log_level: str = "INFO"
    log_json: bool | None = None


@lru_cache(maxsize=1)
def get_settings() -> StorefrontSettings:
    """Cached settings — loaded once per process."""
    return StorefrontSettings()


__all__ = [
    "StorefrontSettings",
    "get_settings",
]
