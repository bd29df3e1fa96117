"""
API-specific settings.

Extends :class:`~storefront.core.settings.StorefrontSettings` with the
parameters that govern the REST transport (bind address, prefix, CORS).
Variable names stay unprefixed (``HOST``, ``PORT``, ``API_PREFIX``…).
"""

from __future__ import annotations

from pydantic import Field

from storefront.core.settings import StorefrontSettings


class StorefrontAPISettings(StorefrontSettings):
    """Settings for the storefront REST API.

    Order of precedence (highest → lowest):
        1. Environment variables (``API_PREFIX``, ``DATABASE_MODE``, etc.)
        2. ``.env`` file
        3. Defaults below
    """

    # ── Server ───────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    # ── API ──────────────────────────────────────────────────────────────
    api_prefix: str = Field(default="/api", description="URL prefix for all endpoints")
    api_title: str = Field(default="storefront-admin API", description="OpenAPI title")
    api_version: str = Field(default="0.1.0", description="OpenAPI version string")

    # ── CORS ─────────────────────────────────────────────────────────────
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )
