"""
FastAPI application factory.

``create_app()`` wires middleware, routers, error handlers, and
lifespan events into a single ``FastAPI`` instance.

Manifesto:
    The app factory is the single composition root.  The database adapter
    is built here, once, from settings; routers receive it through
    dependencies and never reach for a module-level pool.

    The app starts even when no database is configured: every data
    endpoint then answers 500 "Database connection not configured" and
    ``/health`` reports the database check as unhealthy.

Tags:
    api, app-factory, composition-root, FastAPI, lifespan

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storefront import __version__
from storefront.api.deps import get_settings
from storefront.api.middleware.errors import unhandled_exception_handler
from storefront.api.middleware.request_id import RequestIDMiddleware
from storefront.api.settings import StorefrontAPISettings
from storefront.core.adapters import DatabaseAdapter, create_adapter
from storefront.core.health import HealthCheck, check_database, create_health_router
from storefront.core.logging import configure_logging, get_logger

log = get_logger("storefront.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan — build the pool on startup, close it on shutdown."""
    settings: StorefrontAPISettings = app.state.settings
    log.info("api_starting", version=app.version, dialect=settings.database_mode)

    if getattr(app.state, "database", None) is None:
        app.state.database = create_adapter(settings)

    database: DatabaseAdapter | None = app.state.database
    if database is not None:
        try:
            await database.connect()
        except Exception as e:
            # adapter retries lazily on the next query
            log.warning("database_connect_failed", dialect=database.mode.value, error=str(e))

    yield

    if database is not None:
        await database.close()
    log.info("api_shutting_down")


def create_app(
    *,
    settings: StorefrontAPISettings | None = None,
    database: DatabaseAdapter | None = None,
) -> FastAPI:
    """Build and return a fully-configured FastAPI application.

    Parameters
    ----------
    settings : StorefrontAPISettings | None
        Override settings (useful for testing).  When ``None`` the cached
        singleton from :func:`get_settings` is used.
    database : DatabaseAdapter | None
        Pre-built adapter (useful for testing).  When ``None`` the lifespan
        builds one from *settings*.
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level,
        json_format=settings.log_json,
        service="storefront-api",
    )

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url=f"{settings.api_prefix}/docs",
        redoc_url=f"{settings.api_prefix}/redoc",
        openapi_url=f"{settings.api_prefix}/openapi.json",
    )

    app.state.settings = settings
    app.state.database = database

    app.dependency_overrides[get_settings] = lambda: settings

    # ── Middleware (outermost → innermost) ────────────────────────────
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_origins != ["*"],
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from storefront.api.routers import fare_rates, menu_items, menu_photos, stores

    prefix = settings.api_prefix

    # Health endpoints at root level (no prefix) for container healthchecks
    app.include_router(
        create_health_router(
            "storefront-admin",
            version=__version__,
            checks=[HealthCheck("database", lambda: check_database(app.state.database))],
        ),
    )

    app.include_router(stores.router, prefix=prefix, tags=["stores"])
    app.include_router(menu_items.router, prefix=prefix, tags=["menu-items"])
    app.include_router(menu_photos.router, prefix=prefix, tags=["menu-photos"])
    app.include_router(fare_rates.router, prefix=prefix, tags=["fare-rates"])

    return app
