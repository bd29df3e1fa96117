"""
FastAPI dependency injection: shared singletons and per-request factories.

Usage in routers::

    from storefront.api.deps import OpContext

    @router.get("/stores")
    async def list_stores(ctx: OpContext):
        ...

Manifesto:
    Dependency injection keeps routers thin.  The database adapter is
    created once by the app lifespan and kept on ``app.state``; per-request
    objects (OpContext) carry it through the call chain.

Tags:
    api, dependency-injection, singletons, OpContext
"""

from __future__ import annotations

import uuid
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Request

from storefront.api.settings import StorefrontAPISettings
from storefront.core.adapters import DatabaseAdapter
from storefront.ops.context import OperationContext

# ── Settings (singleton) ─────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_settings() -> StorefrontAPISettings:
    """Cached settings — loaded once per process."""
    return StorefrontAPISettings()


# ── Database adapter (app-scoped) ────────────────────────────────────────


def get_database(request: Request) -> DatabaseAdapter | None:
    """Return the adapter built at startup (``None`` when unconfigured)."""
    return getattr(request.app.state, "database", None)


# ── Operation context (per-request) ──────────────────────────────────────


def get_operation_context(
    request: Request,
    db: Annotated[DatabaseAdapter | None, Depends(get_database)],
    settings: Annotated[StorefrontAPISettings, Depends(get_settings)],
) -> OperationContext:
    """Build an :class:`OperationContext` from the current request."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return OperationContext(
        db=db,
        request_id=request_id,
        caller="api",
        debug=settings.debug,
    )


# ── Convenience type alias ──────────────────────────────────────────────

OpContext = Annotated[OperationContext, Depends(get_operation_context)]
