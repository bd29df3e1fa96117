"""Health endpoints for the storefront API.

``/health`` runs every registered probe concurrently and reports each one;
``/health/ready`` is the strict variant for load balancers; ``/health/live``
never touches a dependency.

The app registers a single probe, :func:`check_database`, which
round-trips ``SELECT 1`` through the adapter built at startup::

    router = create_health_router(
        "storefront-admin",
        version=__version__,
        checks=[HealthCheck("database", lambda: check_database(app.state.database))],
    )
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from storefront.core.errors import DatabaseNotConfiguredError
from storefront.core.logging import get_logger

logger = get_logger(__name__)

_STARTED = time.monotonic()

Status = Literal["healthy", "degraded", "unhealthy"]


class ProbeResult(BaseModel):
    """Outcome of one probe."""

    status: Status
    latency_ms: float | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    status: Status
    service: str
    version: str
    uptime_s: float
    timestamp: str
    checks: dict[str, ProbeResult] = Field(default_factory=dict)


class LivenessResponse(BaseModel):
    status: str = "alive"


def _ms_since(started: float) -> float:
    return round((time.monotonic() - started) * 1000, 2)


@dataclass(frozen=True)
class HealthCheck:
    """A named dependency probe.

    ``probe`` returns an awaitable and signals failure by raising.  A failing
    probe that is not ``required`` only degrades the overall status.
    """

    name: str
    probe: Callable[[], Awaitable[Any]]
    required: bool = True
    timeout_s: float = 5.0

    async def run(self) -> ProbeResult:
        started = time.monotonic()
        try:
            await asyncio.wait_for(self.probe(), timeout=self.timeout_s)
        except TimeoutError:
            return ProbeResult(status="unhealthy", error=f"timed out after {self.timeout_s}s")
        except Exception as exc:
            logger.warning("health_check_failed", check=self.name, error=str(exc))
            return ProbeResult(status="unhealthy", latency_ms=_ms_since(started), error=str(exc)[:200])
        return ProbeResult(status="healthy", latency_ms=_ms_since(started))


async def check_database(database: Any) -> bool:
    """Ping *database* (an adapter, or ``None`` when unconfigured)."""
    if database is None:
        raise DatabaseNotConfiguredError()
    return await database.ping()


def _overall(checks: list[HealthCheck], results: dict[str, ProbeResult]) -> Status:
    failed = [c for c in checks if results[c.name].status != "healthy"]
    if any(c.required for c in failed):
        return "unhealthy"
    return "degraded" if failed else "healthy"


def create_health_router(
    service_name: str,
    version: str,
    checks: list[HealthCheck] | None = None,
    prefix: str = "/health",
) -> APIRouter:
    """Build the health router.

    ``GET {prefix}`` answers 503 only when a required probe fails;
    ``GET {prefix}/ready`` answers 503 unless every probe passes.
    """
    router = APIRouter(tags=["health"])
    registered = list(checks or [])

    async def _report() -> HealthResponse:
        outcomes = await asyncio.gather(*(c.run() for c in registered))
        results = {c.name: r for c, r in zip(registered, outcomes, strict=True)}
        return HealthResponse(
            status=_overall(registered, results),
            service=service_name,
            version=version,
            uptime_s=round(time.monotonic() - _STARTED, 1),
            timestamp=datetime.now(UTC).isoformat(),
            checks=results,
        )

    @router.get(prefix, response_model=HealthResponse)
    async def health() -> JSONResponse:
        report = await _report()
        code = 503 if report.status == "unhealthy" else 200
        return JSONResponse(content=report.model_dump(), status_code=code)

    @router.get(f"{prefix}/ready", response_model=HealthResponse)
    async def readiness() -> JSONResponse:
        report = await _report()
        code = 200 if report.status == "healthy" else 503
        return JSONResponse(content=report.model_dump(), status_code=code)

    @router.get(f"{prefix}/live", response_model=LivenessResponse)
    async def liveness() -> LivenessResponse:
        return LivenessResponse()

    return router


__all__ = [
    "ProbeResult",
    "HealthResponse",
    "LivenessResponse",
    "HealthCheck",
    "check_database",
    "create_health_router",
]
