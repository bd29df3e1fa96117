"""
Fare rate operations.

Fare rates are seeded per region and only edited from the dashboard's
delivery settings; there is no create or delete.
"""

from __future__ import annotations

from typing import Any

from storefront.core.database import execute_query
from storefront.core.logging import get_logger
from storefront.ops._rows import as_float, iso_timestamp
from storefront.ops.context import OperationContext
from storefront.ops.requests import FareRateRequest
from storefront.ops.responses import FareRateDetail
from storefront.ops.result import OperationResult, internal_error, start_timer

logger = get_logger(__name__)

_RATE_COLUMNS = "id, base_fare, rate_per_km, other_charges, created_at, updated_at"


def _validate(request: FareRateRequest) -> str | None:
    values = (request.base_fare, request.rate_per_km, request.other_charges)
    if any(v is None for v in values):
        return "All fields are required: base_fare, rate_per_km, other_charges"
    if any(v < 0 for v in values):
        return "Fare values must not be negative"
    return None


async def _fetch_rate(ctx: OperationContext, rate_id: int) -> dict[str, Any] | None:
    rows, _ = await execute_query(
        ctx.db,
        f"SELECT {_RATE_COLUMNS} FROM fare_rates WHERE id = ?",
        [rate_id],
    )
    return rows[0] if rows else None


async def list_fare_rates(ctx: OperationContext) -> OperationResult[list[FareRateDetail]]:
    timer = start_timer()

    try:
        rows, _ = await execute_query(ctx.db, f"SELECT {_RATE_COLUMNS} FROM fare_rates ORDER BY id")
        return OperationResult.ok([_row_to_rate(r) for r in rows], elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="list_fare_rates", error=str(exc))
        return internal_error("list fare rates", exc, elapsed_ms=timer.elapsed_ms)


async def get_fare_rate(ctx: OperationContext, rate_id: int) -> OperationResult[FareRateDetail]:
    timer = start_timer()

    try:
        row = await _fetch_rate(ctx, rate_id)
        if row is None:
            return OperationResult.fail("NOT_FOUND", "Fare rate not found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(_row_to_rate(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="get_fare_rate", error=str(exc))
        return internal_error("get fare rate", exc, elapsed_ms=timer.elapsed_ms)


async def update_fare_rate(
    ctx: OperationContext,
    rate_id: int,
    request: FareRateRequest,
) -> OperationResult[FareRateDetail]:
    """Replace the three fare components of a rate."""
    timer = start_timer()

    problem = _validate(request)
    if problem:
        return OperationResult.fail("VALIDATION_FAILED", problem, elapsed_ms=timer.elapsed_ms)

    try:
        rows, _ = await execute_query(ctx.db, "SELECT id FROM fare_rates WHERE id = ?", [rate_id])
        if not rows:
            return OperationResult.fail("NOT_FOUND", "Fare rate not found", elapsed_ms=timer.elapsed_ms)

        await execute_query(
            ctx.db,
            "UPDATE fare_rates SET base_fare = ?, rate_per_km = ?, other_charges = ?, "
            "updated_at = CURRENT_TIMESTAMP WHERE id = ?",
            [request.base_fare, request.rate_per_km, request.other_charges, rate_id],
        )
        logger.info("fare_rate_updated", rate_id=rate_id)

        row = await _fetch_rate(ctx, rate_id)
        if row is None:
            return OperationResult.fail("NOT_FOUND", "Fare rate not found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(_row_to_rate(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="update_fare_rate", error=str(exc))
        return internal_error("update fare rate", exc, elapsed_ms=timer.elapsed_ms)


def _row_to_rate(row: dict[str, Any]) -> FareRateDetail:
    return FareRateDetail(
        id=row["id"],
        base_fare=as_float(row["base_fare"]),
        rate_per_km=as_float(row["rate_per_km"]),
        other_charges=as_float(row["other_charges"]),
        created_at=iso_timestamp(row.get("created_at")),
        updated_at=iso_timestamp(row.get("updated_at")),
    )
