"""
Store operations.

CRUD for store listings.  Deleting a store removes its menu items and
menu photos through the ``ON DELETE CASCADE`` foreign keys.
"""

from __future__ import annotations

from typing import Any

from storefront.core.database import execute_insert, execute_query
from storefront.core.logging import get_logger
from storefront.ops._rows import as_float, iso_timestamp
from storefront.ops.context import OperationContext
from storefront.ops.requests import StoreRequest
from storefront.ops.responses import DeleteResult, StoreDetail
from storefront.ops.result import OperationResult, internal_error, start_timer

logger = get_logger(__name__)

_STORE_COLUMNS = (
    "id, name, category, email, phone_number, logo_url, location, "
    "longitude, latitude, created_at, updated_at"
)


def _validate(request: StoreRequest) -> str | None:
    if (
        not request.name
        or not request.category
        or not request.logo_url
        or not request.location
        or request.longitude is None
        or request.latitude is None
    ):
        return "All fields are required: name, category, logo_url, location, longitude, latitude"
    return None


async def _fetch_store(ctx: OperationContext, store_id: int) -> dict[str, Any] | None:
    rows, _ = await execute_query(
        ctx.db,
        f"SELECT {_STORE_COLUMNS} FROM stores WHERE id = ?",
        [store_id],
    )
    return rows[0] if rows else None


async def _store_exists(ctx: OperationContext, store_id: int) -> bool:
    rows, _ = await execute_query(ctx.db, "SELECT id FROM stores WHERE id = ?", [store_id])
    return bool(rows)


async def list_stores(ctx: OperationContext) -> OperationResult[list[StoreDetail]]:
    """List all stores ordered by name."""
    timer = start_timer()

    try:
        rows, _ = await execute_query(
            ctx.db,
            f"SELECT {_STORE_COLUMNS} FROM stores ORDER BY name ASC",
        )
        return OperationResult.ok(
            [_row_to_store(r) for r in rows],
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.exception("op_failed", op="list_stores", error=str(exc))
        return internal_error("list stores", exc, elapsed_ms=timer.elapsed_ms)


async def get_store(ctx: OperationContext, store_id: int) -> OperationResult[StoreDetail]:
    """Get a single store by ID."""
    timer = start_timer()

    try:
        row = await _fetch_store(ctx, store_id)
        if row is None:
            return OperationResult.fail("NOT_FOUND", "Store not found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(_row_to_store(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="get_store", error=str(exc))
        return internal_error("get store", exc, elapsed_ms=timer.elapsed_ms)


async def create_store(ctx: OperationContext, request: StoreRequest) -> OperationResult[StoreDetail]:
    """Create a store and return it as stored."""
    timer = start_timer()

    problem = _validate(request)
    if problem:
        return OperationResult.fail("VALIDATION_FAILED", problem, elapsed_ms=timer.elapsed_ms)

    try:
        inserted = await execute_insert(
            ctx.db,
            "INSERT INTO stores (name, category, logo_url, location, longitude, latitude, email, phone_number) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            [
                request.name,
                request.category,
                request.logo_url,
                request.location,
                request.longitude,
                request.latitude,
                request.email,
                request.phone_number,
            ],
        )
        logger.info("store_created", store_id=inserted.insert_id)

        row = await _fetch_store(ctx, inserted.insert_id)
        if row is None:
            return OperationResult.fail(
                "INTERNAL",
                "Store was created but could not be read back",
                details={"insert_id": inserted.insert_id},
                elapsed_ms=timer.elapsed_ms,
            )
        return OperationResult.ok(_row_to_store(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="create_store", error=str(exc))
        return internal_error("create store", exc, elapsed_ms=timer.elapsed_ms)


async def update_store(
    ctx: OperationContext,
    store_id: int,
    request: StoreRequest,
) -> OperationResult[StoreDetail]:
    """Replace every editable field of a store."""
    timer = start_timer()

    problem = _validate(request)
    if problem:
        return OperationResult.fail("VALIDATION_FAILED", problem, elapsed_ms=timer.elapsed_ms)

    try:
        if not await _store_exists(ctx, store_id):
            return OperationResult.fail("NOT_FOUND", "Store not found", elapsed_ms=timer.elapsed_ms)

        await execute_query(
            ctx.db,
            "UPDATE stores SET name = ?, category = ?, logo_url = ?, location = ?, "
            "longitude = ?, latitude = ?, email = ?, phone_number = ?, "
            "updated_at = CURRENT_TIMESTAMP WHERE id = ?",
            [
                request.name,
                request.category,
                request.logo_url,
                request.location,
                request.longitude,
                request.latitude,
                request.email,
                request.phone_number,
                store_id,
            ],
        )

        row = await _fetch_store(ctx, store_id)
        if row is None:
            return OperationResult.fail("NOT_FOUND", "Store not found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(_row_to_store(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="update_store", error=str(exc))
        return internal_error("update store", exc, elapsed_ms=timer.elapsed_ms)


async def delete_store(ctx: OperationContext, store_id: int) -> OperationResult[DeleteResult]:
    """Delete a store together with its menu items and photos."""
    timer = start_timer()

    try:
        if not await _store_exists(ctx, store_id):
            return OperationResult.fail("NOT_FOUND", "Store not found", elapsed_ms=timer.elapsed_ms)

        await execute_query(ctx.db, "DELETE FROM stores WHERE id = ?", [store_id])
        logger.info("store_deleted", store_id=store_id)
        return OperationResult.ok(DeleteResult(id=store_id), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="delete_store", error=str(exc))
        return internal_error("delete store", exc, elapsed_ms=timer.elapsed_ms)


# ------------------------------------------------------------------ #
# Row mapping
# ------------------------------------------------------------------ #


def _row_to_store(row: dict[str, Any]) -> StoreDetail:
    return StoreDetail(
        id=row["id"],
        name=row["name"],
        category=row["category"],
        logo_url=row["logo_url"],
        location=row["location"],
        longitude=as_float(row["longitude"]),
        latitude=as_float(row["latitude"]),
        email=row.get("email"),
        phone_number=row.get("phone_number"),
        created_at=iso_timestamp(row.get("created_at")),
        updated_at=iso_timestamp(row.get("updated_at")),
    )
