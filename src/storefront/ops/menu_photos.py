"""
Menu photo operations.

Photos are URLs of images already uploaded to the media host; this module
only records and removes the references.
"""

from __future__ import annotations

from typing import Any

from storefront.core.database import execute_insert, execute_query
from storefront.core.logging import get_logger
from storefront.ops._rows import iso_timestamp
from storefront.ops.context import OperationContext
from storefront.ops.requests import MenuPhotoRequest
from storefront.ops.responses import DeleteResult, MenuPhotoDetail
from storefront.ops.result import OperationResult, internal_error, start_timer

logger = get_logger(__name__)

_PHOTO_COLUMNS = "id, photo_url, store_id, created_at, updated_at"


async def _fetch_photo(ctx: OperationContext, photo_id: int) -> dict[str, Any] | None:
    rows, _ = await execute_query(
        ctx.db,
        f"SELECT {_PHOTO_COLUMNS} FROM menu_photos WHERE id = ?",
        [photo_id],
    )
    return rows[0] if rows else None


async def list_menu_photos(
    ctx: OperationContext,
    store_id: int,
) -> OperationResult[list[MenuPhotoDetail]]:
    """List the menu photos of a store; ``NOT_FOUND`` when there are none."""
    timer = start_timer()

    try:
        rows, _ = await execute_query(
            ctx.db,
            f"SELECT {_PHOTO_COLUMNS} FROM menu_photos WHERE store_id = ? ORDER BY id",
            [store_id],
        )
        if not rows:
            return OperationResult.fail("NOT_FOUND", "No menu photos found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok([_row_to_photo(r) for r in rows], elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="list_menu_photos", error=str(exc))
        return internal_error("list menu photos", exc, elapsed_ms=timer.elapsed_ms)


async def get_menu_photo(ctx: OperationContext, photo_id: int) -> OperationResult[MenuPhotoDetail]:
    timer = start_timer()

    try:
        row = await _fetch_photo(ctx, photo_id)
        if row is None:
            return OperationResult.fail("NOT_FOUND", "Menu photo not found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(_row_to_photo(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="get_menu_photo", error=str(exc))
        return internal_error("get menu photo", exc, elapsed_ms=timer.elapsed_ms)


async def create_menu_photo(
    ctx: OperationContext,
    request: MenuPhotoRequest,
) -> OperationResult[MenuPhotoDetail]:
    timer = start_timer()

    if not request.photo_url or not request.store_id:
        return OperationResult.fail(
            "VALIDATION_FAILED",
            "All fields are required: photo_url, store_id",
            elapsed_ms=timer.elapsed_ms,
        )

    try:
        inserted = await execute_insert(
            ctx.db,
            "INSERT INTO menu_photos (photo_url, store_id) VALUES (?, ?)",
            [request.photo_url, request.store_id],
        )
        row = await _fetch_photo(ctx, inserted.insert_id)
        if row is None:
            return OperationResult.fail(
                "INTERNAL",
                "Menu photo was created but could not be read back",
                details={"insert_id": inserted.insert_id},
                elapsed_ms=timer.elapsed_ms,
            )
        return OperationResult.ok(_row_to_photo(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="create_menu_photo", error=str(exc))
        return internal_error("create menu photo", exc, elapsed_ms=timer.elapsed_ms)


async def delete_menu_photo(ctx: OperationContext, photo_id: int) -> OperationResult[DeleteResult]:
    """Delete a photo reference; ``NOT_FOUND`` when nothing was deleted."""
    timer = start_timer()

    try:
        rows, _ = await execute_query(ctx.db, "SELECT id FROM menu_photos WHERE id = ?", [photo_id])
        if not rows:
            return OperationResult.fail("NOT_FOUND", "Menu photo not found", elapsed_ms=timer.elapsed_ms)

        await execute_query(ctx.db, "DELETE FROM menu_photos WHERE id = ?", [photo_id])
        return OperationResult.ok(DeleteResult(id=photo_id), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="delete_menu_photo", error=str(exc))
        return internal_error("delete menu photo", exc, elapsed_ms=timer.elapsed_ms)


def _row_to_photo(row: dict[str, Any]) -> MenuPhotoDetail:
    return MenuPhotoDetail(
        id=row["id"],
        photo_url=row["photo_url"],
        store_id=row["store_id"],
        created_at=iso_timestamp(row.get("created_at")),
        updated_at=iso_timestamp(row.get("updated_at")),
    )
