"""
Menu item operations.

CRUD for the products on a store's menu, plus the spreadsheet bulk import
which inserts every product of a batch in one transaction.
"""

from __future__ import annotations

from typing import Any

from storefront.core.adapters import TransactionStatement
from storefront.core.database import execute_insert, execute_query, execute_transaction
from storefront.core.logging import get_logger
from storefront.ops._rows import as_float, iso_timestamp
from storefront.ops.context import OperationContext
from storefront.ops.requests import BulkImportRequest, MenuItemRequest
from storefront.ops.responses import BulkImportResult, DeleteResult, MenuItemDetail
from storefront.ops.result import OperationResult, internal_error, start_timer

logger = get_logger(__name__)

_ITEM_COLUMNS = "id, name, price, image_url, store_id, created_at, updated_at"
_INSERT_ITEM = "INSERT INTO menu_items (name, price, store_id) VALUES (?, ?, ?)"


def _validate(request: MenuItemRequest) -> str | None:
    if not request.name or request.price is None or not request.store_id:
        return "All fields are required: name, price, store_id"
    if request.price <= 0:
        return "Price must be greater than 0"
    return None


def _is_valid_product(product: Any) -> bool:
    if not isinstance(product, dict) or not product.get("name"):
        return False
    price = product.get("price")
    # bool is an int subclass; spreadsheet booleans are not prices
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        return False
    return price > 0


async def _fetch_item(ctx: OperationContext, item_id: int) -> dict[str, Any] | None:
    rows, _ = await execute_query(
        ctx.db,
        f"SELECT {_ITEM_COLUMNS} FROM menu_items WHERE id = ?",
        [item_id],
    )
    return rows[0] if rows else None


async def list_menu_items(
    ctx: OperationContext,
    store_id: int,
) -> OperationResult[list[MenuItemDetail]]:
    """List the menu items of a store.

    An empty menu is reported as ``NOT_FOUND``.
    """
    timer = start_timer()

    try:
        rows, _ = await execute_query(
            ctx.db,
            f"SELECT {_ITEM_COLUMNS} FROM menu_items WHERE store_id = ? ORDER BY id",
            [store_id],
        )
        if not rows:
            return OperationResult.fail("NOT_FOUND", "No menu items found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok([_row_to_item(r) for r in rows], elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="list_menu_items", error=str(exc))
        return internal_error("list menu items", exc, elapsed_ms=timer.elapsed_ms)


async def get_menu_item(ctx: OperationContext, item_id: int) -> OperationResult[MenuItemDetail]:
    """Get a single menu item by ID."""
    timer = start_timer()

    try:
        row = await _fetch_item(ctx, item_id)
        if row is None:
            return OperationResult.fail("NOT_FOUND", "Menu item not found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(_row_to_item(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="get_menu_item", error=str(exc))
        return internal_error("get menu item", exc, elapsed_ms=timer.elapsed_ms)


async def create_menu_item(
    ctx: OperationContext,
    request: MenuItemRequest,
) -> OperationResult[MenuItemDetail]:
    """Add a product to a store's menu."""
    timer = start_timer()

    problem = _validate(request)
    if problem:
        return OperationResult.fail("VALIDATION_FAILED", problem, elapsed_ms=timer.elapsed_ms)

    try:
        inserted = await execute_insert(
            ctx.db,
            "INSERT INTO menu_items (name, price, image_url, store_id) VALUES (?, ?, ?, ?)",
            [request.name, request.price, request.image_url, request.store_id],
        )
        logger.info("menu_item_created", item_id=inserted.insert_id, store_id=request.store_id)

        row = await _fetch_item(ctx, inserted.insert_id)
        if row is None:
            return OperationResult.fail(
                "INTERNAL",
                "Menu item was created but could not be read back",
                details={"insert_id": inserted.insert_id},
                elapsed_ms=timer.elapsed_ms,
            )
        return OperationResult.ok(_row_to_item(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="create_menu_item", error=str(exc))
        return internal_error("create menu item", exc, elapsed_ms=timer.elapsed_ms)


async def update_menu_item(
    ctx: OperationContext,
    item_id: int,
    request: MenuItemRequest,
) -> OperationResult[MenuItemDetail]:
    timer = start_timer()

    problem = _validate(request)
    if problem:
        return OperationResult.fail("VALIDATION_FAILED", problem, elapsed_ms=timer.elapsed_ms)

    try:
        existing = await _fetch_item(ctx, item_id)
        if existing is None:
            return OperationResult.fail("NOT_FOUND", "Menu item not found", elapsed_ms=timer.elapsed_ms)

        image_url = request.image_url if request.image_url is not None else existing.get("image_url")
        await execute_query(
            ctx.db,
            "UPDATE menu_items SET name = ?, price = ?, image_url = ?, store_id = ?, "
            "updated_at = CURRENT_TIMESTAMP WHERE id = ?",
            [request.name, request.price, image_url, request.store_id, item_id],
        )

        row = await _fetch_item(ctx, item_id)
        if row is None:
            return OperationResult.fail("NOT_FOUND", "Menu item not found", elapsed_ms=timer.elapsed_ms)
        return OperationResult.ok(_row_to_item(row), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="update_menu_item", error=str(exc))
        return internal_error("update menu item", exc, elapsed_ms=timer.elapsed_ms)


async def delete_menu_item(ctx: OperationContext, item_id: int) -> OperationResult[DeleteResult]:
    timer = start_timer()

    try:
        rows, _ = await execute_query(ctx.db, "SELECT id FROM menu_items WHERE id = ?", [item_id])
        if not rows:
            return OperationResult.fail("NOT_FOUND", "Menu item not found", elapsed_ms=timer.elapsed_ms)

        await execute_query(ctx.db, "DELETE FROM menu_items WHERE id = ?", [item_id])
        return OperationResult.ok(DeleteResult(id=item_id), elapsed_ms=timer.elapsed_ms)
    except Exception as exc:
        logger.exception("op_failed", op="delete_menu_item", error=str(exc))
        return internal_error("delete menu item", exc, elapsed_ms=timer.elapsed_ms)


async def bulk_import_menu_items(
    ctx: OperationContext,
    request: BulkImportRequest,
) -> OperationResult[BulkImportResult]:
    """Insert every product of an import batch, all or nothing.

    The whole batch is validated before anything is written; a single bad
    product rejects the batch.  The inserts then run in one transaction, so
    a database failure part-way through leaves no product behind.
    """
    timer = start_timer()

    if not isinstance(request.products, list) or not request.products:
        return OperationResult.fail("VALIDATION_FAILED", "No products provided", elapsed_ms=timer.elapsed_ms)
    if not request.store_id:
        return OperationResult.fail("VALIDATION_FAILED", "Store ID is required", elapsed_ms=timer.elapsed_ms)

    invalid = [p for p in request.products if not _is_valid_product(p)]
    if invalid:
        return OperationResult.fail(
            "VALIDATION_FAILED",
            f"{len(invalid)} invalid products found",
            details={"invalid_count": len(invalid)},
            elapsed_ms=timer.elapsed_ms,
        )

    statements = [
        TransactionStatement(_INSERT_ITEM, (p["name"], p["price"], request.store_id))
        for p in request.products
    ]

    try:
        await execute_transaction(ctx.db, statements)
        logger.info("menu_items_imported", store_id=request.store_id, count=len(statements))
        return OperationResult.ok(
            BulkImportResult(store_id=request.store_id, imported_count=len(statements)),
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.exception("op_failed", op="bulk_import_menu_items", error=str(exc))
        return internal_error("import menu items", exc, elapsed_ms=timer.elapsed_ms)


# ------------------------------------------------------------------ #
# Row mapping
# ------------------------------------------------------------------ #


def _row_to_item(row: dict[str, Any]) -> MenuItemDetail:
    return MenuItemDetail(
        id=row["id"],
        name=row["name"],
        price=as_float(row["price"]),
        store_id=row["store_id"],
        image_url=row.get("image_url"),
        created_at=iso_timestamp(row.get("created_at")),
        updated_at=iso_timestamp(row.get("updated_at")),
    )
