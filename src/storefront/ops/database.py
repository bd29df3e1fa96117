"""
Database operations.

Thin wrappers around the adapter and ``storefront.core.schema_loader`` for
connectivity checks and schema creation.  Used by the ``storefront db``
commands.
"""

from __future__ import annotations

from storefront.core.errors import DatabaseNotConfiguredError
from storefront.core.logging import get_logger
from storefront.core.schema_loader import apply_schema, get_table_list
from storefront.ops.context import OperationContext
from storefront.ops.responses import ConnectionStatus, DatabaseInitResult
from storefront.ops.result import OperationResult, internal_error, start_timer

logger = get_logger(__name__)


async def check_connection(ctx: OperationContext) -> OperationResult[ConnectionStatus]:
    """Round-trip ``SELECT 1`` against the configured engine."""
    timer = start_timer()

    try:
        if ctx.db is None:
            raise DatabaseNotConfiguredError()
        await ctx.db.ping()
        return OperationResult.ok(
            ConnectionStatus(
                dialect=ctx.db.mode.value,
                connected=True,
                latency_ms=round(timer.elapsed_ms, 2),
            ),
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.exception("op_failed", op="check_connection", error=str(exc))
        return internal_error("connect to the database", exc, elapsed_ms=timer.elapsed_ms)


async def initialize_database(ctx: OperationContext) -> OperationResult[DatabaseInitResult]:
    """Create the storefront tables for the active dialect (idempotent)."""
    timer = start_timer()

    try:
        if ctx.db is None:
            raise DatabaseNotConfiguredError()
        applied = await apply_schema(ctx.db)
        tables = await get_table_list(ctx.db)
        return OperationResult.ok(
            DatabaseInitResult(dialect=ctx.db.mode.value, files_applied=applied, tables=tables),
            elapsed_ms=timer.elapsed_ms,
        )
    except Exception as exc:
        logger.exception("op_failed", op="initialize_database", error=str(exc))
        return internal_error("create tables", exc, elapsed_ms=timer.elapsed_ms)
