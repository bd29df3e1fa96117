"""
Dialect-neutral database access functions.

The three entry points every route and operation uses.  Each takes the
shared pool, canonical ``?``-style SQL and positional parameters, and
behaves identically on both engines from the caller's point of view.

Manifesto:
    A caller should be able to write::

        result = await execute_query(pool, "SELECT * FROM stores WHERE id = ?", [store_id])

    and get the same ``rows`` whether ``DATABASE_MODE`` is ``mysql`` or
    ``postgresql``.  Driver errors are logged once where they happen and
    re-raised unchanged; nothing here retries or translates them.

Architecture:
    ::

        execute_query / execute_insert / execute_transaction
                      │
                      ▼
        _resolve_adapter(pool, dialect)
          ├─ None                       → DatabaseNotConfiguredError
          ├─ DatabaseAdapter            → used as-is (dialect must agree)
          └─ raw asyncpg/aiomysql pool  → wrapped for the active dialect
                      │
                      ▼
        PostgreSQLAdapter ($n, RETURNING id)  |  MySQLAdapter (%s, lastrowid)

Tags:
    database, dialect, asyncpg, aiomysql, transactions
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from storefront.core.adapters import (
    DatabaseAdapter,
    InsertResult,
    QueryResult,
    TransactionStatement,
    adapter_for_pool,
)
from storefront.core.dialect import DialectMode, get_active_dialect
from storefront.core.errors import ConfigError, DatabaseNotConfiguredError


def _resolve_adapter(pool: Any, dialect: DialectMode | str | None) -> DatabaseAdapter:
    if pool is None:
        raise DatabaseNotConfiguredError()

    mode = DialectMode.parse(dialect) if dialect is not None else None

    if isinstance(pool, DatabaseAdapter):
        if mode is not None and mode is not pool.mode:
            raise ConfigError(
                f"Dialect mismatch: pool is {pool.mode.value}, caller asked for {mode.value}"
            )
        return pool

    return adapter_for_pool(pool, mode or get_active_dialect())


async def execute_query(
    pool: Any,
    sql: str,
    params: Sequence[Any] | None = None,
    dialect: DialectMode | str | None = None,
) -> QueryResult:
    """Run one statement and return ``(rows, metadata)``.

    Args:
        pool: A :class:`DatabaseAdapter` or a raw driver pool
        sql: Canonical SQL with ``?`` placeholders
        params: Positional values, one per placeholder
        dialect: Override for the active dialect (raw pools only)

    Raises:
        DatabaseNotConfiguredError: ``pool`` is ``None``
    """
    return await _resolve_adapter(pool, dialect).query(sql, params)


async def execute_insert(
    pool: Any,
    sql: str,
    params: Sequence[Any] | None = None,
    dialect: DialectMode | str | None = None,
) -> InsertResult:
    """Run a single-row INSERT and return its generated ``insert_id``.

    *sql* must not carry its own ``RETURNING`` clause.
    """
    return await _resolve_adapter(pool, dialect).insert(sql, params)


async def execute_transaction(
    pool: Any,
    statements: Iterable[TransactionStatement | Sequence[Any]],
    dialect: DialectMode | str | None = None,
) -> list[QueryResult]:
    """Run ``(query, values)`` pairs in order, all-or-nothing.

    Returns one result per statement, in input order.  On failure nothing
    is committed and the original error propagates.
    """
    return await _resolve_adapter(pool, dialect).transaction(statements)


__all__ = [
    "execute_query",
    "execute_insert",
    "execute_transaction",
    "get_active_dialect",
]
