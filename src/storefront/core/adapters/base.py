"""Database adapter base class.

Manifesto:
    Route handlers and operations depend on one capability set -
    ``query``, ``insert``, ``transaction`` - and never on a concrete engine.
    Each engine subclass supplies the driver calls; the base class owns the
    parts that must behave identically everywhere: lazy pool creation,
    failure logging, and the begin/commit/rollback/release sequence of a
    transaction batch.

Features:
    - Abstract driver hooks (``_create_pool``, ``_run``, ``_insert``, …)
    - Failures logged once at the point of failure, then re-raised unchanged
    - Transaction batches on one dedicated connection, released in ``finally``
    - Async context-manager protocol for pool lifecycle

Tags:
    database, abstract-base, adapter-pattern, asyncio

Doc-Types:
    api-reference
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any

from storefront.core.dialect import Dialect, DialectMode, get_dialect
from storefront.core.logging import get_logger

from .types import DatabaseConfig, InsertResult, QueryResult, TransactionStatement

logger = get_logger(__name__)


def _as_params(params: Sequence[Any] | None) -> tuple[Any, ...]:
    return tuple(params) if params else ()


def _as_statement(statement: TransactionStatement | Sequence[Any]) -> TransactionStatement:
    if isinstance(statement, TransactionStatement):
        return statement
    query, values = statement
    return TransactionStatement(query, _as_params(values))


class DatabaseAdapter(ABC):
    """
    Abstract base class for async database adapters.

    An adapter wraps exactly one connection pool bound to exactly one
    dialect.  The pool is created by :meth:`connect` or, failing that,
    lazily on first use.
    """

    def __init__(self, config: DatabaseConfig):
        self._config = config
        self._dialect: Dialect = get_dialect(config.mode)
        self._pool: Any = None
        self._owns_pool = True
        self._pool_lock = asyncio.Lock()

    @classmethod
    def from_pool(cls, pool: Any) -> DatabaseAdapter:
        """Wrap an already-created driver pool.

        The adapter does not close pools it did not create.
        """
        adapter = cls.__new__(cls)
        DatabaseAdapter.__init__(adapter, DatabaseConfig(mode=cls.mode))
        adapter._pool = pool
        adapter._owns_pool = False
        return adapter

    # ------------------------------------------------------------------ #
    # Introspection
    # ------------------------------------------------------------------ #

    mode: DialectMode

    @property
    def dialect(self) -> Dialect:
        """SQL dialect for this adapter's engine."""
        return self._dialect

    @property
    def config(self) -> DatabaseConfig:
        return self._config

    @property
    def pool(self) -> Any:
        """The underlying driver pool (``None`` until connected)."""
        return self._pool

    @property
    def is_connected(self) -> bool:
        """Whether a pool exists."""
        return self._pool is not None

    # ------------------------------------------------------------------ #
    # Lifecycle
    # ------------------------------------------------------------------ #

    async def connect(self) -> None:
        """Create the connection pool (no-op if one exists).

        Concurrent callers wait on one creation; only one pool is ever built.
        """
        if self._pool is not None:
            return
        async with self._pool_lock:
            if self._pool is not None:
                return
            self._pool = await self._create_pool()
            logger.info(
                "pool_created",
                dialect=self._dialect.name,
                min_size=self._config.min_size,
                max_size=self._config.max_size,
            )

    async def close(self) -> None:
        """Close the connection pool."""
        if self._pool is not None and self._owns_pool:
            logger.info("pool_closing", dialect=self._dialect.name)
            await self._close_pool(self._pool)
        self._pool = None

    async def _ensure_pool(self) -> Any:
        if self._pool is None:
            await self.connect()
        return self._pool

    # ------------------------------------------------------------------ #
    # Public capability set
    # ------------------------------------------------------------------ #

    async def query(self, sql: str, params: Sequence[Any] | None = None) -> QueryResult:
        """Execute one statement and return normalized rows and metadata."""
        pool = await self._ensure_pool()
        try:
            return await self._run_pooled(pool, sql, _as_params(params))
        except Exception as exc:
            logger.error("query_failed", dialect=self._dialect.name, sql=sql, error=str(exc))
            raise

    async def insert(self, sql: str, params: Sequence[Any] | None = None) -> InsertResult:
        """Execute a single-row INSERT and return the generated identity."""
        pool = await self._ensure_pool()
        try:
            return await self._insert(pool, sql, _as_params(params))
        except Exception as exc:
            logger.error("insert_failed", dialect=self._dialect.name, sql=sql, error=str(exc))
            raise

    async def transaction(
        self,
        statements: Iterable[TransactionStatement | Sequence[Any]],
    ) -> list[QueryResult]:
        """Run *statements* in order as one all-or-nothing unit.

        On failure the whole batch is rolled back and the triggering error
        is re-raised.  A failing rollback is logged but never replaces that
        error.
        """
        batch = [_as_statement(s) for s in statements]
        pool = await self._ensure_pool()
        conn = await self._acquire(pool)
        try:
            try:
                tx = await self._begin(conn)
            except Exception as exc:
                logger.error("transaction_begin_failed", dialect=self._dialect.name, error=str(exc))
                raise
            results: list[QueryResult] = []
            try:
                for index, statement in enumerate(batch):
                    results.append(
                        await self._run(conn, statement.query, _as_params(statement.values))
                    )
                await self._commit(tx)
            except Exception as exc:
                logger.error(
                    "transaction_failed",
                    dialect=self._dialect.name,
                    statement_index=index if batch else None,
                    statements=len(batch),
                    error=str(exc),
                )
                try:
                    await self._rollback(tx)
                except Exception as rollback_exc:
                    logger.error(
                        "transaction_rollback_failed",
                        dialect=self._dialect.name,
                        error=str(rollback_exc),
                    )
                raise
            return results
        finally:
            await self._release(pool, conn)

    async def ping(self) -> bool:
        """Round-trip a trivial query; raises if the engine is unreachable."""
        await self.query("SELECT 1")
        return True

    # ------------------------------------------------------------------ #
    # Driver hooks
    # ------------------------------------------------------------------ #

    @abstractmethod
    async def _create_pool(self) -> Any:
        """Create the driver pool from ``self._config``."""
        ...

    @abstractmethod
    async def _close_pool(self, pool: Any) -> None:
        ...

    @abstractmethod
    async def _run(self, target: Any, sql: str, params: tuple[Any, ...]) -> QueryResult:
        """Execute canonical *sql* on a pool or connection."""
        ...

    @abstractmethod
    async def _run_pooled(self, pool: Any, sql: str, params: tuple[Any, ...]) -> QueryResult:
        """Execute on a connection borrowed from *pool* for this call only."""
        ...

    @abstractmethod
    async def _insert(self, pool: Any, sql: str, params: tuple[Any, ...]) -> InsertResult:
        ...

    @abstractmethod
    async def _acquire(self, pool: Any) -> Any:
        ...

    @abstractmethod
    async def _release(self, pool: Any, conn: Any) -> None:
        ...

    @abstractmethod
    async def _begin(self, conn: Any) -> Any:
        """Start a transaction on *conn* and return its handle."""
        ...

    @abstractmethod
    async def _commit(self, tx: Any) -> None:
        ...

    @abstractmethod
    async def _rollback(self, tx: Any) -> None:
        ...

    async def __aenter__(self) -> DatabaseAdapter:
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        state = "connected" if self.is_connected else "disconnected"
        return f"{self.__class__.__name__}({self._dialect.name}, {state})"


__all__ = [
    "DatabaseAdapter",
]
