"""PostgreSQL database adapter (asyncpg)."""

from __future__ import annotations

import re
from typing import Any

import asyncpg

from storefront.core.dialect import DialectMode
from storefront.core.errors import DatabaseConnectionError, MissingConfigError

from .base import DatabaseAdapter
from .types import DatabaseConfig, InsertResult, QueryResult


def normalize_database_url(url: str) -> str:
    """Normalize a database URL for asyncpg.

    Strips the SQLAlchemy-style ``+asyncpg`` driver suffix and the
    ``sslmode`` query parameter (asyncpg takes SSL via ``ssl=``).

    Examples:
        >>> normalize_database_url("postgresql+asyncpg://localhost/db")
        'postgresql://localhost/db'

        >>> normalize_database_url("postgresql://localhost/db?sslmode=require")
        'postgresql://localhost/db'
    """
    if url.startswith("postgresql+asyncpg://"):
        url = url.replace("postgresql+asyncpg://", "postgresql://", 1)

    if "?sslmode=" in url or "&sslmode=" in url:
        url = re.sub(r"[?&]sslmode=[^&]*", "", url)
        url = url.rstrip("?&")

    return url


class PostgreSQLAdapter(DatabaseAdapter):
    """
    PostgreSQL adapter backed by an asyncpg pool.

    Statements are rendered from ``?`` to ``$n`` form before execution;
    inserts get ``RETURNING id`` appended so the generated key comes back
    as the first row.  Write metadata is always ``None``.
    """

    mode = DialectMode.POSTGRESQL

    def __init__(
        self,
        dsn: str | None = None,
        *,
        ssl: str | bool = "prefer",
        min_size: int = 1,
        max_size: int = 10,
        command_timeout: float = 60.0,
        **kwargs: Any,
    ):
        config = DatabaseConfig(
            mode=DialectMode.POSTGRESQL,
            dsn=dsn,
            ssl=ssl,
            min_size=min_size,
            max_size=max_size,
            command_timeout=command_timeout,
            options=kwargs,
        )
        super().__init__(config)

    async def _create_pool(self) -> Any:
        if not self._config.dsn:
            raise MissingConfigError("DATABASE_URL")

        try:
            return await asyncpg.create_pool(
                normalize_database_url(self._config.dsn),
                min_size=self._config.min_size,
                max_size=self._config.max_size,
                command_timeout=self._config.command_timeout,
                ssl=self._config.ssl,
                **self._config.options,
            )
        except (OSError, asyncpg.PostgresError) as e:
            raise DatabaseConnectionError(
                f"Failed to connect to PostgreSQL: {e}",
                cause=e,
            ) from e

    async def _close_pool(self, pool: Any) -> None:
        await pool.close()

    async def _run(self, target: Any, sql: str, params: tuple[Any, ...]) -> QueryResult:
        records = await target.fetch(self._dialect.render(sql), *params)
        return QueryResult([dict(record) for record in records], None)

    async def _run_pooled(self, pool: Any, sql: str, params: tuple[Any, ...]) -> QueryResult:
        # asyncpg pools borrow and return a connection per call
        return await self._run(pool, sql, params)

    async def _insert(self, pool: Any, sql: str, params: tuple[Any, ...]) -> InsertResult:
        result = await self._run(pool, self._dialect.returning_id(sql), params)
        insert_id = result.rows[0]["id"] if result.rows else None
        return InsertResult(insert_id=insert_id, affected_rows=len(result.rows), rows=result.rows)

    async def _acquire(self, pool: Any) -> Any:
        return await pool.acquire()

    async def _release(self, pool: Any, conn: Any) -> None:
        await pool.release(conn)

    async def _begin(self, conn: Any) -> Any:
        tx = conn.transaction()
        await tx.start()
        return tx

    async def _commit(self, tx: Any) -> None:
        await tx.commit()

    async def _rollback(self, tx: Any) -> None:
        await tx.rollback()


__all__ = [
    "PostgreSQLAdapter",
    "normalize_database_url",
]
