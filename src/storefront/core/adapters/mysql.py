"""MySQL database adapter (aiomysql)."""

from __future__ import annotations

from typing import Any

import aiomysql
import pymysql

from storefront.core.dialect import DialectMode
from storefront.core.errors import DatabaseConnectionError, MissingConfigError

from .base import DatabaseAdapter
from .types import DatabaseConfig, InsertResult, QueryResult, WriteMetadata


class MySQLAdapter(DatabaseAdapter):
    """
    MySQL adapter backed by an aiomysql pool.

    The pool runs in autocommit mode with dict cursors.  Statements that
    produce no result set report :class:`WriteMetadata` (affected rows and
    ``lastrowid``); inserts read their identity from the cursor.
    """

    mode = DialectMode.MYSQL

    def __init__(
        self,
        host: str | None = None,
        port: int = 3306,
        database: str | None = None,
        username: str | None = None,
        password: str | None = None,
        *,
        min_size: int = 1,
        max_size: int = 10,
        **kwargs: Any,
    ):
        config = DatabaseConfig(
            mode=DialectMode.MYSQL,
            host=host or "",
            port=port,
            database=database,
            username=username,
            password=password,
            min_size=min_size,
            max_size=max_size,
            options=kwargs,
        )
        super().__init__(config)

    async def _create_pool(self) -> Any:
        if not self._config.host:
            raise MissingConfigError("DB_HOST")

        try:
            return await aiomysql.create_pool(
                host=self._config.host,
                port=self._config.port,
                user=self._config.username or "",
                password=self._config.password or "",
                db=self._config.database,
                minsize=self._config.min_size,
                maxsize=self._config.max_size,
                autocommit=True,
                cursorclass=aiomysql.DictCursor,
                **self._config.options,
            )
        except (OSError, pymysql.err.OperationalError) as e:
            raise DatabaseConnectionError(
                f"Failed to connect to MySQL: {e}",
                cause=e,
            ) from e

    async def _close_pool(self, pool: Any) -> None:
        pool.close()
        await pool.wait_closed()

    async def _run(self, target: Any, sql: str, params: tuple[Any, ...]) -> QueryResult:
        # params is always a tuple so the driver un-escapes %% consistently
        async with target.cursor(aiomysql.DictCursor) as cur:
            await cur.execute(self._dialect.render(sql), params)
            if cur.description is None:
                return QueryResult([], WriteMetadata(cur.rowcount, cur.lastrowid))
            rows = await cur.fetchall()
            return QueryResult([dict(row) for row in rows], None)

    async def _run_pooled(self, pool: Any, sql: str, params: tuple[Any, ...]) -> QueryResult:
        conn = await self._acquire(pool)
        try:
            return await self._run(conn, sql, params)
        finally:
            await self._release(pool, conn)

    async def _insert(self, pool: Any, sql: str, params: tuple[Any, ...]) -> InsertResult:
        result = await self._run_pooled(pool, self._dialect.returning_id(sql), params)
        meta = result.metadata or WriteMetadata(0, None)
        return InsertResult(insert_id=meta.insert_id, affected_rows=meta.affected_rows)

    async def _acquire(self, pool: Any) -> Any:
        return await pool.acquire()

    async def _release(self, pool: Any, conn: Any) -> None:
        # aiomysql's release is not a coroutine
        pool.release(conn)

    async def _begin(self, conn: Any) -> Any:
        await conn.begin()
        return conn

    async def _commit(self, tx: Any) -> None:
        await tx.commit()

    async def _rollback(self, tx: Any) -> None:
        await tx.rollback()


__all__ = [
    "MySQLAdapter",
]
