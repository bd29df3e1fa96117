"""
Adapter double for ops and API tests.

Usage::

    from tests._support.fakes import FakeAdapter, rows

    db = FakeAdapter().push(rows({"id": 1, "name": "Bistro"}))
"""

from __future__ import annotations

from typing import Any

from storefront.core.adapters import DatabaseAdapter, DatabaseConfig, InsertResult, QueryResult
from storefront.core.dialect import DialectMode


def rows(*records: dict[str, Any]) -> QueryResult:
    """Build a read result from row dicts."""
    return QueryResult(list(records), None)


def inserted(insert_id: Any) -> InsertResult:
    return InsertResult(insert_id=insert_id, affected_rows=1)


class FakeAdapter(DatabaseAdapter):
    """Adapter double: answers ``query``/``insert``/``transaction`` from a script.

    Results pushed with :meth:`push` are consumed in call order; an
    exception instance is raised instead of returned.  When the script is
    exhausted an empty result is returned.
    """

    mode = DialectMode.POSTGRESQL

    def __init__(self, mode: DialectMode = DialectMode.POSTGRESQL):
        self.mode = mode
        super().__init__(DatabaseConfig(mode=mode))
        self._pool = object()
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.transactions: list[list[Any]] = []
        self.script: list[Any] = []

    def push(self, *results: Any) -> FakeAdapter:
        self.script.extend(results)
        return self

    def _next(self, default: Any) -> Any:
        if not self.script:
            return default
        result = self.script.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def statements(self) -> list[str]:
        return [sql for sql, _ in self.calls]

    async def query(self, sql, params=None):
        self.calls.append((sql, tuple(params or ())))
        return self._next(QueryResult([], None))

    async def insert(self, sql, params=None):
        self.calls.append((sql, tuple(params or ())))
        return self._next(InsertResult(insert_id=None, affected_rows=0))

    async def transaction(self, statements):
        batch = list(statements)
        self.transactions.append(batch)
        return self._next([QueryResult([], None) for _ in batch])

    async def close(self) -> None:
        self._pool = None

    async def _create_pool(self):
        return object()

    async def _close_pool(self, pool):
        pass

    async def _run(self, target, sql, params):
        raise AssertionError("FakeAdapter does not execute SQL")

    async def _run_pooled(self, pool, sql, params):
        raise AssertionError("FakeAdapter does not execute SQL")

    async def _insert(self, pool, sql, params):
        raise AssertionError("FakeAdapter does not execute SQL")

    async def _acquire(self, pool):
        raise AssertionError("FakeAdapter has no connections")

    async def _release(self, pool, conn):
        raise AssertionError("FakeAdapter has no connections")

    async def _begin(self, conn):
        raise AssertionError("FakeAdapter has no transactions")

    async def _commit(self, tx):
        raise AssertionError("FakeAdapter has no transactions")

    async def _rollback(self, tx):
        raise AssertionError("FakeAdapter has no transactions")


