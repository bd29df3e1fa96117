"""Result shapes and connection configuration shared by all adapters."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from storefront.core.dialect import DialectMode

Row = dict[str, Any]


@dataclass(frozen=True, slots=True)
class WriteMetadata:
    """Engine-reported effects of a write statement (MySQL only)."""

    affected_rows: int
    insert_id: int | None = None


class QueryResult(NamedTuple):
    """Normalized ``(rows, metadata)`` pair returned for every statement.

    ``rows`` are dicts keyed by the projection's column names, in the order
    the engine returned them.  ``metadata`` is :class:`WriteMetadata` for
    MySQL statements that produce no result set, and ``None`` otherwise
    (always ``None`` on PostgreSQL).
    """

    rows: list[Row]
    metadata: WriteMetadata | None = None


@dataclass(frozen=True, slots=True)
class InsertResult:
    """Outcome of a single-row INSERT, identical in shape on both engines."""

    insert_id: Any
    affected_rows: int = 1
    rows: list[Row] = field(default_factory=list)


class TransactionStatement(NamedTuple):
    """One write inside a transaction batch."""

    query: str
    values: Sequence[Any] = ()


@dataclass
class DatabaseConfig:
    """
    Connection parameters for one adapter.

    Different fields are used by different engines.
    """

    mode: DialectMode = DialectMode.POSTGRESQL

    # PostgreSQL
    dsn: str | None = None
    ssl: str | bool = "prefer"
    command_timeout: float = 60.0

    # MySQL
    host: str = "localhost"
    port: int = 3306
    database: str | None = None
    username: str | None = None
    password: str | None = None

    # Connection pool
    min_size: int = 1
    max_size: int = 10

    # Extra options (driver-specific)
    options: dict[str, Any] = field(default_factory=dict)


__all__ = [
    "Row",
    "WriteMetadata",
    "QueryResult",
    "InsertResult",
    "TransactionStatement",
    "DatabaseConfig",
]
