"""SQL dialect resolution and placeholder translation.

Every query in storefront is written once, with ``?`` positional
placeholders, and executed unchanged in meaning on either engine.  This
module answers "which engine is active" and rewrites the canonical SQL into
the form the active driver accepts.

Manifesto:
    Route code must not branch on the database engine.  Without a dialect
    layer every handler carries two copies of each statement and the copies
    drift.

    - **One placeholder style:** callers write ``?`` only
    - **One active dialect:** resolved from ``DATABASE_MODE``, default PostgreSQL
    - **No SQL parsing:** translation is a character-level rewrite

Architecture::

    caller SQL:  INSERT INTO t (name, price) VALUES (?, ?)
                              │
              ┌───────────────┴────────────────┐
              ▼                                ▼
    ┌────────────────────┐          ┌────────────────────────┐
    │ PostgreSQLDialect  │          │ MySQLDialect           │
    │ $1, $2  (asyncpg)  │          │ %s, %s  (aiomysql)     │
    │ RETURNING id       │          │ cursor.lastrowid       │
    └────────────────────┘          └────────────────────────┘

Known limitation:
    ``convert_placeholders`` does not parse SQL.  A literal ``?`` inside a
    string literal is rewritten like any other.  Pass ``skip_literals=True``
    to leave quoted spans alone when a statement embeds question marks.

Examples:
    >>> convert_placeholders("SELECT * FROM t WHERE a = ? AND b = ?")
    'SELECT * FROM t WHERE a = $1 AND b = $2'
    >>> get_dialect("mysql").render("SELECT * FROM t WHERE a = ?")
    'SELECT * FROM t WHERE a = %s'

Tags:
    dialect, sql, placeholders, postgresql, mysql
"""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from storefront.core.errors import InvalidConfigError

if TYPE_CHECKING:
    from storefront.core.settings import StorefrontSettings


class DialectMode(str, Enum):
    """The SQL engines storefront can run against."""

    MYSQL = "mysql"
    POSTGRESQL = "postgresql"

    @classmethod
    def parse(cls, value: str | DialectMode | None) -> DialectMode:
        """Parse a configuration value, defaulting to PostgreSQL when unset."""
        if isinstance(value, DialectMode):
            return value
        key = (value or "").strip().lower()
        if not key:
            return cls.POSTGRESQL
        if key == "postgres":
            return cls.POSTGRESQL
        try:
            return cls(key)
        except ValueError:
            raise InvalidConfigError(
                "DATABASE_MODE",
                value,
                f"Unknown DATABASE_MODE {value!r}. Supported: mysql, postgresql",
            ) from None


def get_active_dialect(settings: StorefrontSettings | None = None) -> DialectMode:
    """Return the dialect selected by process configuration.

    Reads ``DATABASE_MODE`` through the cached settings object, so repeated
    calls are cheap and always agree within a process.
    """
    if settings is None:
        from storefront.core.settings import get_settings

        settings = get_settings()
    return DialectMode.parse(settings.database_mode)


# =========================================================================
# Placeholder translation
# =========================================================================

_PLACEHOLDER = re.compile(r"\?")
_PLACEHOLDER_OR_LITERAL = re.compile(r"'(?:[^']|'')*'|\"(?:[^\"]|\"\")*\"|\?")


def _rewrite_placeholders(
    sql: str,
    replacement: Callable[[int], str],
    *,
    skip_literals: bool,
) -> str:
    count = 0

    def _sub(match: re.Match[str]) -> str:
        nonlocal count
        token = match.group(0)
        if token != "?":
            return token
        count += 1
        return replacement(count)

    pattern = _PLACEHOLDER_OR_LITERAL if skip_literals else _PLACEHOLDER
    return pattern.sub(_sub, sql)


def convert_placeholders(sql: str, *, skip_literals: bool = False) -> str:
    """Rewrite ``?`` placeholders to PostgreSQL's ``$1, $2, …`` form.

    Placeholders are numbered left to right starting at 1; the counter is
    local to each call.  SQL without placeholders is returned unchanged.
    """
    return _rewrite_placeholders(sql, lambda n: f"${n}", skip_literals=skip_literals)


def convert_to_format_params(sql: str, *, skip_literals: bool = False) -> str:
    """Rewrite ``?`` placeholders to the ``%s`` form used by aiomysql.

    Literal ``%`` characters are doubled first because the driver applies
    ``%`` formatting to the whole statement.
    """
    escaped = sql.replace("%", "%%")
    return _rewrite_placeholders(escaped, lambda _n: "%s", skip_literals=skip_literals)


# =========================================================================
# Dialects
# =========================================================================


@runtime_checkable
class Dialect(Protocol):
    """SQL dialect contract used by the database adapters."""

    @property
    def mode(self) -> DialectMode:
        """The :class:`DialectMode` this dialect implements."""
        ...

    @property
    def name(self) -> str:
        """Human-readable dialect name (e.g. ``'postgresql'``)."""
        ...

    def render(self, sql: str) -> str:
        """Translate canonical ``?``-style SQL into the driver's native form."""
        ...

    def returning_id(self, sql: str) -> str:
        """Return the INSERT text that makes the generated id retrievable."""
        ...


class PostgreSQLDialect:
    """PostgreSQL — ``$n`` placeholders, ``RETURNING id`` for identities."""

    @property
    def mode(self) -> DialectMode:
        return DialectMode.POSTGRESQL

    @property
    def name(self) -> str:
        return "postgresql"

    def render(self, sql: str) -> str:
        return convert_placeholders(sql)

    def returning_id(self, sql: str) -> str:
        # caller must not already include a RETURNING clause
        return f"{sql.rstrip().rstrip(';')} RETURNING id"


class MySQLDialect:
    """MySQL — ``%s`` placeholders, identity from the cursor's ``lastrowid``."""

    @property
    def mode(self) -> DialectMode:
        return DialectMode.MYSQL

    @property
    def name(self) -> str:
        return "mysql"

    def render(self, sql: str) -> str:
        return convert_to_format_params(sql)

    def returning_id(self, sql: str) -> str:
        return sql


# Dialects are stateless
_DIALECTS: dict[DialectMode, Dialect] = {
    DialectMode.POSTGRESQL: PostgreSQLDialect(),
    DialectMode.MYSQL: MySQLDialect(),
}


def get_dialect(mode: DialectMode | str) -> Dialect:
    """Get a dialect by mode or name (``'mysql'``, ``'postgresql'``, ``'postgres'``)."""
    return _DIALECTS[DialectMode.parse(mode)]


__all__ = [
    "DialectMode",
    "get_active_dialect",
    "convert_placeholders",
    "convert_to_format_params",
    "Dialect",
    "PostgreSQLDialect",
    "MySQLDialect",
    "get_dialect",
]
