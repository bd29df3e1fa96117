"""Storefront Core -- database access, configuration, errors and logging.

Manifesto:
    Every endpoint in the admin backend talks to the same relational store,
    and that store may be PostgreSQL or MySQL depending on deployment.
    ``storefront.core`` hides the difference: callers write ``?``-style SQL
    once and get dict rows back on either engine.

Architecture::

    errors.py          Structured error hierarchy (StorefrontError, ConfigError…)
    logging.py         structlog configuration + context binding
    settings.py        pydantic-settings (DATABASE_MODE, DATABASE_URL, DB_*)
    dialect.py         Dialect resolver + placeholder translation
    adapters/          PostgreSQLAdapter (asyncpg), MySQLAdapter (aiomysql)
    database.py        execute_query / execute_insert / execute_transaction
    schema/            DDL per dialect
    schema_loader.py   Apply DDL through an adapter
    health.py          /health router + database check

Tags:
    database, dialect, asyncpg, aiomysql, structlog, pydantic-settings
"""

from storefront.core.adapters import (
    DatabaseAdapter,
    InsertResult,
    MySQLAdapter,
    PostgreSQLAdapter,
    QueryResult,
    TransactionStatement,
    WriteMetadata,
    create_adapter,
)
from storefront.core.database import execute_insert, execute_query, execute_transaction
from storefront.core.dialect import DialectMode, convert_placeholders, get_active_dialect
from storefront.core.errors import (
    ConfigError,
    DatabaseConnectionError,
    DatabaseError,
    DatabaseNotConfiguredError,
    StorefrontError,
)

__all__ = [
    # Dialect
    "DialectMode",
    "convert_placeholders",
    "get_active_dialect",
    # Access layer
    "execute_query",
    "execute_insert",
    "execute_transaction",
    # Adapters
    "DatabaseAdapter",
    "PostgreSQLAdapter",
    "MySQLAdapter",
    "create_adapter",
    "QueryResult",
    "InsertResult",
    "TransactionStatement",
    "WriteMetadata",
    # Errors
    "StorefrontError",
    "ConfigError",
    "DatabaseNotConfiguredError",
    "DatabaseError",
    "DatabaseConnectionError",
]
