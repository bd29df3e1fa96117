"""
Async database adapters for PostgreSQL and MySQL.

Usage:
    from storefront.core.adapters import create_adapter

    adapter = create_adapter()          # active dialect from DATABASE_MODE
    await adapter.connect()
    result = await adapter.query("SELECT * FROM stores WHERE id = ?", [1])
    await adapter.close()
"""

from .base import DatabaseAdapter
from .mysql import MySQLAdapter
from .postgresql import PostgreSQLAdapter, normalize_database_url
from .registry import AdapterRegistry, adapter_for_pool, adapter_registry, create_adapter
from .types import (
    DatabaseConfig,
    InsertResult,
    QueryResult,
    Row,
    TransactionStatement,
    WriteMetadata,
)

__all__ = [
    # Types
    "DatabaseConfig",
    "InsertResult",
    "QueryResult",
    "Row",
    "TransactionStatement",
    "WriteMetadata",
    # Base
    "DatabaseAdapter",
    # Implementations
    "PostgreSQLAdapter",
    "MySQLAdapter",
    "normalize_database_url",
    # Registry
    "AdapterRegistry",
    "adapter_registry",
    "create_adapter",
    "adapter_for_pool",
]
