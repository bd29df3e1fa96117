"""Database adapter registry and factory.

Manifesto:
    Consumers should never hard-code adapter class names.  The registry
    maps dialect names to adapter classes; ``create_adapter()`` builds the
    adapter for the process's active dialect from settings, and
    ``adapter_for_pool()`` wraps a driver pool somebody else created.

Features:
    - ``AdapterRegistry`` singleton with pre-registered defaults
    - ``create_adapter()`` factory: settings → unconnected adapter (or ``None``)
    - ``adapter_for_pool()``: raw asyncpg / aiomysql pool → adapter

Tags:
    database, registry, factory, singleton

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from storefront.core.dialect import DialectMode
from storefront.core.errors import ConfigError
from storefront.core.logging import get_logger

from .base import DatabaseAdapter
from .mysql import MySQLAdapter
from .postgresql import PostgreSQLAdapter

if TYPE_CHECKING:
    from storefront.core.settings import StorefrontSettings

logger = get_logger(__name__)


class AdapterRegistry:
    """
    Registry for database adapter classes.

    Pre-registered adapters:
    - ``postgresql`` / ``postgres`` — :class:`PostgreSQLAdapter`
    - ``mysql`` — :class:`MySQLAdapter`
    """

    def __init__(self):
        self._factories: dict[str, type[DatabaseAdapter]] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        self._factories["postgresql"] = PostgreSQLAdapter
        self._factories["postgres"] = PostgreSQLAdapter  # Alias
        self._factories["mysql"] = MySQLAdapter

    def get(self, name: str | DialectMode) -> type[DatabaseAdapter]:
        """Look up an adapter class by dialect name."""
        key = name.value if isinstance(name, DialectMode) else name.lower()
        if key not in self._factories:
            raise ConfigError(f"Unknown database adapter: {key}")
        return self._factories[key]

    def create(self, name: str | DialectMode, **kwargs: Any) -> DatabaseAdapter:
        """Create an adapter by name."""
        return self.get(name)(**kwargs)


# Global registry
adapter_registry = AdapterRegistry()


def create_adapter(
    settings: StorefrontSettings | None = None,
    mode: DialectMode | str | None = None,
) -> DatabaseAdapter | None:
    """
    Build the adapter for the active dialect.

    Returns ``None`` when the selected engine has no connection settings
    (PostgreSQL without ``DATABASE_URL``, MySQL without ``DB_HOST``).  The
    pool is not opened here; call ``connect()`` or let the first query do it.

    Usage:
        adapter = create_adapter()
        if adapter is not None:
            await adapter.connect()
    """
    if settings is None:
        from storefront.core.settings import get_settings

        settings = get_settings()

    dialect = DialectMode.parse(mode if mode is not None else settings.database_mode)

    if dialect is DialectMode.MYSQL:
        if not settings.db_host:
            logger.warning("database_not_configured", dialect=dialect.value, missing="DB_HOST")
            return None
        return adapter_registry.create(
            dialect,
            host=settings.db_host,
            port=settings.db_port,
            database=settings.db_name,
            username=settings.db_user,
            password=settings.db_password,
            min_size=settings.db_pool_min_size,
            max_size=settings.db_pool_max_size,
        )

    if not settings.database_url:
        logger.warning("database_not_configured", dialect=dialect.value, missing="DATABASE_URL")
        return None
    return adapter_registry.create(
        dialect,
        dsn=settings.database_url,
        ssl=settings.database_ssl,
        min_size=settings.db_pool_min_size,
        max_size=settings.db_pool_max_size,
        command_timeout=settings.db_command_timeout,
    )


def adapter_for_pool(pool: Any, mode: DialectMode | str) -> DatabaseAdapter:
    """Wrap an existing driver pool in the adapter for *mode*."""
    return adapter_registry.get(DialectMode.parse(mode)).from_pool(pool)


__all__ = [
    "AdapterRegistry",
    "adapter_registry",
    "create_adapter",
    "adapter_for_pool",
]
