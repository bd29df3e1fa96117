"""Tests for the adapter registry and ``create_adapter``."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from storefront.core.adapters import (
    MySQLAdapter,
    PostgreSQLAdapter,
    adapter_for_pool,
    adapter_registry,
    create_adapter,
)
from storefront.core.dialect import DialectMode
from storefront.core.errors import ConfigError
from storefront.core.settings import StorefrontSettings


class TestAdapterRegistry:
    def test_create_builds_unconnected_adapter(self):
        adapter = adapter_registry.create("mysql", host="db.local")
        assert isinstance(adapter, MySQLAdapter)
        assert not adapter.is_connected

    def test_get_by_mode(self):
        assert adapter_registry.get(DialectMode.MYSQL) is MySQLAdapter
        assert adapter_registry.get("Postgres") is PostgreSQLAdapter

    def test_unknown_name_raises(self):
        with pytest.raises(ConfigError, match="sqlite"):
            adapter_registry.get("sqlite")


class TestCreateAdapter:
    def test_postgresql_from_settings(self):
        settings = StorefrontSettings(
            database_url="postgresql://localhost/shop",
            database_ssl="disable",
            db_pool_max_size=3,
        )

        adapter = create_adapter(settings)

        assert isinstance(adapter, PostgreSQLAdapter)
        assert adapter.config.dsn == "postgresql://localhost/shop"
        assert adapter.config.ssl == "disable"
        assert adapter.config.max_size == 3
        assert not adapter.is_connected

    def test_mysql_from_settings(self):
        settings = StorefrontSettings(
            database_mode="mysql",
            db_host="db.local",
            db_user="admin",
            db_password="secret",
            db_name="shop",
        )

        adapter = create_adapter(settings)

        assert isinstance(adapter, MySQLAdapter)
        assert adapter.config.host == "db.local"
        assert adapter.config.database == "shop"
        assert adapter.config.port == 3306

    def test_postgresql_without_url_returns_none(self):
        assert create_adapter(StorefrontSettings()) is None

    def test_mysql_without_host_returns_none(self):
        assert create_adapter(StorefrontSettings(database_mode="mysql")) is None

    def test_mode_override(self):
        settings = StorefrontSettings(database_url="postgresql://localhost/shop", db_host="db.local")
        assert isinstance(create_adapter(settings, mode="mysql"), MySQLAdapter)

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("DATABASE_MODE", "mysql")
        monkeypatch.setenv("DB_HOST", "env-host")
        adapter = create_adapter()
        assert isinstance(adapter, MySQLAdapter)
        assert adapter.config.host == "env-host"


class TestAdapterForPool:
    def test_wraps_pool_without_owning_it(self):
        pool = MagicMock()
        adapter = adapter_for_pool(pool, "mysql")
        assert isinstance(adapter, MySQLAdapter)
        assert adapter.pool is pool
        assert adapter.is_connected
        assert adapter.mode is DialectMode.MYSQL
