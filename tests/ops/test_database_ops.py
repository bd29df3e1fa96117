"""Tests for connectivity and schema operations."""

from __future__ import annotations

import pytest

from storefront.core.dialect import DialectMode
from storefront.ops.context import OperationContext
from storefront.ops.database import check_connection, initialize_database
from tests._support.fakes import FakeAdapter


class TestCheckConnection:
    @pytest.mark.asyncio
    async def test_connected(self, fake_db, ctx):
        result = await check_connection(ctx)
        assert result.data.connected
        assert result.data.dialect == "postgresql"
        assert fake_db.statements == ["SELECT 1"]

    @pytest.mark.asyncio
    async def test_not_configured(self):
        result = await check_connection(OperationContext(db=None, caller="cli"))
        assert result.error.code == "INTERNAL"
        assert result.error.message == "Database connection not configured"

    @pytest.mark.asyncio
    async def test_unreachable(self, fake_db, ctx):
        fake_db.push(ConnectionRefusedError("connection refused"))
        result = await check_connection(ctx)
        assert result.error.message == "Failed to connect to the database"
        assert result.error.retryable


class TestInitializeDatabase:
    @pytest.mark.asyncio
    async def test_applies_dialect_schema(self):
        db = FakeAdapter(mode=DialectMode.MYSQL)
        result = await initialize_database(OperationContext(db=db, caller="cli"))

        assert result.success
        assert result.data.dialect == "mysql"
        assert result.data.files_applied == ["00_storefront.sql"]
        assert "INFORMATION_SCHEMA" in db.statements[-1]

    @pytest.mark.asyncio
    async def test_not_configured(self):
        result = await initialize_database(OperationContext(db=None))
        assert result.error.message == "Database connection not configured"
