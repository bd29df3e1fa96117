"""
Shared pytest fixtures for storefront tests.

This module provides:
- Settings isolation: the cached settings singletons are cleared and the
  database environment variables removed around every unit test
- ``fake_db`` / ``ctx``: an in-memory adapter and an OperationContext on it

Usage:
    async def test_something(fake_db, ctx):
        fake_db.push(rows({"id": 1, "name": "Bistro"}))
        result = await get_store(ctx, 1)
"""

from __future__ import annotations

import pytest

from storefront.ops.context import OperationContext
from tests._support.fakes import FakeAdapter

_DB_ENV_VARS = (
    "DATABASE_MODE",
    "DATABASE_URL",
    "DATABASE_SSL",
    "DB_HOST",
    "DB_PORT",
    "DB_USER",
    "DB_PASSWORD",
    "DB_NAME",
    "DEBUG",
    "API_PREFIX",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch: pytest.MonkeyPatch, tmp_path, request):
    """Start every unit test from a clean environment and empty settings caches."""
    from storefront.api.deps import get_settings as get_api_settings
    from storefront.core.settings import get_settings

    if request.node.get_closest_marker("integration") is None:
        for name in _DB_ENV_VARS:
            monkeypatch.delenv(name, raising=False)
        # keep a developer's .env out of unit tests
        monkeypatch.chdir(tmp_path)

    get_settings.cache_clear()
    get_api_settings.cache_clear()
    yield
    get_settings.cache_clear()
    get_api_settings.cache_clear()


@pytest.fixture
def fake_db() -> FakeAdapter:
    return FakeAdapter()


@pytest.fixture
def ctx(fake_db: FakeAdapter) -> OperationContext:
    return OperationContext(db=fake_db, request_id="test-request", caller="sdk")
