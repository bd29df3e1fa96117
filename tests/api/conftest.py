"""Fixtures for API tests: an app wired to a FakeAdapter."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from storefront.api.app import create_app
from storefront.api.settings import StorefrontAPISettings


@pytest.fixture
def client(fake_db) -> TestClient:
    app = create_app(settings=StorefrontAPISettings(), database=fake_db)
    return TestClient(app, raise_server_exceptions=False)
