"""
End-to-end checks against real PostgreSQL / MySQL servers.

Skipped unless ``STOREFRONT_TEST_PG_URL`` (a PostgreSQL DSN) and/or
``STOREFRONT_TEST_MYSQL_HOST`` (plus ``STOREFRONT_TEST_MYSQL_USER``,
``STOREFRONT_TEST_MYSQL_PASSWORD``, ``STOREFRONT_TEST_MYSQL_DB``) are set.
The same assertions run on both engines.
"""

from __future__ import annotations

import os

import pytest
import pytest_asyncio

from storefront.core.adapters import MySQLAdapter, PostgreSQLAdapter, TransactionStatement
from storefront.core.database import execute_insert, execute_query, execute_transaction
from storefront.core.schema_loader import apply_schema

pytestmark = pytest.mark.integration

_PG_URL = os.environ.get("STOREFRONT_TEST_PG_URL")
_MYSQL_HOST = os.environ.get("STOREFRONT_TEST_MYSQL_HOST")


def _engines():
    return [
        pytest.param(
            "postgresql",
            marks=pytest.mark.skipif(not _PG_URL, reason="STOREFRONT_TEST_PG_URL not set"),
        ),
        pytest.param(
            "mysql",
            marks=pytest.mark.skipif(not _MYSQL_HOST, reason="STOREFRONT_TEST_MYSQL_HOST not set"),
        ),
    ]


def _build(engine: str):
    if engine == "postgresql":
        return PostgreSQLAdapter(_PG_URL, ssl="disable")
    return MySQLAdapter(
        host=_MYSQL_HOST,
        port=int(os.environ.get("STOREFRONT_TEST_MYSQL_PORT", "3306")),
        database=os.environ.get("STOREFRONT_TEST_MYSQL_DB", "storefront_test"),
        username=os.environ.get("STOREFRONT_TEST_MYSQL_USER", "root"),
        password=os.environ.get("STOREFRONT_TEST_MYSQL_PASSWORD", ""),
    )


@pytest_asyncio.fixture(params=_engines())
async def db(request):
    adapter = _build(request.param)
    await adapter.connect()
    await apply_schema(adapter)
    await adapter.query("DELETE FROM stores")
    yield adapter
    await adapter.query("DELETE FROM stores")
    await adapter.close()


async def _make_store(db, name="Bistro") -> int:
    result = await execute_insert(
        db,
        "INSERT INTO stores (name, category, logo_url, location, longitude, latitude) VALUES (?, ?, ?, ?, ?, ?)",
        [name, "Restaurant", "https://cdn.test/logo.png", "Poblacion", 121.05, 14.55],
    )
    return result.insert_id


@pytest.mark.asyncio
async def test_insert_then_select_round_trip(db):
    store_id = await _make_store(db)

    result = await execute_insert(
        db,
        "INSERT INTO menu_items (name, price, store_id) VALUES (?, ?, ?)",
        ["Pancit", 120, store_id],
    )
    assert isinstance(result.insert_id, int)
    assert result.insert_id > 0

    rows, _ = await execute_query(db, "SELECT name, price FROM menu_items WHERE id = ?", [result.insert_id])
    assert len(rows) == 1
    assert rows[0]["name"] == "Pancit"
    assert float(rows[0]["price"]) == 120.0
    assert set(rows[0]) == {"name", "price"}


@pytest.mark.asyncio
async def test_fractional_price_round_trip(db):
    store_id = await _make_store(db)

    result = await execute_insert(
        db,
        "INSERT INTO menu_items (name, price, store_id) VALUES (?, ?, ?)",
        ["Pancit", 85.5, store_id],
    )

    rows, _ = await execute_query(db, "SELECT name, price FROM menu_items WHERE id = ?", [result.insert_id])
    assert len(rows) == 1
    assert rows[0]["name"] == "Pancit"
    assert float(rows[0]["price"]) == 85.5


@pytest.mark.asyncio
async def test_insert_ids_increase(db):
    first = await _make_store(db, "A")
    second = await _make_store(db, "B")
    assert second > first


@pytest.mark.asyncio
async def test_rows_follow_order_by(db):
    for name in ("Cafe", "Alpha", "Bistro"):
        await _make_store(db, name)
    rows, _ = await execute_query(db, "SELECT name FROM stores ORDER BY name ASC")
    assert [r["name"] for r in rows] == ["Alpha", "Bistro", "Cafe"]


@pytest.mark.asyncio
async def test_transaction_commits_all(db):
    store_id = await _make_store(db)
    insert = "INSERT INTO menu_items (name, price, store_id) VALUES (?, ?, ?)"

    results = await execute_transaction(
        db,
        [TransactionStatement(insert, (f"Item {i}", 10 + i, store_id)) for i in range(3)],
    )

    assert len(results) == 3
    rows, _ = await execute_query(db, "SELECT COUNT(*) AS n FROM menu_items WHERE store_id = ?", [store_id])
    assert int(rows[0]["n"]) == 3


@pytest.mark.asyncio
async def test_transaction_statements_see_earlier_writes(db):
    await execute_transaction(
        db,
        [
            TransactionStatement(
                "INSERT INTO stores (name, category, logo_url, location, longitude, latitude) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                ("Carinderia", "Restaurant", "https://cdn.test/c.png", "Makati", 121.02, 14.56),
            ),
            TransactionStatement(
                "INSERT INTO menu_items (name, price, store_id) "
                "VALUES (?, ?, (SELECT id FROM stores WHERE name = ?))",
                ("Adobo", 150.25, "Carinderia"),
            ),
        ],
    )

    rows, _ = await execute_query(
        db,
        "SELECT m.name, m.price FROM menu_items m JOIN stores s ON s.id = m.store_id WHERE s.name = ?",
        ["Carinderia"],
    )
    assert [r["name"] for r in rows] == ["Adobo"]
    assert float(rows[0]["price"]) == 150.25


@pytest.mark.asyncio
async def test_transaction_rolls_back_on_not_null_violation(db):
    store_id = await _make_store(db)
    insert = "INSERT INTO menu_items (name, price, store_id) VALUES (?, ?, ?)"

    with pytest.raises(Exception):  # noqa: B017
        await execute_transaction(
            db,
            [
                TransactionStatement(insert, ("Pancit", 120, store_id)),
                TransactionStatement(insert, ("Broken", None, store_id)),
                TransactionStatement(insert, ("Lumpia", 45, store_id)),
            ],
        )

    rows, _ = await execute_query(db, "SELECT id FROM menu_items WHERE store_id = ?", [store_id])
    assert rows == []


@pytest.mark.asyncio
async def test_delete_cascades_to_menu(db):
    store_id = await _make_store(db)
    await execute_insert(
        db,
        "INSERT INTO menu_photos (photo_url, store_id) VALUES (?, ?)",
        ["https://cdn.test/menu.jpg", store_id],
    )

    await execute_query(db, "DELETE FROM stores WHERE id = ?", [store_id])

    rows, _ = await execute_query(db, "SELECT id FROM menu_photos WHERE store_id = ?", [store_id])
    assert rows == []
