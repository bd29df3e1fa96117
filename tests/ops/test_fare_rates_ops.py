"""Tests for fare rate operations."""

from __future__ import annotations

from decimal import Decimal

import pytest

from storefront.ops.fare_rates import get_fare_rate, list_fare_rates, update_fare_rate
from storefront.ops.requests import FareRateRequest
from tests._support.fakes import rows


def _rate(**overrides):
    row = {
        "id": 1,
        "base_fare": Decimal("49.00"),
        "rate_per_km": Decimal("10.50"),
        "other_charges": Decimal("0.00"),
        "created_at": None,
        "updated_at": None,
    }
    row.update(overrides)
    return row


class TestFareRates:
    @pytest.mark.asyncio
    async def test_list(self, fake_db, ctx):
        fake_db.push(rows(_rate()))
        result = await list_fare_rates(ctx)
        assert result.data[0].rate_per_km == 10.5

    @pytest.mark.asyncio
    async def test_get_missing(self, ctx):
        assert (await get_fare_rate(ctx, 1)).error.code == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_update(self, fake_db, ctx):
        fake_db.push(rows({"id": 1}), rows(), rows(_rate(base_fare=Decimal("55.00"))))

        result = await update_fare_rate(ctx, 1, FareRateRequest(base_fare=55, rate_per_km=10.5, other_charges=0))

        assert result.data.base_fare == 55.0
        assert fake_db.calls[1][1] == (55, 10.5, 0, 1)

    @pytest.mark.asyncio
    async def test_update_requires_all_fields(self, ctx):
        result = await update_fare_rate(ctx, 1, FareRateRequest(base_fare=55))
        assert result.error.message == "All fields are required: base_fare, rate_per_km, other_charges"

    @pytest.mark.asyncio
    async def test_update_rejects_negative(self, fake_db, ctx):
        result = await update_fare_rate(ctx, 1, FareRateRequest(base_fare=55, rate_per_km=-1, other_charges=0))
        assert result.error.code == "VALIDATION_FAILED"
        assert fake_db.calls == []

    @pytest.mark.asyncio
    async def test_update_missing(self, ctx):
        result = await update_fare_rate(ctx, 1, FareRateRequest(base_fare=1, rate_per_km=1, other_charges=1))
        assert result.error.code == "NOT_FOUND"
