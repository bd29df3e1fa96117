"""Tests for the /fare-rates endpoints."""

from __future__ import annotations

from tests._support.fakes import rows

_RATE = {"id": 1, "base_fare": 49, "rate_per_km": 10.5, "other_charges": 0, "created_at": None, "updated_at": None}


class TestFareRatesAPI:
    def test_list(self, client, fake_db):
        fake_db.push(rows(_RATE))
        resp = client.get("/api/fare-rates")
        assert resp.status_code == 200
        assert resp.json()["data"][0]["base_fare"] == 49.0

    def test_update(self, client, fake_db):
        fake_db.push(rows({"id": 1}), rows(), rows({**_RATE, "base_fare": 55}))
        resp = client.put("/api/fare-rates/1", json={"base_fare": 55, "rate_per_km": 10.5, "other_charges": 0})
        assert resp.status_code == 200
        assert resp.json()["data"]["base_fare"] == 55.0

    def test_update_negative(self, client):
        resp = client.put("/api/fare-rates/1", json={"base_fare": -1, "rate_per_km": 10.5, "other_charges": 0})
        assert resp.status_code == 400

    def test_get_missing(self, client):
        assert client.get("/api/fare-rates/7").status_code == 404
