"""Tests for menu photo operations."""

from __future__ import annotations

import pytest

from storefront.ops.menu_photos import create_menu_photo, delete_menu_photo, get_menu_photo, list_menu_photos
from storefront.ops.requests import MenuPhotoRequest
from tests._support.fakes import inserted, rows

_PHOTO = {"id": 1, "photo_url": "https://cdn.test/menu.jpg", "store_id": 3, "created_at": None, "updated_at": None}


class TestMenuPhotos:
    @pytest.mark.asyncio
    async def test_list(self, fake_db, ctx):
        fake_db.push(rows(_PHOTO))
        result = await list_menu_photos(ctx, 3)
        assert [p.photo_url for p in result.data] == ["https://cdn.test/menu.jpg"]

    @pytest.mark.asyncio
    async def test_list_empty_is_not_found(self, ctx):
        result = await list_menu_photos(ctx, 3)
        assert result.error.message == "No menu photos found"

    @pytest.mark.asyncio
    async def test_get(self, fake_db, ctx):
        fake_db.push(rows(_PHOTO))
        assert (await get_menu_photo(ctx, 1)).data.store_id == 3

    @pytest.mark.asyncio
    async def test_create(self, fake_db, ctx):
        fake_db.push(inserted(1), rows(_PHOTO))
        result = await create_menu_photo(ctx, MenuPhotoRequest(photo_url="https://cdn.test/menu.jpg", store_id=3))
        assert result.data.id == 1
        assert fake_db.calls[0][1] == ("https://cdn.test/menu.jpg", 3)

    @pytest.mark.asyncio
    async def test_create_requires_fields(self, fake_db, ctx):
        result = await create_menu_photo(ctx, MenuPhotoRequest(photo_url="", store_id=3))
        assert result.error.code == "VALIDATION_FAILED"
        assert fake_db.calls == []

    @pytest.mark.asyncio
    async def test_delete(self, fake_db, ctx):
        fake_db.push(rows({"id": 1}))
        result = await delete_menu_photo(ctx, 1)
        assert result.data.deleted

    @pytest.mark.asyncio
    async def test_delete_missing(self, fake_db, ctx):
        result = await delete_menu_photo(ctx, 1)
        assert result.error.code == "NOT_FOUND"
        assert len(fake_db.calls) == 1
