"""
Menu photos router.

Endpoints:
    GET    /menu-photos?store_id=   List a store's photos (404 when empty)
    POST   /menu-photos             Record an uploaded photo
    GET    /menu-photos/{id}        Get one photo
    DELETE /menu-photos/{id}        Remove a photo reference

Tags:
    api, menu-photos
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Query
from pydantic import BaseModel, Field

from storefront.api.deps import OpContext
from storefront.api.middleware.errors import problem_response
from storefront.api.schemas.common import SuccessResponse
from storefront.api.utils import _handle_error, _success
from storefront.ops import menu_photos as ops
from storefront.ops.requests import MenuPhotoRequest

router = APIRouter(prefix="/menu-photos")


class MenuPhotoBody(BaseModel):
    photo_url: str = Field(..., description="URL of the uploaded photo")
    store_id: int = Field(..., description="Owning store")


@router.get("", response_model=SuccessResponse)
async def list_menu_photos(
    ctx: OpContext,
    store_id: int | None = Query(None, description="Store whose photos to list"),
):
    if store_id is None:
        return problem_response(status=400, title="Store ID is required")
    result = await ops.list_menu_photos(ctx, store_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.post("", status_code=201, response_model=SuccessResponse)
async def create_menu_photo(ctx: OpContext, body: MenuPhotoBody):
    result = await ops.create_menu_photo(
        ctx,
        MenuPhotoRequest(photo_url=body.photo_url, store_id=body.store_id),
    )
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.get("/{photo_id}", response_model=SuccessResponse)
async def get_menu_photo(ctx: OpContext, photo_id: int = Path(..., description="Photo ID")):
    result = await ops.get_menu_photo(ctx, photo_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.delete("/{photo_id}", response_model=SuccessResponse)
async def delete_menu_photo(ctx: OpContext, photo_id: int = Path(..., description="Photo ID")):
    result = await ops.delete_menu_photo(ctx, photo_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)
