"""
Stores router — store listings.

Endpoints:
    GET    /stores           List stores ordered by name
    POST   /stores           Create a store
    GET    /stores/{id}      Get one store
    PUT    /stores/{id}      Replace a store's fields
    DELETE /stores/{id}      Delete a store with its menu items and photos

Tags:
    api, stores
"""

from __future__ import annotations

from fastapi import APIRouter, Path
from pydantic import BaseModel, Field

from storefront.api.deps import OpContext
from storefront.api.schemas.common import SuccessResponse
from storefront.api.utils import _handle_error, _success
from storefront.ops import stores as ops
from storefront.ops.requests import StoreRequest

router = APIRouter(prefix="/stores")


class StoreBody(BaseModel):
    """Request body for creating or replacing a store."""

    name: str = Field(..., description="Store name")
    category: str = Field(..., description="Store category (e.g. restaurant, grocery)")
    logo_url: str = Field(..., description="URL of the uploaded logo")
    location: str = Field(..., description="Street address")
    longitude: float = Field(..., description="Map longitude")
    latitude: float = Field(..., description="Map latitude")
    email: str | None = Field(default=None, description="Contact email")
    phone_number: str | None = Field(default=None, description="Contact phone number")

    def to_request(self) -> StoreRequest:
        return StoreRequest(**self.model_dump())


@router.get("", response_model=SuccessResponse)
async def list_stores(ctx: OpContext):
    result = await ops.list_stores(ctx)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.post("", status_code=201, response_model=SuccessResponse)
async def create_store(ctx: OpContext, body: StoreBody):
    """Create a store and return it with its generated id."""
    result = await ops.create_store(ctx, body.to_request())
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.get("/{store_id}", response_model=SuccessResponse)
async def get_store(ctx: OpContext, store_id: int = Path(..., description="Store ID")):
    result = await ops.get_store(ctx, store_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.put("/{store_id}", response_model=SuccessResponse)
async def update_store(
    ctx: OpContext,
    body: StoreBody,
    store_id: int = Path(..., description="Store ID"),
):
    result = await ops.update_store(ctx, store_id, body.to_request())
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.delete("/{store_id}", response_model=SuccessResponse)
async def delete_store(ctx: OpContext, store_id: int = Path(..., description="Store ID")):
    """Delete a store.  Its menu items and photos are removed with it."""
    result = await ops.delete_store(ctx, store_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)
