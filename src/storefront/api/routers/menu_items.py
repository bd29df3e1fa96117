"""
Menu items router — products on a store's menu.

Endpoints:
    GET    /menu-items?store_id=   List a store's items (404 when empty)
    POST   /menu-items             Create one item
    POST   /menu-items/bulk        Import many items in one transaction
    GET    /menu-items/{id}        Get one item
    PUT    /menu-items/{id}        Update an item
    DELETE /menu-items/{id}        Delete an item

Tags:
    api, menu-items, bulk-import
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Path, Query
from pydantic import BaseModel, Field

from storefront.api.deps import OpContext
from storefront.api.middleware.errors import problem_response
from storefront.api.schemas.common import SuccessResponse
from storefront.api.utils import _handle_error, _success
from storefront.ops import menu_items as ops
from storefront.ops.requests import BulkImportRequest, MenuItemRequest

router = APIRouter(prefix="/menu-items")


class MenuItemBody(BaseModel):
    """Request body for creating or updating a menu item."""

    name: str = Field(..., description="Product name")
    price: float = Field(..., description="Unit price, greater than 0")
    store_id: int = Field(..., description="Owning store")
    image_url: str | None = Field(default=None, description="Product image URL")

    def to_request(self) -> MenuItemRequest:
        return MenuItemRequest(**self.model_dump())


class BulkImportBody(BaseModel):
    """Request body for the spreadsheet import.

    Products are validated by the import itself so a bad row is reported
    as ``N invalid products found`` rather than a schema error.
    """

    store_id: int | None = Field(default=None, description="Store every product belongs to")
    products: list[Any] = Field(default_factory=list, description="Products: {name, price}")


@router.get("", response_model=SuccessResponse)
async def list_menu_items(
    ctx: OpContext,
    store_id: int | None = Query(None, description="Store whose menu to list"),
):
    if store_id is None:
        return problem_response(status=400, title="Store ID is required")
    result = await ops.list_menu_items(ctx, store_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.post("", status_code=201, response_model=SuccessResponse)
async def create_menu_item(ctx: OpContext, body: MenuItemBody):
    result = await ops.create_menu_item(ctx, body.to_request())
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.post("/bulk", status_code=201, response_model=SuccessResponse)
async def bulk_import_menu_items(ctx: OpContext, body: BulkImportBody):
    """Import products all-or-nothing.

    Either every product is inserted or none is.
    """
    result = await ops.bulk_import_menu_items(
        ctx,
        BulkImportRequest(store_id=body.store_id, products=body.products),
    )
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.get("/{item_id}", response_model=SuccessResponse)
async def get_menu_item(ctx: OpContext, item_id: int = Path(..., description="Menu item ID")):
    result = await ops.get_menu_item(ctx, item_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.put("/{item_id}", response_model=SuccessResponse)
async def update_menu_item(
    ctx: OpContext,
    body: MenuItemBody,
    item_id: int = Path(..., description="Menu item ID"),
):
    result = await ops.update_menu_item(ctx, item_id, body.to_request())
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.delete("/{item_id}", response_model=SuccessResponse)
async def delete_menu_item(ctx: OpContext, item_id: int = Path(..., description="Menu item ID")):
    result = await ops.delete_menu_item(ctx, item_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)
