"""
Fare rates router — delivery pricing settings.

Endpoints:
    GET /fare-rates          List fare rates
    GET /fare-rates/{id}     Get one fare rate
    PUT /fare-rates/{id}     Update base fare, per-km rate and other charges

Tags:
    api, fare-rates, delivery-settings
"""

from __future__ import annotations

from fastapi import APIRouter, Path
from pydantic import BaseModel, Field

from storefront.api.deps import OpContext
from storefront.api.schemas.common import SuccessResponse
from storefront.api.utils import _handle_error, _success
from storefront.ops import fare_rates as ops
from storefront.ops.requests import FareRateRequest

router = APIRouter(prefix="/fare-rates")


class FareRateBody(BaseModel):
    """Request body for updating a fare rate.  No value may be negative."""

    base_fare: float = Field(..., description="Flat fare per delivery")
    rate_per_km: float = Field(..., description="Charge per kilometre")
    other_charges: float = Field(..., description="Additional fixed charges")


@router.get("", response_model=SuccessResponse)
async def list_fare_rates(ctx: OpContext):
    result = await ops.list_fare_rates(ctx)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.get("/{rate_id}", response_model=SuccessResponse)
async def get_fare_rate(ctx: OpContext, rate_id: int = Path(..., description="Fare rate ID")):
    result = await ops.get_fare_rate(ctx, rate_id)
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)


@router.put("/{rate_id}", response_model=SuccessResponse)
async def update_fare_rate(
    ctx: OpContext,
    body: FareRateBody,
    rate_id: int = Path(..., description="Fare rate ID"),
):
    result = await ops.update_fare_rate(
        ctx,
        rate_id,
        FareRateRequest(
            base_fare=body.base_fare,
            rate_per_km=body.rate_per_km,
            other_charges=body.other_charges,
        ),
    )
    if not result.success:
        return _handle_error(result, ctx)
    return _success(result)
