"""
Typed request objects for operations.

Each dataclass represents the *input* contract for a single operation
function.  Requests carry only transport-agnostic data; the business rules
(required fields, positive prices, …) are checked by the operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# ------------------------------------------------------------------ #
# Stores
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class StoreRequest:
    """Request for :func:`storefront.ops.stores.create_store` and ``update_store``.

    ``longitude`` / ``latitude`` are required but may be ``0``.
    """

    name: str = ""
    category: str = ""
    logo_url: str = ""
    location: str = ""
    longitude: float | None = None
    latitude: float | None = None
    email: str | None = None
    phone_number: str | None = None


# ------------------------------------------------------------------ #
# Menu items
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class MenuItemRequest:
    """Request for :func:`storefront.ops.menu_items.create_menu_item` and ``update_menu_item``."""

    name: str = ""
    price: float | None = None
    store_id: int | None = None
    image_url: str | None = None


@dataclass(frozen=True, slots=True)
class BulkImportRequest:
    """Request for :func:`storefront.ops.menu_items.bulk_import_menu_items`.

    Attributes:
        store_id: Store every product is attached to.
        products: Raw product dicts as parsed from the spreadsheet import;
            each needs a ``name`` and a numeric ``price`` greater than 0.
    """

    store_id: int | None = None
    products: list[Any] = field(default_factory=list)


# ------------------------------------------------------------------ #
# Menu photos
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class MenuPhotoRequest:
    """Request for :func:`storefront.ops.menu_photos.create_menu_photo`."""

    photo_url: str = ""
    store_id: int | None = None


# ------------------------------------------------------------------ #
# Fare rates
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class FareRateRequest:
    """Request for :func:`storefront.ops.fare_rates.update_fare_rate`."""

    base_fare: float | None = None
    rate_per_km: float | None = None
    other_charges: float | None = None
