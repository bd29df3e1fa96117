"""
Typed response objects for operations.

Each dataclass represents the *output* of a single operation beyond the
generic :class:`OperationResult` envelope.  Responses carry only domain
data: no HTTP status codes, no CLI formatting.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# ------------------------------------------------------------------ #
# Domain records
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class StoreDetail:
    """A store listing."""

    id: int
    name: str
    category: str
    logo_url: str
    location: str
    longitude: float
    latitude: float
    email: str | None = None
    phone_number: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True, slots=True)
class MenuItemDetail:
    """A product on a store's menu.  ``price`` is always a float."""

    id: int
    name: str
    price: float
    store_id: int
    image_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True, slots=True)
class MenuPhotoDetail:
    id: int
    photo_url: str
    store_id: int
    created_at: str | None = None
    updated_at: str | None = None


@dataclass(frozen=True, slots=True)
class FareRateDetail:
    """Delivery fare settings for a region."""

    id: int
    base_fare: float
    rate_per_km: float
    other_charges: float
    created_at: str | None = None
    updated_at: str | None = None


# ------------------------------------------------------------------ #
# Write outcomes
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class DeleteResult:
    id: int
    deleted: bool = True


@dataclass(frozen=True, slots=True)
class BulkImportResult:
    """Result payload for :func:`storefront.ops.menu_items.bulk_import_menu_items`."""

    store_id: int
    imported_count: int


# ------------------------------------------------------------------ #
# Database responses
# ------------------------------------------------------------------ #


@dataclass(frozen=True, slots=True)
class ConnectionStatus:
    """Result payload for :func:`storefront.ops.database.check_connection`."""

    dialect: str
    connected: bool
    latency_ms: float = 0.0


@dataclass(frozen=True, slots=True)
class DatabaseInitResult:
    """Result payload for :func:`storefront.ops.database.initialize_database`."""

    dialect: str
    files_applied: list[str] = field(default_factory=list)
    tables: list[str] = field(default_factory=list)
