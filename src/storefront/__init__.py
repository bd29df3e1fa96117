"""
storefront-admin - Back office for a local delivery marketplace.

Stores, menu items, menu photos and delivery fare rates over a
dual-dialect (PostgreSQL / MySQL) async database access layer.
"""

__version__ = "0.1.0"
