"""
REST API for the storefront admin dashboard.

Usage::

    uvicorn storefront.api.app:create_app --factory
"""
