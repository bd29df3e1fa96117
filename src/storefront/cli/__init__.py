"""Command-line interface (``storefront``)."""
