"""Data sources: the catalogue REST service."""

from catalog_browser.infrastructure.data.sources.catalog_client import CatalogClient

__all__ = ["CatalogClient"]
