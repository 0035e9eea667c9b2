from catalog_browser.infrastructure.data.repositories.catalog_repository import (
    CatalogRepository,
    RemoteCatalogRepository,
)

__all__ = ["CatalogRepository", "RemoteCatalogRepository"]
