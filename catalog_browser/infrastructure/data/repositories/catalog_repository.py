"""
Catalogue repository: one remote call per operation, mapped to domain entities.

Each operation is a single-shot coroutine: it yields one value or raises the
underlying TransportError / DeserializationError unchanged. Repeated calls issue
fresh requests.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

from catalog_browser.domains.models import Category, Product
from catalog_browser.infrastructure.data.mappers import (
    categories_to_domain,
    product_to_domain,
    products_to_domain,
)
from catalog_browser.infrastructure.data.sources.catalog_client import CatalogClient
from catalog_browser.utils.logger import get_logger

logger = get_logger()


class CatalogRepository(Protocol):
    async def get_categories(self) -> list[Category]: ...

    async def get_products_by_category(self, category: str) -> list[Product]: ...

    async def get_product_by_id(self, product_id: int) -> Product: ...


class RemoteCatalogRepository:
    """
    CatalogRepository backed by CatalogClient.

    The blocking HTTP call runs on a worker thread. If the awaiting task is
    cancelled, the result is discarded when the thread finishes; the socket
    itself is bounded by the client's timeout.
    """

    def __init__(self, client: CatalogClient | None = None) -> None:
        self._client = client or CatalogClient()

    async def get_categories(self) -> list[Category]:
        dtos = await asyncio.to_thread(self._client.fetch_categories)
        categories = categories_to_domain(dtos)
        logger.debug("Loaded %d categories", len(categories))
        return categories

    async def get_products_by_category(self, category: str) -> list[Product]:
        page = await asyncio.to_thread(self._client.fetch_products_by_category, category)
        products = products_to_domain(page.products)
        logger.debug("Loaded %d products for category %s", len(products), category)
        return products

    async def get_product_by_id(self, product_id: int) -> Product:
        dto = await asyncio.to_thread(self._client.fetch_product, product_id)
        return product_to_domain(dto)
