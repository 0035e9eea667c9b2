"""
Catalogue REST client. One blocking GET per call; no retry, caching or fallback.

Endpoints:
    GET /products/categories
    GET /products/category/{category}
    GET /products/{id}
"""

from __future__ import annotations

from typing import Any, Callable, TypeVar
from urllib.parse import quote

import requests

from catalog_browser.domains.errors import DeserializationError, TransportError
from catalog_browser.infrastructure.data.dtos import (
    CategoryDto,
    ProductDto,
    ProductsPageDto,
    parse_categories,
)
from catalog_browser.utils.config import catalog_base_url, catalog_timeout_seconds
from catalog_browser.utils.logger import get_logger

logger = get_logger()

R = TypeVar("R")


class CatalogClient:
    """
    Thin wrapper over the catalogue service.

    Failures are classified here and nowhere else: anything from `requests`
    (connection, timeout, non-2xx) becomes TransportError, an unreadable or
    mis-shaped body becomes DeserializationError.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        self.base_url = (base_url or catalog_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else catalog_timeout_seconds()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _get(self, path: str, parse: Callable[[Any], R]) -> R:
        url = self._url(path)
        logger.debug("GET %s", url)
        try:
            r = requests.get(url, timeout=self.timeout, headers={"Accept": "application/json"})
            r.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.exception("Catalogue request failed with HTTP %s: %s", status, url)
            raise TransportError(f"HTTP {status} for {url}", url=url, status_code=status, original=e) from e
        except requests.RequestException as e:
            logger.exception("Catalogue request failed: %s", url)
            raise TransportError(str(e) or f"Request to {url} failed", url=url, original=e) from e

        try:
            data = r.json()
        except ValueError as e:
            logger.exception("Catalogue returned invalid JSON: %s", url)
            raise DeserializationError(f"Invalid JSON from {url}: {e}") from e
        return parse(data)

    def fetch_categories(self) -> list[CategoryDto]:
        return self._get("products/categories", parse_categories)

    def fetch_products_by_category(self, category: str) -> ProductsPageDto:
        return self._get(f"products/category/{quote(category, safe='')}", ProductsPageDto.from_json)

    def fetch_product(self, product_id: int) -> ProductDto:
        return self._get(f"products/{int(product_id)}", ProductDto.from_json)
