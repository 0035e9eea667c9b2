"""Named use cases. Each is an identity pass-through to the repository."""

from __future__ import annotations

from catalog_browser.domains.models import Category, Product
from catalog_browser.infrastructure.data.repositories import CatalogRepository


class GetCategoriesUseCase:
    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    async def __call__(self) -> list[Category]:
        return await self._repository.get_categories()


class GetProductsByCategoryUseCase:
    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    async def __call__(self, category: str) -> list[Product]:
        return await self._repository.get_products_by_category(category)


class GetProductByIdUseCase:
    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    async def __call__(self, product_id: int) -> Product:
        return await self._repository.get_product_by_id(product_id)
