"""
DTO -> domain mapping. Total and pure: every nullable wire field is replaced by
its documented default, so the domain never sees None.

Defaults: Category.slug "unknown", other strings "", Product.id -1,
numbers 0 / 0.0, images ().
"""

from __future__ import annotations

from typing import Iterable

from catalog_browser.domains.models import UNKNOWN_SLUG, Category, Product
from catalog_browser.infrastructure.data.dtos import CategoryDto, ProductDto


def category_to_domain(dto: CategoryDto) -> Category:
    return Category(
        slug=dto.slug if dto.slug is not None else UNKNOWN_SLUG,
        name=dto.name or "",
        url=dto.url or "",
    )


def product_to_domain(dto: ProductDto) -> Product:
    return Product(
        id=dto.id if dto.id is not None else -1,
        title=dto.title or "",
        description=dto.description or "",
        price=dto.price if dto.price is not None else 0.0,
        discount_percentage=dto.discount_percentage if dto.discount_percentage is not None else 0.0,
        rating=dto.rating if dto.rating is not None else 0.0,
        stock=dto.stock if dto.stock is not None else 0,
        brand=dto.brand or "",
        category=dto.category or "",
        thumbnail=dto.thumbnail or "",
        images=tuple(dto.images) if dto.images is not None else (),
    )


def categories_to_domain(dtos: Iterable[CategoryDto] | None) -> list[Category]:
    """Map every element, preserving order; an absent list maps to []."""
    return [category_to_domain(d) for d in (dtos or ())]


def products_to_domain(dtos: Iterable[ProductDto] | None) -> list[Product]:
    """Map every element, preserving order; an absent list maps to []."""
    return [product_to_domain(d) for d in (dtos or ())]
