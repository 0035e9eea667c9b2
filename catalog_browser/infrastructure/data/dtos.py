"""
Wire shapes for the catalogue REST service.

Every field is optional: the server may omit any of them or send null. Only the
fields the mappers read are checked. A missing or null field is fine and stays
None; a value of the wrong JSON type (an object where a list is required, text
where a number is required) raises DeserializationError. A number where text is
expected is kept as its string form. Fields that are never mapped (sku, tags,
reviews, meta, ...) are carried as raw JSON and never checked. Defaulting
happens later, in the mappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from catalog_browser.domains.errors import DeserializationError


def _expect_object(payload: Any, what: str) -> dict[str, Any]:
    if not isinstance(payload, dict):
        raise DeserializationError(f"Expected JSON object for {what}, got {type(payload).__name__}")
    return payload


def _expect_list(payload: Any, what: str) -> list[Any]:
    if not isinstance(payload, list):
        raise DeserializationError(f"Expected JSON array for {what}, got {type(payload).__name__}")
    return payload


def _str(data: dict[str, Any], key: str) -> str | None:
    v = data.get(key)
    if v is None:
        return None
    if isinstance(v, (int, float)) and not isinstance(v, bool):
        return str(v)
    if not isinstance(v, str):
        raise DeserializationError(f"Field '{key}' must be a string, got {type(v).__name__}")
    return v


def _int(data: dict[str, Any], key: str) -> int | None:
    v = data.get(key)
    if v is None:
        return None
    # bool is an int subclass; JSON true/false is never a count.
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise DeserializationError(f"Field '{key}' must be an integer, got {type(v).__name__}")
    if isinstance(v, float):
        if not v.is_integer():
            raise DeserializationError(f"Field '{key}' must be an integer, got {v!r}")
        return int(v)
    return v


def _float(data: dict[str, Any], key: str) -> float | None:
    v = data.get(key)
    if v is None:
        return None
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise DeserializationError(f"Field '{key}' must be a number, got {type(v).__name__}")
    return float(v)


def _str_list(data: dict[str, Any], key: str) -> tuple[str, ...] | None:
    v = data.get(key)
    if v is None:
        return None
    items = _expect_list(v, key)
    for item in items:
        if not isinstance(item, str):
            raise DeserializationError(f"Field '{key}' must contain strings, got {type(item).__name__}")
    return tuple(items)


def _object_list(data: dict[str, Any], key: str, cls: Any) -> tuple[Any, ...] | None:
    v = data.get(key)
    if v is None:
        return None
    out = []
    for item in _expect_list(v, key):
        if item is None:
            raise DeserializationError(f"Field '{key}' contains a null element")
        out.append(cls.from_json(item))
    return tuple(out)


@dataclass(frozen=True)
class CategoryDto:
    slug: str | None = None
    name: str | None = None
    url: str | None = None

    @classmethod
    def from_json(cls, payload: Any) -> "CategoryDto":
        # Older servers list categories as bare slugs.
        if isinstance(payload, str):
            return cls(slug=payload, name=payload, url=None)
        data = _expect_object(payload, "category")
        return cls(slug=_str(data, "slug"), name=_str(data, "name"), url=_str(data, "url"))


# Sent by the server but never mapped; kept as the raw JSON value, unchecked.
PRODUCT_PASSTHROUGH_FIELDS = {
    "tags": "tags",
    "sku": "sku",
    "weight": "weight",
    "dimensions": "dimensions",
    "warrantyInformation": "warranty_information",
    "shippingInformation": "shipping_information",
    "availabilityStatus": "availability_status",
    "reviews": "reviews",
    "returnPolicy": "return_policy",
    "minimumOrderQuantity": "minimum_order_quantity",
    "meta": "meta",
}


@dataclass(frozen=True)
class ProductDto:
    id: int | None = None
    title: str | None = None
    description: str | None = None
    category: str | None = None
    price: float | None = None
    discount_percentage: float | None = None
    rating: float | None = None
    stock: int | None = None
    brand: str | None = None
    images: tuple[str, ...] | None = None
    thumbnail: str | None = None
    tags: Any = None
    sku: Any = None
    weight: Any = None
    dimensions: Any = None
    warranty_information: Any = None
    shipping_information: Any = None
    availability_status: Any = None
    reviews: Any = None
    return_policy: Any = None
    minimum_order_quantity: Any = None
    meta: Any = None

    @classmethod
    def from_json(cls, payload: Any) -> "ProductDto":
        data = _expect_object(payload, "product")
        extra = {attr: data.get(key) for key, attr in PRODUCT_PASSTHROUGH_FIELDS.items()}
        return cls(
            id=_int(data, "id"),
            title=_str(data, "title"),
            description=_str(data, "description"),
            category=_str(data, "category"),
            price=_float(data, "price"),
            discount_percentage=_float(data, "discountPercentage"),
            rating=_float(data, "rating"),
            stock=_int(data, "stock"),
            brand=_str(data, "brand"),
            images=_str_list(data, "images"),
            thumbnail=_str(data, "thumbnail"),
            **extra,
        )


@dataclass(frozen=True)
class ProductsPageDto:
    products: tuple[ProductDto, ...] | None = None
    total: Any = None
    skip: Any = None
    limit: Any = None

    @classmethod
    def from_json(cls, payload: Any) -> "ProductsPageDto":
        data = _expect_object(payload, "products page")
        return cls(
            products=_object_list(data, "products", ProductDto),
            total=data.get("total"),
            skip=data.get("skip"),
            limit=data.get("limit"),
        )


def parse_categories(payload: Any) -> list[CategoryDto]:
    """Parse GET /products/categories: a list of category objects or of plain slugs."""
    out: list[CategoryDto] = []
    for item in _expect_list(payload, "categories"):
        if item is None:
            raise DeserializationError("Category list contains a null element")
        out.append(CategoryDto.from_json(item))
    return out
