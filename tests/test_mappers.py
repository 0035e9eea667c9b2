"""
Tests for DTO -> domain mapping: defaults for absent fields, list cardinality.
"""

from __future__ import annotations

from catalog_browser.domains.models import Category, Product
from catalog_browser.infrastructure.data.dtos import CategoryDto, ProductDto
from catalog_browser.infrastructure.data.mappers import (
    categories_to_domain,
    category_to_domain,
    product_to_domain,
    products_to_domain,
)


def test_category_maps_all_fields() -> None:
    dto = CategoryDto(slug="electronics", name="Electronics", url="https://example.com/electronics")
    assert category_to_domain(dto) == Category("electronics", "Electronics", "https://example.com/electronics")


def test_category_defaults_when_fields_absent() -> None:
    """Null slug becomes "unknown", null name/url become empty strings."""
    c = category_to_domain(CategoryDto())
    assert c.slug == "unknown"
    assert c.name == ""
    assert c.url == ""


def test_product_defaults_when_everything_absent() -> None:
    p = product_to_domain(ProductDto())
    assert p == Product(
        id=-1,
        title="",
        description="",
        price=0.0,
        discount_percentage=0.0,
        rating=0.0,
        stock=0,
        brand="",
        category="",
        thumbnail="",
        images=(),
    )
    assert all(getattr(p, f) is not None for f in p.__dataclass_fields__)


def test_product_keeps_present_fields() -> None:
    dto = ProductDto(
        id=7,
        title="Atlas",
        price=12.5,
        category="books",
        rating=4.5,
        stock=3,
        images=("a.png", "b.png"),
        sku="IGNORED",
    )
    p = product_to_domain(dto)
    assert p.id == 7
    assert p.title == "Atlas"
    assert p.price == 12.5
    assert p.rating == 4.5
    assert p.stock == 3
    assert p.images == ("a.png", "b.png")
    assert p.thumbnail == ""


def test_zero_values_are_not_replaced() -> None:
    p = product_to_domain(ProductDto(id=0, price=0.0, stock=0))
    assert p.id == 0


def test_list_mapping_preserves_order_and_length() -> None:
    dtos = [ProductDto(id=i) for i in (3, 1, 2)]
    out = products_to_domain(dtos)
    assert [p.id for p in out] == [3, 1, 2]
    assert len(out) == len(dtos)


def test_empty_and_absent_lists_map_to_empty() -> None:
    assert products_to_domain([]) == []
    assert products_to_domain(None) == []
    assert categories_to_domain([]) == []
    assert categories_to_domain(None) == []
