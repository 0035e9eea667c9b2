"""
Tests for wire parsing: nullable fields, both category shapes, structural errors.
"""

from __future__ import annotations

import pytest

from catalog_browser.domains.errors import DeserializationError
from catalog_browser.infrastructure.data.dtos import (
    CategoryDto,
    ProductDto,
    ProductsPageDto,
    parse_categories,
)


def _full_product() -> dict:
    return {
        "id": 1,
        "title": "Essence Mascara Lash Princess",
        "description": "Popular mascara",
        "category": "beauty",
        "price": 9.99,
        "discountPercentage": 7.17,
        "rating": 4.94,
        "stock": 5,
        "tags": ["beauty", "mascara"],
        "brand": "Essence",
        "sku": "RCH45Q1A",
        "weight": 2,
        "dimensions": {"width": 23.17, "height": 14.43, "depth": 28.01},
        "warrantyInformation": "1 month warranty",
        "shippingInformation": "Ships in 1 month",
        "availabilityStatus": "Low Stock",
        "reviews": [
            {"rating": 2, "comment": "Very unhappy", "date": "2024-05-23T08:56:21.618Z",
             "reviewerName": "John Doe", "reviewerEmail": "john.doe@x.com"},
        ],
        "returnPolicy": "30 days return policy",
        "minimumOrderQuantity": 24,
        "meta": {"createdAt": "2024-05-23T08:56:21.618Z", "updatedAt": "2024-05-23T08:56:21.618Z",
                 "barcode": "9164035109868", "qrCode": "https://example.com/qr.png"},
        "images": ["https://example.com/1.png"],
        "thumbnail": "https://example.com/thumb.png",
    }


def test_product_full_payload() -> None:
    dto = ProductDto.from_json(_full_product())
    assert dto.id == 1
    assert dto.discount_percentage == 7.17
    assert dto.images == ("https://example.com/1.png",)
    assert dto.weight == 2
    assert dto.dimensions == {"width": 23.17, "height": 14.43, "depth": 28.01}
    assert dto.reviews[0]["reviewerName"] == "John Doe"
    assert dto.meta["qrCode"] == "https://example.com/qr.png"


def test_product_missing_and_null_fields_stay_none() -> None:
    dto = ProductDto.from_json({"id": 7, "title": "Atlas", "thumbnail": None})
    assert dto.id == 7
    assert dto.thumbnail is None
    assert dto.images is None
    assert dto.price is None


def test_integer_accepted_for_float_field() -> None:
    assert ProductDto.from_json({"price": 12}).price == 12.0


def test_number_accepted_for_text_field() -> None:
    dto = ProductDto.from_json({"brand": 3, "title": 12.5})
    assert dto.brand == "3"
    assert dto.title == "12.5"


@pytest.mark.parametrize(
    "extra",
    [
        {"meta": {"barcode": 9164035109868}},
        {"reviews": [{"rating": 4.5}]},
        {"reviews": [None, "odd"]},
        {"sku": 12345},
        {"tags": ["beauty", 3]},
        {"dimensions": {"width": "10cm"}},
        {"dimensions": [1, 2, 3]},
        {"weight": "heavy", "minimumOrderQuantity": "many"},
    ],
)
def test_unmapped_fields_are_never_checked(extra: dict) -> None:
    """Odd values in fields the mapper drops do not reject the product."""
    dto = ProductDto.from_json({"id": 7, "title": "Atlas", "price": 12.5, **extra})
    assert dto.id == 7
    assert dto.title == "Atlas"
    assert dto.price == 12.5


def test_odd_unmapped_field_does_not_reject_page() -> None:
    page = ProductsPageDto.from_json(
        {"products": [{"id": 1, "sku": 99}, {"id": 2, "meta": {"qrCode": 0}}], "total": "2"}
    )
    assert [p.id for p in page.products] == [1, 2]


@pytest.mark.parametrize(
    "payload",
    [
        {"price": "cheap"},
        {"id": "seven"},
        {"stock": True},
        {"id": 1.5},
        {"title": {"en": "Atlas"}},
        {"images": "a.png"},
        {"images": [1, 2]},
    ],
)
def test_mapped_fields_with_wrong_shape_raise(payload: dict) -> None:
    with pytest.raises(DeserializationError):
        ProductDto.from_json(payload)


def test_product_requires_object() -> None:
    with pytest.raises(DeserializationError):
        ProductDto.from_json([1, 2])


def test_products_page() -> None:
    page = ProductsPageDto.from_json({"products": [{"id": 1}, {"id": 2}], "total": 2, "skip": 0, "limit": 30})
    assert [p.id for p in page.products] == [1, 2]
    assert page.total == 2


def test_products_page_without_products() -> None:
    assert ProductsPageDto.from_json({}).products is None


def test_products_page_rejects_null_element() -> None:
    with pytest.raises(DeserializationError):
        ProductsPageDto.from_json({"products": [{"id": 1}, None]})


def test_categories_object_variant() -> None:
    out = parse_categories([{"slug": "beauty", "name": "Beauty", "url": "https://x/beauty"}, {}])
    assert out[0] == CategoryDto("beauty", "Beauty", "https://x/beauty")
    assert out[1] == CategoryDto()


def test_categories_plain_string_variant() -> None:
    out = parse_categories(["smartphones", "laptops"])
    assert out == [
        CategoryDto(slug="smartphones", name="smartphones", url=None),
        CategoryDto(slug="laptops", name="laptops", url=None),
    ]


def test_categories_must_be_list() -> None:
    with pytest.raises(DeserializationError):
        parse_categories({"categories": []})
