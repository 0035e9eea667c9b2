"""
Domain entities and per-screen UI state.

Entities are always fully populated: the mappers substitute documented defaults
for anything the server leaves out, so no field here is ever None.

UI state is a closed union of three variants. Consumers match on the variant
type (Loading / Success / Error); there are no independent flags that could
disagree with each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

T = TypeVar("T")

UNKNOWN_SLUG = "unknown"
UNKNOWN_ERROR = "Unknown error"


@dataclass(frozen=True)
class Category:
    slug: str
    name: str
    url: str


@dataclass(frozen=True)
class Product:
    id: int
    title: str
    description: str
    price: float
    discount_percentage: float
    rating: float
    stock: int
    brand: str
    category: str
    thumbnail: str
    images: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Loading:
    """Fetch in progress; carries no payload."""

    def __repr__(self) -> str:
        return "Loading"


@dataclass(frozen=True)
class Success(Generic[T]):
    data: T


@dataclass(frozen=True)
class Error:
    message: str


LOADING = Loading()

UiState = Union[Loading, Success[T], Error]


def error_message(exc: BaseException) -> str:
    """Human-readable description of a failure, or the generic fallback."""
    text = str(exc)
    return text if text.strip() else UNKNOWN_ERROR
