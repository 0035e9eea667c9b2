"""
Error taxonomy for the catalogue pipeline.

Transport and deserialization failures propagate unchanged from the HTTP source
through the repository and use cases; the presenter is the only place that
turns them into UI state.
"""

from __future__ import annotations


class CatalogError(RuntimeError):
    """Base class for catalogue pipeline failures."""


class TransportError(CatalogError):
    """Connection failure, timeout or non-2xx response from the catalogue service."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.original = original


class DeserializationError(CatalogError):
    """Payload is not JSON or does not have the expected structural shape."""


class MissingParameterError(CatalogError):
    """A screen that needs a query parameter (category slug, product id) has none."""
