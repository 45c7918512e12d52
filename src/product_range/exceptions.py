"""Exceptions raised by the product range engine and its callers."""
from __future__ import annotations


class ProductRangeError(Exception):
    """Base class for all product range errors."""


class InvalidArgument(ProductRangeError, ValueError):
    """Raised for malformed input such as ``k < 0`` or a non-numeric field."""


class EmptyCatalog(ProductRangeError, LookupError):
    """Raised when a query runs against a catalog with no products at all."""


class CatalogUnavailable(ProductRangeError):
    """Raised when the catalog source cannot be read or decoded."""
