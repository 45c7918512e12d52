"""Parsers that convert the JSON catalog contract into data models."""
from __future__ import annotations

import math
import numbers
from typing import Any, Dict, List, Tuple

from .exceptions import InvalidArgument
from .models import Product

TEXT_FIELDS = ("name", "category", "brand", "processor")
FLOAT_FIELDS = ("price", "quality", "rating", "display")


def product_from_record(record: Dict[str, Any]) -> Product:
    if not isinstance(record, dict):
        raise InvalidArgument(f"Catalog entry must be an object, got {type(record).__name__}")

    product_id = record.get("id")
    if isinstance(product_id, bool) or not isinstance(product_id, numbers.Integral):
        raise InvalidArgument(f"Catalog entry has invalid id: {product_id!r}")

    values: Dict[str, Any] = {"id": int(product_id)}
    for name in TEXT_FIELDS:
        values[name] = _ensure_text(record.get(name))
    for name in FLOAT_FIELDS:
        values[name] = _require_float(record, name)
    values["stock"] = _require_stock(record)
    return Product(**values)


def parse_catalog(data: Any) -> Tuple[Product, ...]:
    """Parse a JSON array of products, or an object with a ``products`` array."""

    if isinstance(data, dict):
        data = data.get("products")
    if not isinstance(data, list):
        raise InvalidArgument("Catalog must be a JSON array or an object with a 'products' array")

    products: List[Product] = []
    seen: set[int] = set()
    for record in data:
        product = product_from_record(record)
        if product.id in seen:
            raise InvalidArgument(f"Duplicate product id in catalog: {product.id}")
        seen.add(product.id)
        products.append(product)
    return tuple(products)


def _ensure_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def _is_finite(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _require_float(record: Dict[str, Any], name: str) -> float:
    value = record.get(name)
    if not _is_finite(value):
        raise InvalidArgument(f"Product {record.get('id')!r} has non-numeric {name}: {value!r}")
    return float(value)


def _require_stock(record: Dict[str, Any]) -> int:
    value = _require_float(record, "stock")
    if value < 0 or not value.is_integer():
        raise InvalidArgument(
            f"Product {record.get('id')!r} has invalid stock: {record.get('stock')!r}"
        )
    return int(value)
