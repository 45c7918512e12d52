"""Data models for catalog products and similarity results."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    id: int
    name: str = ""
    category: str = ""
    brand: str = ""
    processor: str = ""
    price: float = 0.0
    quality: float = 0.0
    rating: float = 0.0
    stock: int = 0
    display: float = 0.0

    def describe(self) -> str:
        parts = [self.brand or "", self.category or ""]
        return " - ".join(p for p in parts if p)


@dataclass(frozen=True)
class Neighbor:
    product: Product
    distance: float


@dataclass(frozen=True)
class FieldRange:
    """Catalog-wide minimum and maximum of one compared field."""

    min: float
    max: float

    def normalize(self, value: float) -> float:
        """Scale ``value`` into the range, or ``0.0`` when the field has no variance."""

        if self.max == self.min:
            return 0.0
        return (value - self.min) / (self.max - self.min)
