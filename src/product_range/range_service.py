"""High-level service behind the price range and similar-products views."""
from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Sequence

import pandas as pd

from .exceptions import InvalidArgument
from .models import Neighbor, Product
from .repository import CatalogRepository
from .similarity import DEFAULT_K, SimilarityEngine
from .utils import ensure_directory

SUMMARY_COLUMNS = [
    "rank",
    "id",
    "name",
    "brand",
    "category",
    "price",
    "quality",
    "quality_label",
    "rating",
    "stock",
    "display",
    "distance",
    "similarity",
]


def similarity_percentage(distance: float) -> int:
    """Presentation score shown next to a neighbour, clipped at zero."""

    # half-up
    return int(math.floor(max(0.0, 100 - distance * 100) + 0.5))


def quality_label(quality: float) -> str:
    if quality >= 90:
        return "Premium"
    if quality >= 80:
        return "Excellent"
    if quality >= 70:
        return "Good"
    return "Standard"


def product_label(product: Product) -> str:
    return (
        f"[{product.id}] {product.name} - {product.describe()} - "
        f"{product.price:,.0f} ({quality_label(product.quality)})"
    )


@dataclass
class RangeService:
    repository: CatalogRepository
    k: int = DEFAULT_K

    def products_in_range(self, min_price: float, max_price: float) -> List[Product]:
        return self.repository.in_price_range(min_price, max_price)

    def recommend(self, product_id: int, k: Optional[int] = None) -> List[Neighbor]:
        anchor = self.repository.get(product_id)
        if anchor is None:
            raise InvalidArgument(f"Unknown product id: {product_id}")
        engine = SimilarityEngine(self.repository.products())
        return engine.find_neighbors(anchor, self.k if k is None else k)

    def summary(self, neighbors: Sequence[Neighbor]) -> pd.DataFrame:
        data = [
            {
                "rank": rank,
                "id": neighbor.product.id,
                "name": neighbor.product.name,
                "brand": neighbor.product.brand,
                "category": neighbor.product.category,
                "price": neighbor.product.price,
                "quality": neighbor.product.quality,
                "quality_label": quality_label(neighbor.product.quality),
                "rating": neighbor.product.rating,
                "stock": neighbor.product.stock,
                "display": neighbor.product.display,
                "distance": neighbor.distance,
                "similarity": similarity_percentage(neighbor.distance),
            }
            for rank, neighbor in enumerate(neighbors, start=1)
        ]
        return pd.DataFrame(data, columns=SUMMARY_COLUMNS)

    def export_to_csv(self, neighbors: Sequence[Neighbor], destination: Path | str) -> None:
        destination = Path(destination)
        ensure_directory(destination)
        self.summary(neighbors).to_csv(destination, index=False, float_format="%.4f")
