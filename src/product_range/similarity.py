"""K-nearest-neighbour similarity between catalog products."""
from __future__ import annotations

import logging
import math
import numbers
from typing import Dict, List, Mapping, Optional, Sequence

import numpy as np

from .exceptions import EmptyCatalog, InvalidArgument
from .models import FieldRange, Neighbor, Product

logger = logging.getLogger(__name__)

COMPARED_FIELDS = ("price", "quality", "rating", "stock", "display")
FEATURE_WEIGHTS: Dict[str, float] = {
    "price": 0.25,
    "quality": 0.25,
    "rating": 0.20,
    "stock": 0.15,
    "display": 0.15,
}
DEFAULT_K = 10


def validate_weights(weights: Mapping[str, float]) -> Dict[str, float]:
    """Return ``weights`` as a plain dict after checking it covers every field and sums to 1."""

    if set(weights) != set(COMPARED_FIELDS):
        raise InvalidArgument(
            f"Weights must cover exactly {', '.join(COMPARED_FIELDS)}; got {', '.join(sorted(weights))}"
        )
    for name, weight in weights.items():
        if not _is_number(weight) or weight < 0:
            raise InvalidArgument(f"Weight for {name} must be a non-negative number")
    total = math.fsum(weights.values())
    if not math.isclose(total, 1.0, abs_tol=1e-9):
        raise InvalidArgument(f"Weights must sum to 1.0, got {total}")
    return {name: float(weights[name]) for name in COMPARED_FIELDS}


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _feature_vector(product: Product) -> List[float]:
    values = []
    for name in COMPARED_FIELDS:
        value = getattr(product, name, None)
        if not _is_number(value):
            raise InvalidArgument(
                f"Product {getattr(product, 'id', None)!r} has non-numeric {name}: {value!r}"
            )
        values.append(float(value))
    return values


class SimilarityEngine:
    """Exact nearest-neighbour search over a static product catalog.

    The catalog is snapshotted into a tuple at construction. Every query
    recomputes the per-field min/max ranges over the whole snapshot, scales
    each compared field into [0, 1] and ranks candidates by weighted
    Euclidean distance to the anchor. A field with no variance across the
    catalog contributes nothing to any distance.
    """

    def __init__(
        self, products: Sequence[Product], weights: Optional[Mapping[str, float]] = None
    ) -> None:
        self.products = tuple(products)
        self.weights = validate_weights(FEATURE_WEIGHTS if weights is None else weights)

        seen: set[int] = set()
        for product in self.products:
            if product.id in seen:
                raise InvalidArgument(f"Duplicate product id in catalog: {product.id!r}")
            seen.add(product.id)

        self._features = np.array(
            [_feature_vector(product) for product in self.products], dtype=float
        ).reshape(len(self.products), len(COMPARED_FIELDS))
        self._weight_vector = np.array([self.weights[name] for name in COMPARED_FIELDS])

    def __len__(self) -> int:
        return len(self.products)

    def _bounds(self) -> tuple[np.ndarray, np.ndarray]:
        if not self.products:
            raise EmptyCatalog("Catalog contains no products")
        return self._features.min(axis=0), self._features.max(axis=0)

    def field_ranges(self) -> Dict[str, FieldRange]:
        """Return the catalog-wide min/max for each compared field."""

        mins, maxs = self._bounds()
        return {
            name: FieldRange(float(low), float(high))
            for name, low, high in zip(COMPARED_FIELDS, mins, maxs)
        }

    @staticmethod
    def _normalize(values: np.ndarray, mins: np.ndarray, maxs: np.ndarray) -> np.ndarray:
        span = maxs - mins
        flat = span == 0
        scaled = (values - mins) / np.where(flat, 1.0, span)
        scaled[..., flat] = 0.0
        # Anchors outside the catalog are pinned to the catalog's range.
        return np.clip(scaled, 0.0, 1.0)

    def _distances(self, anchor_values: np.ndarray, candidates: np.ndarray) -> np.ndarray:
        mins, maxs = self._bounds()
        anchor_scaled = self._normalize(anchor_values, mins, maxs)
        candidate_scaled = self._normalize(candidates, mins, maxs)
        diffs = anchor_scaled - candidate_scaled
        return np.sqrt((diffs * diffs * self._weight_vector).sum(axis=-1))

    def distance(self, first: Product, second: Product) -> float:
        """Weighted normalized distance between two products using the catalog ranges."""

        first_values = np.array(_feature_vector(first), dtype=float)
        second_values = np.array([_feature_vector(second)], dtype=float)
        return float(self._distances(first_values, second_values)[0])

    def find_neighbors(self, anchor: Product, k: int = DEFAULT_K) -> List[Neighbor]:
        """Return up to ``k`` catalog products closest to ``anchor``, nearest first.

        The anchor's own id is never part of the result. ``k`` larger than the
        number of candidates is clamped.

        Raises
        ------
        InvalidArgument
            If ``k`` is negative or not an integer, or the anchor has a
            missing or non-numeric compared field.
        EmptyCatalog
            If the engine was built from an empty catalog.
        """

        if isinstance(k, bool) or not isinstance(k, numbers.Integral) or k < 0:
            raise InvalidArgument(f"k must be a non-negative integer, got {k!r}")
        anchor_values = np.array(_feature_vector(anchor), dtype=float)
        if not self.products:
            raise EmptyCatalog("Catalog contains no products")

        positions = [i for i, product in enumerate(self.products) if product.id != anchor.id]
        logger.debug(
            "Ranking %d candidates against product %s (k=%d)", len(positions), anchor.id, k
        )
        if not positions or k == 0:
            return []

        distances = self._distances(anchor_values, self._features[positions])
        order = np.argsort(distances, kind="stable")[: int(k)]
        return [
            Neighbor(product=self.products[positions[i]], distance=float(distances[i]))
            for i in order
        ]

    def find_neighbor_products(self, anchor: Product, k: int = DEFAULT_K) -> List[Product]:
        return [neighbor.product for neighbor in self.find_neighbors(anchor, k)]


def knn_recommendations(
    products: Sequence[Product], anchor: Product, k: int = DEFAULT_K
) -> List[Product]:
    return SimilarityEngine(products).find_neighbor_products(anchor, k)


def knn_recommendations_with_distances(
    products: Sequence[Product], anchor: Product, k: int = DEFAULT_K
) -> List[Neighbor]:
    return SimilarityEngine(products).find_neighbors(anchor, k)
