"""Product Range package."""

from .config import Settings
from .exceptions import CatalogUnavailable, EmptyCatalog, InvalidArgument, ProductRangeError
from .models import Neighbor, Product
from .range_service import RangeService
from .repository import CatalogRepository
from .similarity import (
    SimilarityEngine,
    knn_recommendations,
    knn_recommendations_with_distances,
)

__all__ = [
    "Settings",
    "CatalogUnavailable",
    "EmptyCatalog",
    "InvalidArgument",
    "ProductRangeError",
    "Neighbor",
    "Product",
    "RangeService",
    "CatalogRepository",
    "SimilarityEngine",
    "knn_recommendations",
    "knn_recommendations_with_distances",
]
