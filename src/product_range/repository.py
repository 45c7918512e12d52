"""Read-only access to the static product catalog."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import requests

from .config import DEFAULT_CATALOG
from .exceptions import CatalogUnavailable, InvalidArgument
from .models import Product
from .parsers import parse_catalog
from .utils import is_url, load_json

logger = logging.getLogger(__name__)


class CatalogRepository:
    """Loads the catalog JSON from a file or URL and caches the parsed products."""

    def __init__(self, source: Path | str = DEFAULT_CATALOG, timeout: int = 20) -> None:
        self.source = str(source)
        self.timeout = timeout
        self._products: Optional[Tuple[Product, ...]] = None

    def _fetch(self) -> object:
        try:
            if is_url(self.source):
                response = requests.get(self.source, timeout=self.timeout)
                response.raise_for_status()
                return response.json()
            return load_json(Path(self.source))
        except (OSError, ValueError, requests.RequestException) as exc:
            raise CatalogUnavailable(f"Unable to load catalog from {self.source}: {exc}") from exc

    def products(self) -> Tuple[Product, ...]:
        if self._products is None:
            self._products = parse_catalog(self._fetch())
            logger.info("Loaded %d products from %s", len(self._products), self.source)
        return self._products

    def reload(self) -> Tuple[Product, ...]:
        self._products = None
        return self.products()

    def get(self, product_id: int) -> Optional[Product]:
        for product in self.products():
            if product.id == product_id:
                return product
        return None

    def in_price_range(self, min_price: float, max_price: float) -> List[Product]:
        """Return products priced between ``min_price`` and ``max_price`` inclusive."""

        if min_price > max_price:
            raise InvalidArgument(f"min_price {min_price} is greater than max_price {max_price}")
        return [p for p in self.products() if min_price <= p.price <= max_price]
