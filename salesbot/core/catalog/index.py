"""
Catalog index - holds the product list and answers keyword queries.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from salesbot.core.catalog.models import Product
from salesbot.core.errors import LoadError

logger = logging.getLogger(__name__)


class CatalogIndex:
    """Read-only product catalog with keyword matching."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[str, Product] = {}

        for product in self._products:
            if product.id in self._by_id:
                raise LoadError(f"Duplicate product id: {product.id}")
            self._by_id[product.id] = product

    @classmethod
    def parse(cls, source: str | Path | list) -> "CatalogIndex":
        """
        Parse a catalog from a JSON file or an already decoded list.

        Raises:
            LoadError: If the source is missing or malformed
        """
        if isinstance(source, (str, Path)):
            path = Path(source)
            try:
                with open(path, "r", encoding="utf-8") as f:
                    source = json.load(f)
            except FileNotFoundError:
                raise LoadError(f"Catalog file not found: {path}")
            except (OSError, json.JSONDecodeError) as e:
                raise LoadError(f"Catalog file {path} is not valid JSON: {e}")

        if not isinstance(source, list):
            raise LoadError("Catalog must be a JSON array of products")

        return cls(Product.from_dict(entry) for entry in source)

    @classmethod
    def load(cls, source: str | Path | list) -> "CatalogIndex":
        """
        Load catalog, falling back to an empty one on errors.

        The bot keeps working without products rather than refusing to start.
        """
        try:
            catalog = cls.parse(source)
        except LoadError as e:
            logger.warning(f"Catalog not loaded, continuing with empty catalog: {e}")
            return cls()

        logger.info(f"Catalog loaded: {len(catalog)} products")
        return catalog

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def categories(self) -> list[str]:
        """Unique categories in first-seen order."""
        return list(dict.fromkeys(p.category for p in self._products))

    def match(self, query: Optional[str], limit: int) -> list[Product]:
        """
        Find products whose name, category or tags contain the query.

        Args:
            query: Free text, compared case-insensitively
            limit: Maximum number of products to return

        Returns:
            Matching products in catalog order
        """
        if not query or not query.strip() or limit <= 0:
            return []

        needle = query.strip().lower()
        results = []
        for product in self._products:
            if needle in product.search_text:
                results.append(product)
                if len(results) >= limit:
                    break
        return results

    def find_by_id(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)
