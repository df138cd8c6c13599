"""
Product model for the catalog.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any

from salesbot.core.errors import LoadError


@dataclass(frozen=True)
class Product:
    """Single sellable product. Immutable once loaded."""
    id: str
    name: str
    category: str
    short_description: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    price: Decimal = Decimal("0")
    currency: str = "USD"
    image_url: str = ""
    buy_link: str = ""

    @property
    def search_text(self) -> str:
        """Lowercased text used for keyword matching."""
        return f"{self.name} {self.category} {' '.join(self.tags)}".lower()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """
        Build a product from a catalog entry.

        Accepts the catalog file keys (short_desc, image_url, buy_link)
        and their camelCase variants.

        Raises:
            LoadError: If the entry is not a valid product
        """
        if not isinstance(data, dict):
            raise LoadError(f"Product entry must be an object, got {type(data).__name__}")

        product_id = data.get("id")
        if product_id is None or str(product_id).strip() == "":
            raise LoadError(f"Product without id: {data!r}")

        tags = data.get("tags") or []
        if isinstance(tags, str):
            tags = [tags]
        if not isinstance(tags, (list, tuple)):
            raise LoadError(f"Product {product_id}: tags must be a list")

        try:
            price = Decimal(str(data.get("price", 0) or 0))
        except InvalidOperation:
            raise LoadError(f"Product {product_id}: invalid price {data.get('price')!r}")
        if not price.is_finite() or price < 0:
            raise LoadError(f"Product {product_id}: price must be a non-negative number")

        return cls(
            id=str(product_id),
            name=str(data.get("name") or ""),
            category=str(data.get("category") or ""),
            short_description=str(
                data.get("short_desc") or data.get("shortDescription") or ""
            ),
            tags=tuple(str(t) for t in tags),
            price=price,
            currency=str(data.get("currency") or "USD"),
            image_url=str(data.get("image_url") or data.get("imageUrl") or ""),
            buy_link=str(data.get("buy_link") or data.get("buyLink") or ""),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary in catalog file format."""
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "short_desc": self.short_description,
            "tags": list(self.tags),
            "price": float(self.price),
            "currency": self.currency,
            "image_url": self.image_url,
            "buy_link": self.buy_link,
        }
