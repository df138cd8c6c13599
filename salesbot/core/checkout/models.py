"""
Checkout models.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class CheckoutItem:
    """Requested item. Name and price are fallbacks for unknown products."""
    product_id: str
    quantity: Any = 1
    name: Optional[str] = None
    price: Any = None

    @classmethod
    def from_dict(cls, data: dict) -> "CheckoutItem":
        return cls(
            product_id=str(data.get("productId") or data.get("product_id") or ""),
            quantity=data.get("quantity", 1),
            name=data.get("name"),
            price=data.get("price"),
        )


@dataclass(frozen=True)
class CheckoutLineItem:
    """Normalized line item handed to the payment provider."""
    display_name: str
    unit_amount_minor_units: int
    currency: str
    quantity: int

    def to_dict(self) -> dict:
        return {
            "displayName": self.display_name,
            "unitAmountMinorUnits": self.unit_amount_minor_units,
            "currency": self.currency,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class CheckoutSession:
    """Hosted payment session created by a provider."""
    id: str
    url: str
