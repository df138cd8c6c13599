"""
Checkout inputs for payment providers.
"""

from salesbot.core.checkout.builder import build_line_items, to_minor_units
from salesbot.core.checkout.models import CheckoutItem, CheckoutLineItem, CheckoutSession

__all__ = [
    "CheckoutItem",
    "CheckoutLineItem",
    "CheckoutSession",
    "build_line_items",
    "to_minor_units",
]
