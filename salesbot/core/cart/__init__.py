"""
Session carts.
"""

from salesbot.core.cart.ledger import CartLedger, parse_quantity

__all__ = [
    "CartLedger",
    "parse_quantity",
]
