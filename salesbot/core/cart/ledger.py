"""
Cart ledger - per-session product quantities kept in memory.
"""

import asyncio
import logging
import math
import re
from typing import Any

logger = logging.getLogger(__name__)


# Leading integer of a free-form quantity ("3", " 2 unidades", "-1")
LEADING_INT_PATTERN = re.compile(r'^\s*([+-]?\d+)')


def parse_quantity(value: Any, default: int = 1) -> int:
    """
    Parse a requested quantity.

    Absent, unparseable, zero and negative values fall back to the default
    increment instead of being rejected.
    """
    quantity = None

    if isinstance(value, bool):
        quantity = None
    elif isinstance(value, int):
        quantity = value
    elif isinstance(value, float):
        if math.isfinite(value):
            quantity = int(value)
    elif isinstance(value, str):
        match = LEADING_INT_PATTERN.match(value)
        if match:
            quantity = int(match.group(1))

    if quantity is None or quantity < 1:
        return default
    return quantity


class CartLedger:
    """
    Session carts: session_id -> {product_id: quantity}.

    Increments for one session are serialized by that session's lock;
    different sessions never wait on each other.
    """

    def __init__(self):
        self._carts: dict[str, dict[str, int]] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock_for(self, session_id: str) -> asyncio.Lock:
        lock = self._locks.get(session_id)
        if lock is None:
            lock = self._locks.setdefault(session_id, asyncio.Lock())
        return lock

    async def add(self, session_id: str, product_id: str, qty: Any = None) -> dict[str, int]:
        """
        Add quantity of a product to the session cart.

        Returns:
            Snapshot of the cart after the increment
        """
        increment = parse_quantity(qty)

        async with self._lock_for(session_id):
            cart = self._carts.setdefault(session_id, {})
            cart[product_id] = cart.get(product_id, 0) + increment
            snapshot = dict(cart)

        logger.debug(f"Cart {session_id}: +{increment} {product_id} -> {snapshot[product_id]}")
        return snapshot

    async def get(self, session_id: str) -> dict[str, int]:
        """Snapshot of the session cart, empty for unknown sessions."""
        return dict(self._carts.get(session_id, {}))

    def sessions(self) -> int:
        """Number of sessions with a cart."""
        return len(self._carts)
