"""Tests for session carts."""

import asyncio

import pytest

from salesbot.core.cart import CartLedger, parse_quantity


@pytest.mark.parametrize("value,expected", [
    (None, 1),
    (3, 3),
    ("4", 4),
    (" 2 unidades", 2),
    (2.9, 2),
    (0, 1),
    (-5, 1),
    ("-2", 1),
    ("abc", 1),
    (True, 1),
    (float("nan"), 1),
    (float("inf"), 1),
    ([2], 1),
])
def test_parse_quantity(value, expected):
    assert parse_quantity(value) == expected


class TestCartLedger:

    def setup_method(self):
        self.ledger = CartLedger()

    async def test_add_accumulates(self):
        assert await self.ledger.add("s1", "p1", 2) == {"p1": 2}
        assert await self.ledger.add("s1", "p1") == {"p1": 3}
        assert await self.ledger.add("s1", "p2", "5") == {"p1": 3, "p2": 5}

    async def test_sessions_are_isolated(self):
        await self.ledger.add("s1", "p1", 2)
        await self.ledger.add("s2", "p1", 1)

        assert await self.ledger.get("s1") == {"p1": 2}
        assert await self.ledger.get("s2") == {"p1": 1}
        assert self.ledger.sessions() == 2

    async def test_get_unknown_session_is_empty_and_not_created(self):
        assert await self.ledger.get("nobody") == {}
        assert await self.ledger.get("nobody") == {}
        assert self.ledger.sessions() == 0

    async def test_get_is_idempotent_for_filled_cart(self):
        await self.ledger.add("s1", "p1", 2)
        await self.ledger.add("s1", "p2", 1)

        first = await self.ledger.get("s1")
        second = await self.ledger.get("s1")

        assert first == second == {"p1": 2, "p2": 1}
        assert first is not second
        assert self.ledger.sessions() == 1

    async def test_snapshots_are_copies(self):
        snapshot = await self.ledger.add("s1", "p1", 1)
        snapshot["p1"] = 100

        cart = await self.ledger.get("s1")
        cart["p9"] = 1

        assert await self.ledger.get("s1") == {"p1": 1}

    async def test_concurrent_adds_are_not_lost(self):
        await asyncio.gather(*(self.ledger.add("s1", "p1", 1) for _ in range(50)))

        assert await self.ledger.get("s1") == {"p1": 50}

    async def test_concurrent_sessions(self):
        await asyncio.gather(
            *(self.ledger.add(f"s{i % 5}", "p1", 2) for i in range(20))
        )

        for i in range(5):
            assert await self.ledger.get(f"s{i}") == {"p1": 8}
