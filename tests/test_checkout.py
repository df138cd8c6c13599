"""Tests for checkout input building."""

import pytest

from salesbot.core.checkout import CheckoutItem, build_line_items, to_minor_units


@pytest.mark.parametrize("amount,expected", [
    (25, 2500),
    ("39.9", 3990),
    (18.755, 1876),
    (0.005, 1),
    (None, 0),
    ("abc", 0),
    (-3, 0),
])
def test_to_minor_units(amount, expected):
    assert to_minor_units(amount) == expected


def test_catalog_product_uses_catalog_values(catalog):
    items = build_line_items([CheckoutItem(product_id="p1", quantity=2)], catalog)

    assert len(items) == 1
    item = items[0]
    assert item.display_name == "Facial Serum"
    assert item.unit_amount_minor_units == 2500
    assert item.currency == "usd"
    assert item.quantity == 2


def test_catalog_price_overrides_caller_price(catalog):
    items = build_line_items(
        [CheckoutItem(product_id="p1", name="Cheap", price=1)],
        catalog,
    )
    assert items[0].display_name == "Facial Serum"
    assert items[0].unit_amount_minor_units == 2500


def test_unknown_product_uses_caller_values(catalog):
    items = build_line_items(
        [
            CheckoutItem(product_id="x9", quantity="3", name="Regalo", price="10.50"),
            CheckoutItem(product_id="x10"),
        ],
        catalog,
        default_currency="EUR",
    )

    assert items[0].display_name == "Regalo"
    assert items[0].unit_amount_minor_units == 1050
    assert items[0].currency == "eur"
    assert items[0].quantity == 3

    assert items[1].display_name == "x10"
    assert items[1].unit_amount_minor_units == 0
    assert items[1].quantity == 1


def test_item_from_dict_accepts_both_key_styles():
    assert CheckoutItem.from_dict({"productId": "p1"}).product_id == "p1"
    assert CheckoutItem.from_dict({"product_id": "p2", "quantity": 4}).quantity == 4


def test_line_item_to_dict(catalog):
    data = build_line_items([CheckoutItem(product_id="p1")], catalog)[0].to_dict()
    assert data == {
        "displayName": "Facial Serum",
        "unitAmountMinorUnits": 2500,
        "currency": "usd",
        "quantity": 1,
    }
