"""
Build checkout line items from requested items and the catalog.
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Iterable

from salesbot.core.cart import parse_quantity
from salesbot.core.catalog import CatalogIndex
from salesbot.core.checkout.models import CheckoutItem, CheckoutLineItem

logger = logging.getLogger(__name__)


def to_minor_units(amount: Any) -> int:
    """Convert a decimal amount to cents, rounding half up. Invalid amounts are 0."""
    try:
        value = Decimal(str(amount if amount is not None else 0))
    except InvalidOperation:
        return 0
    if not value.is_finite() or value < 0:
        return 0
    return int((value * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def build_line_items(
    items: Iterable[CheckoutItem],
    catalog: CatalogIndex,
    default_currency: str = "usd",
) -> list[CheckoutLineItem]:
    """
    Resolve each item against the catalog.

    An unknown product does not fail the batch: the caller-supplied name and
    price are used for that line instead.
    """
    line_items = []

    for item in items:
        product = catalog.find_by_id(item.product_id)

        if product is not None:
            name = product.name
            amount = to_minor_units(product.price)
            currency = product.currency
        else:
            logger.info(f"Checkout item {item.product_id!r} not in catalog, using caller values")
            name = item.name or item.product_id
            amount = to_minor_units(item.price)
            currency = default_currency

        line_items.append(CheckoutLineItem(
            display_name=name,
            unit_amount_minor_units=amount,
            currency=currency.lower(),
            quantity=parse_quantity(item.quantity),
        ))

    return line_items
