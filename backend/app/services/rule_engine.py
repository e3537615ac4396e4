"""Points rule engine for validated receipts.

The engine applies six independent rules to a receipt and adds up the
points each one awards. Every rule is evaluated; none of them depends
on another's outcome. All monetary arithmetic is done on integer cents
parsed from the two-digit wire strings, so ``0.25`` multiples and the
20% item bonus are exact for amounts of any size.

Rules:

* ``retailer_name`` – one point per alphanumeric character in the
  retailer name.
* ``round_dollar_total`` – 50 points if the total has no cents.
* ``quarter_multiple_total`` – 25 points if the total is a multiple of
  ``0.25``.
* ``item_pairs`` – 5 points for every two items.
* ``item_descriptions`` – for each item whose trimmed description length
  is a multiple of 3, the item price multiplied by ``0.2`` and rounded
  up to the nearest integer.
* ``purchase_time`` – 10 points if the purchase time is after 14:00 and
  before 16:00, both ends exclusive.

The functions expect a receipt that already passed
:func:`app.services.validation.validate_receipt`.
"""

from __future__ import annotations

import datetime as dt
from typing import Callable, Dict, List, Tuple

from app.models.schemas import Item, Receipt
from app.utils.helpers import parse_cents, parse_purchase_time

ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
POINTS_PER_ITEM_PAIR = 5
PURCHASE_TIME_POINTS = 10

CENTS_PER_DOLLAR = 100
CENTS_PER_QUARTER = 25
# price * 0.2 points == price_cents / 500
CENTS_PER_DESCRIPTION_POINT = 500
AFTERNOON_START = dt.time(14, 0)
AFTERNOON_END = dt.time(16, 0)


def _total_cents(receipt: Receipt) -> int:
    total = parse_cents(receipt.total)
    if total is None:
        raise ValueError(f"Unparseable receipt total: {receipt.total!r}")
    return total


def retailer_name_points(receipt: Receipt) -> int:
    return sum(1 for ch in receipt.retailer if ch.isalnum())


def round_dollar_points(receipt: Receipt) -> int:
    return ROUND_DOLLAR_POINTS if _total_cents(receipt) % CENTS_PER_DOLLAR == 0 else 0


def quarter_multiple_points(receipt: Receipt) -> int:
    return QUARTER_MULTIPLE_POINTS if _total_cents(receipt) % CENTS_PER_QUARTER == 0 else 0


def item_pair_points(receipt: Receipt) -> int:
    return (len(receipt.items) // 2) * POINTS_PER_ITEM_PAIR


def item_description_points(item: Item) -> int:
    """Points for a single item based on its trimmed description length.

    Descriptions whose length is a positive multiple of three earn the
    item price times 0.2, rounded up. An exact product (``10.00 * 0.2``)
    earns exactly that many points.
    """
    length = len(item.short_description.strip())
    if length == 0 or length % 3 != 0:
        return 0
    price = parse_cents(item.price)
    if price is None:
        raise ValueError(f"Unparseable item price: {item.price!r}")
    return -(-price // CENTS_PER_DESCRIPTION_POINT)


def item_descriptions_points(receipt: Receipt) -> int:
    return sum(item_description_points(item) for item in receipt.items)


def purchase_time_points(receipt: Receipt) -> int:
    purchased_at = parse_purchase_time(receipt.purchase_time)
    if purchased_at is None:
        raise ValueError(f"Unparseable purchase time: {receipt.purchase_time!r}")
    return PURCHASE_TIME_POINTS if AFTERNOON_START < purchased_at < AFTERNOON_END else 0


RULES: List[Tuple[str, Callable[[Receipt], int]]] = [
    ("retailer_name", retailer_name_points),
    ("round_dollar_total", round_dollar_points),
    ("quarter_multiple_total", quarter_multiple_points),
    ("item_pairs", item_pair_points),
    ("item_descriptions", item_descriptions_points),
    ("purchase_time", purchase_time_points),
]


def points_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Return the points awarded by each rule, keyed by rule name."""
    return {name: rule(receipt) for name, rule in RULES}


def calculate_points(receipt: Receipt) -> int:
    """Compute the total points for a validated receipt."""
    return sum(points_breakdown(receipt).values())
