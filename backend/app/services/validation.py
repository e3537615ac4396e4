"""Receipt validation.

A receipt is either accepted as a whole or rejected as a whole: every
field must be present and well formed and there must be at least one
item. Validation is a pure predicate; it never mutates the receipt and
has no side effects other than a DEBUG log line naming the first field
that failed.

Field rules:

* ``retailer`` – letters, digits, underscore, spaces, ``-`` and
  ``&``, with at least one non-space character. Tabs and line
  breaks are rejected.
* ``purchaseDate`` – a real calendar date written ``YYYY-MM-DD``.
* ``purchaseTime`` – a real 24-hour time written ``HH:MM``.
* ``total`` and each item ``price`` – non-negative amounts with exactly
  two fractional digits.
* each item ``shortDescription`` – at least one non-whitespace character.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from app.models.schemas import Item, Receipt
from app.utils.helpers import parse_cents, parse_purchase_date, parse_purchase_time

logger = logging.getLogger(__name__)

RETAILER_PATTERN = re.compile(r"[\w \-&]+")


def _item_failure(index: int, item: Item) -> Optional[str]:
    if not item.short_description.strip():
        return f"items[{index}].shortDescription"
    if parse_cents(item.price) is None:
        return f"items[{index}].price"
    return None


def find_invalid_field(receipt: Receipt) -> Optional[str]:
    """Return the wire name of the first field that fails validation, if any."""
    if not receipt.retailer.strip() or not RETAILER_PATTERN.fullmatch(receipt.retailer):
        return "retailer"
    if parse_purchase_date(receipt.purchase_date) is None:
        return "purchaseDate"
    if parse_purchase_time(receipt.purchase_time) is None:
        return "purchaseTime"
    if parse_cents(receipt.total) is None:
        return "total"
    if not receipt.items:
        return "items"
    for index, item in enumerate(receipt.items):
        failure = _item_failure(index, item)
        if failure:
            return failure
    return None


def validate_receipt(receipt: Receipt) -> bool:
    """Return True if the receipt may be scored and stored."""
    failure = find_invalid_field(receipt)
    if failure is not None:
        logger.debug("Receipt rejected: invalid %s", failure)
        return False
    return True
