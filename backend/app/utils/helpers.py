"""Miscellaneous helper functions."""

from __future__ import annotations

import datetime as dt
import re
from typing import Optional

_AMOUNT_RE = re.compile(r"(\d+)\.(\d{2})", re.ASCII)
_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
_TIME_RE = re.compile(r"\d{2}:\d{2}", re.ASCII)


def parse_cents(value: str | None) -> Optional[int]:
    """Parse a monetary amount such as ``"35.35"`` into integer cents (``3535``).

    Only non-negative amounts written with exactly two fractional digits
    are accepted. Signs, exponents, currency symbols and thousands
    separators are rejected. Returns ``None`` if the value cannot be parsed.
    Arithmetic on the result stays exact however long the amount is.
    Amounts past the interpreter's integer string conversion limit
    (``sys.get_int_max_str_digits``) are treated as unparseable.
    """
    if not value:
        return None
    match = _AMOUNT_RE.fullmatch(value)
    if match is None:
        return None
    dollars, cents = match.groups()
    try:
        return int(dollars) * 100 + int(cents)
    except ValueError:
        return None


def parse_purchase_date(value: str | None) -> Optional[dt.date]:
    """Parse a ``YYYY-MM-DD`` string into a :class:`date`.

    ``strptime`` alone tolerates single-digit months and days, so the
    layout is checked first. Impossible dates (``2022-02-30``) return ``None``.
    """
    if not value or not _DATE_RE.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_purchase_time(value: str | None) -> Optional[dt.time]:
    """Parse a 24-hour ``HH:MM`` string into a :class:`time`, or ``None``."""
    if not value or not _TIME_RE.fullmatch(value):
        return None
    try:
        return dt.datetime.strptime(value, "%H:%M").time()
    except ValueError:
        return None
