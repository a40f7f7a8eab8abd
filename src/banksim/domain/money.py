"""Monetary amounts as two-decimal ``Decimal`` values.

Floats never reach the balance: every stored amount goes through
:func:`as_money`, which quantizes to cents with banker's rounding.
Account rules compare the exact amount from :func:`exact_amount`, so
rounding can never turn a refused request into an accepted one.
"""

from __future__ import annotations

import decimal
from decimal import ROUND_HALF_EVEN, Decimal

CENT = Decimal("0.01")

Amount = Decimal | int


def as_money(value: Amount | str) -> Decimal:
    """Normalize *value* to a Decimal with 2 fractional digits."""
    return Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_EVEN)


def exact_amount(value: Amount) -> Decimal:
    """Return *value* as an unrounded Decimal.

    Raises:
        ValueError: *value* is NaN or infinite.
    """
    amount = Decimal(value)
    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number, got {value}")
    return amount


def parse_amount(raw: str) -> Decimal:
    """Parse user input into a money amount.

    Raises:
        ValueError: *raw* is not a finite decimal number, or has
            sub-cent digits.
    """
    text = raw.strip()
    try:
        value = Decimal(text)
    except decimal.InvalidOperation as exc:
        raise ValueError(f"Not a valid amount: {raw!r}") from exc
    if not value.is_finite():
        raise ValueError(f"Not a valid amount: {raw!r}")
    try:
        money = as_money(value)
    except decimal.InvalidOperation as exc:
        raise ValueError(f"Amount out of range: {raw!r}") from exc
    if money != value:
        raise ValueError(f"Amount has more than two decimal places: {raw!r}")
    return money


def format_amount(value: Amount | str, symbol: str = "$") -> str:
    """Render an amount with its currency symbol, e.g. ``$150.00``."""
    return f"{symbol}{as_money(value)}"
