"""Conversions between Decimal amounts and the TEXT amount columns.

Amounts are stored as their exact decimal text. SQLite has no decimal type,
so SUM() over amounts would go through binary floats; totals are added up in
Python instead.
"""

from decimal import Decimal
from typing import Iterable


def to_db_amount(amount: Decimal) -> str:
    """Exact text for an amount, e.g. Decimal("0.10") -> "0.10"."""
    return str(amount)


def to_decimal(value) -> Decimal:
    """Convert a stored amount (or a NULL) to Decimal."""
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def sum_amounts(values: Iterable) -> Decimal:
    """Exact total of stored amounts; 0 for no values."""
    return sum((to_decimal(value) for value in values), Decimal("0"))
