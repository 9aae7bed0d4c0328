"""Monetary rounding utilities"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Numeric = Union[int, float, str, Decimal]

CENTS = Decimal("0.01")


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal, floats via their shortest repr"""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_up(value: Numeric) -> Decimal:
    """
    Round to whole cents, midpoints away from zero.

    Floats go through str() first so the literal the caller sees is the one
    rounded: 5.505 -> 5.51 and 2.675 -> 2.68, where the builtin round() and
    Decimal(float) both land on the lower cent.
    """
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
