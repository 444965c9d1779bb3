"""Rounding policy applied where raw results become part of a result model.

Intermediate arithmetic (recurrences, rate conversions) stays at full float
precision; each helper here is called exactly once per emitted field.

Ties round half away from zero on the exact binary value of the float, so
0.125 becomes 0.13 while 1.005 (stored as 1.00499...) becomes 1.0.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal

MONEY_PLACES = 2
PERCENT_PLACES = 2
TOKEN_PLACES = 8

# wide enough for any finite float quantized to TOKEN_PLACES
_CONTEXT = Context(prec=400)


def to_fraction(percentage: float) -> float:
    """Convert a percentage rate (7 for 7%) to its fractional form (0.07)."""
    return percentage / 100.0


def _round(value: float, places: int) -> float:
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT)
    # adding 0.0 turns a rounded -0.00 into 0.0
    return float(rounded) + 0.0


def round_money(value: float) -> float:
    return _round(value, MONEY_PLACES)


def round_percent(fraction: float) -> float:
    """Express a fractional ratio as a percentage, rounded after scaling."""
    return _round(fraction * 100.0, PERCENT_PLACES)


def round_token(value: float) -> float:
    """Native-token amounts are usually sub-unit, so they keep 8 places."""
    return _round(value, TOKEN_PLACES)
