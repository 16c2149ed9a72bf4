from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from typing import Final


MONTHS_IN_YEAR: Final[int] = 12
_CENT: Final[Decimal] = Decimal("0.01")


def round_cents(value: float) -> float:
    """Round to 2 decimal places, half away from zero.

    Goes through the shortest repr of the float so that values such as 1.005
    round the way they read rather than the way they are stored in binary.
    """
    return float(Decimal(repr(float(value))).quantize(_CENT, rounding=ROUND_HALF_UP))


def pct_of(amount: float, pct: float) -> float:
    # whole-number percent: pct_of(2000, 5) == 100
    return amount * (pct / 100.0)


def usd(value: float) -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def percent(value: float) -> str:
    return f"{value:.2f}%"
