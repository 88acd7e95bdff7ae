"""Money arithmetic helpers.

Amounts are kept as ``Decimal`` at full precision throughout the core and
quantized to cents only when rendered.
"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
ZERO = Decimal("0")
HUNDRED = Decimal("100")


def to_decimal(value) -> Decimal:
    """Convert a price-like value to ``Decimal`` without binary float noise."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def percent_of(amount: Decimal, percent) -> Decimal:
    return amount * to_decimal(percent) / HUNDRED


def quantize(amount: Decimal) -> Decimal:
    return to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount) -> str:
    """Render an amount with exactly two decimals, e.g. ``"3.00"``."""
    return f"{quantize(amount):.2f}"
