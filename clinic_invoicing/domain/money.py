"""Monetary helpers

All amounts are Decimal. Rounding is half-up to two decimal places and is
applied only where a value is presented or stored as a final amount.
"""

from decimal import Decimal, ROUND_HALF_UP

ZERO = Decimal("0")
CENT = Decimal("0.01")


def round_money(value: Decimal) -> Decimal:
    """Round to 2 decimal places using half-up rounding (125.125 -> 125.13)"""
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
