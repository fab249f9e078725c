"""Utility helpers for calculator modules."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

_CENTS = Decimal("0.01")


def round_currency(value: Decimal) -> Decimal:
    """Round monetary amounts to two decimals, halves away from zero."""

    with localcontext() as context:
        # quantize fails when the integral digits plus cents exceed precision
        context.prec = max(context.prec, value.adjusted() + 3)
        return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def format_currency(value: Decimal | float) -> str:
    """Return ``value`` with exactly two decimals."""

    return f"{Decimal(str(value)):.2f}"


def format_percentage(value: Decimal | float) -> str:
    """Return a human-readable percentage label for ``value``."""

    number = Decimal(str(value))
    if number == number.to_integral_value():
        return f"{int(number)}%"
    return f"{number.normalize()}%"
