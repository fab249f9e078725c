"""Age bracket classification."""

from __future__ import annotations

from decimal import Decimal

from salaryadjust.backend.config.schema import BRACKET_BOUNDS, AgeBracket


def classify(age: int | Decimal) -> AgeBracket:
    """Return the bracket containing ``age``.

    Bounds are inclusive on both ends. Fractional ages inside a bracket
    (25.5) classify normally, while values falling between two brackets
    (39.5, 69.5) or past the last one (99.5) map to :attr:`AgeBracket.INVALID`.
    """

    for bracket, (lower, upper) in BRACKET_BOUNDS.items():
        if lower <= age <= upper:
            return bracket
    return AgeBracket.INVALID


__all__ = ["classify"]
