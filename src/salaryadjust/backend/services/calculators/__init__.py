"""Domain-specific calculation helpers."""

from .adjustment import compute_adjustment
from .brackets import classify
from .utils import format_currency, format_percentage, round_currency

__all__ = [
    "classify",
    "compute_adjustment",
    "format_currency",
    "format_percentage",
    "round_currency",
]
