"""Service-layer helpers for the SalaryAdjust backend."""

from .calculation_service import (
    calculate_adjustment,
    compute_adjustment,
    current_calendar_year,
    evaluate_adjustment,
)
from .request_parser import parse_adjustment_payload, parse_query_fields
from .validation import EmployeeValidationError, normalise_employee, validate_employee

__all__ = [
    "EmployeeValidationError",
    "calculate_adjustment",
    "compute_adjustment",
    "current_calendar_year",
    "evaluate_adjustment",
    "normalise_employee",
    "parse_adjustment_payload",
    "parse_query_fields",
    "validate_employee",
]
