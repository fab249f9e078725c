"""Orchestrate employee validation and salary adjustment calculations.

This module is the boundary used by the HTTP layer: it accepts loosely typed
field mappings, runs the input validator and, when the input is clean, the
adjustment calculator. ``current_year`` is always supplied by the caller so
the calculation itself never consults the clock.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from salaryadjust.backend.models import (
    AdjustmentResponse,
    ComputationResult,
    EmployeeInput,
    ValidatedEmployee,
)
from salaryadjust.backend.config.rule_table import load_rule_table

from .calculators import classify
from .calculators import compute_adjustment as _compute_validated
from .validation import EmployeeValidationError, normalise_employee, validate_employee

_LOGGER = logging.getLogger(__name__)

RawFields = EmployeeInput | Mapping[str, Any]


def current_calendar_year() -> int:
    """Return the current calendar year from the system clock."""

    return date.today().year


def evaluate_adjustment(
    raw: RawFields, current_year: int
) -> tuple[ValidatedEmployee, ComputationResult]:
    """Validate ``raw`` and compute its adjustment.

    Raises :class:`EmployeeValidationError` with every violation when the
    input is not clean; no partial result is produced in that case.
    """

    try:
        employee = normalise_employee(raw)
    except EmployeeValidationError as error:
        _LOGGER.info(
            "Rejected adjustment request with %d violation(s)", len(error.violations)
        )
        raise

    return employee, _compute_validated(employee, current_year)


def compute_adjustment(raw: RawFields, current_year: int) -> ComputationResult:
    """Return the :class:`ComputationResult` for raw employee fields."""

    _, result = evaluate_adjustment(raw, current_year)
    return result


def calculate_adjustment(raw: RawFields, current_year: int) -> dict[str, Any]:
    """Return a JSON-ready payload describing the adjustment for ``raw``."""

    employee, result = evaluate_adjustment(raw, current_year)
    meta = load_rule_table().meta

    response_model = AdjustmentResponse.model_validate(
        {
            "employee": {
                "employee_id": employee.employee_id,
                "age": float(employee.age),
                "gender": employee.gender,
                "gender_label": employee.gender.label,
                "base_salary": float(employee.base_salary),
                "hire_year": employee.hire_year,
            },
            "result": {
                "age_bracket": classify(employee.age),
                "new_salary": float(result.new_salary),
                "reajustement_percent": float(result.reajustement_percent),
                "applied_amount": float(result.applied_amount),
                "adjustment_kind": result.adjustment_kind,
                "years_of_service": result.years_of_service,
            },
            "meta": {
                "current_year": current_year,
                "currency": meta.currency,
                "tenure_threshold_years": meta.tenure_threshold_years,
            },
        }
    )

    return response_model.model_dump(mode="json")


__all__ = [
    "EmployeeValidationError",
    "calculate_adjustment",
    "compute_adjustment",
    "current_calendar_year",
    "evaluate_adjustment",
    "validate_employee",
]
