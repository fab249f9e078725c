"""Salary adjustment arithmetic."""

from __future__ import annotations

import logging
from decimal import Decimal

from salaryadjust.backend.models import ComputationResult, ValidatedEmployee
from salaryadjust.backend.config.rule_table import RuleTable, load_rule_table

from .brackets import classify
from .utils import round_currency

_LOGGER = logging.getLogger(__name__)
_HUNDRED = Decimal(100)


def compute_adjustment(
    employee: ValidatedEmployee,
    current_year: int,
    *,
    table: RuleTable | None = None,
) -> ComputationResult:
    """Apply the bracket rule and tenure amount to ``employee``.

    Tenure up to and including the threshold (10 years in the bundled table)
    takes the discount; anything above takes the surcharge. A hire year later
    than ``current_year`` yields negative tenure and is not rejected.
    """

    rules = table or load_rule_table()
    bracket = classify(employee.age)
    rule = rules.rule_for(bracket, employee.gender)

    years_of_service = current_year - employee.hire_year
    if years_of_service <= rules.meta.tenure_threshold_years:
        applied_amount = -rule.discount_amount
        kind = "discount"
    else:
        applied_amount = rule.surcharge_amount
        kind = "surcharge"

    adjusted_base = employee.base_salary * (1 + rule.reajustement_percent / _HUNDRED)
    new_salary = round_currency(adjusted_base + applied_amount)

    _LOGGER.debug(
        "Adjusted employee %s (%s/%s): %s -> %s",
        employee.employee_id,
        bracket.value,
        employee.gender.value,
        employee.base_salary,
        new_salary,
    )

    return ComputationResult(
        new_salary=new_salary,
        reajustement_percent=rule.reajustement_percent,
        applied_amount=applied_amount,
        years_of_service=years_of_service,
        adjustment_kind=kind,
    )


__all__ = ["compute_adjustment"]
