"""Normalise and validate raw employee fields.

Every rule is checked independently so callers always receive the complete,
ordered list of violations. Parsing problems are reported as violations and
never escape as exceptions; only :func:`normalise_employee` raises, and only
to signal that the list was non-empty.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal, InvalidOperation
from typing import Any

from salaryadjust.backend.models import (
    AgeBracket,
    EmployeeInput,
    Gender,
    ValidatedEmployee,
)

from .calculators import classify

AGE_MESSAGE = "Age must be a number greater than 16."
GENDER_MESSAGE = "Gender must be M (male) or F (female)."
BASE_SALARY_MESSAGE = "Base salary must be a valid real number greater than or equal to zero."
HIRE_YEAR_MESSAGE = "Hire year must be an integer greater than 1960."
EMPLOYEE_ID_MESSAGE = "Employee ID must be an integer greater than zero."
AGE_BRACKET_MESSAGE = "Age must be between 18 and 99 years (valid age bracket)."

MINIMUM_AGE = 16
MINIMUM_HIRE_YEAR = 1960
# Numbers with more integral digits than this are treated as malformed.
MAX_INTEGRAL_DIGITS = 20


class EmployeeValidationError(ValueError):
    """Raised when employee fields break one or more validation rules."""

    def __init__(self, violations: Sequence[str]) -> None:
        self.violations = tuple(violations)
        super().__init__("; ".join(self.violations))


def _parse_number(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, int):
        number = Decimal(value)
    elif isinstance(value, float):
        number = Decimal(str(value))
    elif isinstance(value, str):
        text = value.strip()
        # Decimal() accepts digit-group underscores such as "1_700".
        if not text or "_" in text:
            return None
        try:
            number = Decimal(text)
        except InvalidOperation:
            return None
    else:
        return None

    if not number.is_finite() or number.adjusted() >= MAX_INTEGRAL_DIGITS:
        return None
    return number


def _parse_integer(value: Any) -> int | None:
    number = _parse_number(value)
    if number is None or number != number.to_integral_value():
        return None
    return int(number)


def _parse_gender(value: Any) -> Gender | None:
    if not isinstance(value, str):
        return None
    try:
        return Gender(value.strip().upper())
    except ValueError:
        return None


def _coerce_input(raw: EmployeeInput | Mapping[str, Any]) -> EmployeeInput:
    if isinstance(raw, EmployeeInput):
        return raw
    if isinstance(raw, Mapping):
        return EmployeeInput.model_validate(dict(raw))
    raise TypeError(f"Unsupported employee input type: {type(raw).__name__}")


def _inspect(raw: EmployeeInput) -> tuple[list[str], dict[str, Any]]:
    violations: list[str] = []
    fields: dict[str, Any] = {}

    age = _parse_number(raw.age)
    if age is None or age <= MINIMUM_AGE:
        violations.append(AGE_MESSAGE)
    else:
        fields["age"] = age

    gender = _parse_gender(raw.gender)
    if gender is None:
        violations.append(GENDER_MESSAGE)
    else:
        fields["gender"] = gender

    base_salary = _parse_number(raw.base_salary)
    if base_salary is None or base_salary < 0:
        violations.append(BASE_SALARY_MESSAGE)
    else:
        fields["base_salary"] = base_salary

    hire_year = _parse_integer(raw.hire_year)
    if hire_year is None or hire_year <= MINIMUM_HIRE_YEAR:
        violations.append(HIRE_YEAR_MESSAGE)
    else:
        fields["hire_year"] = hire_year

    employee_id = _parse_integer(raw.employee_id)
    if employee_id is None or employee_id <= 0:
        violations.append(EMPLOYEE_ID_MESSAGE)
    else:
        fields["employee_id"] = employee_id

    # Only meaningful once the primitive checks passed; avoids a second age message.
    if not violations and classify(fields["age"]) is AgeBracket.INVALID:
        violations.append(AGE_BRACKET_MESSAGE)

    return violations, fields


def validate_employee(raw: EmployeeInput | Mapping[str, Any]) -> list[str]:
    """Return the ordered violation messages for ``raw`` (empty when valid)."""

    violations, _ = _inspect(_coerce_input(raw))
    return violations


def normalise_employee(raw: EmployeeInput | Mapping[str, Any]) -> ValidatedEmployee:
    """Return the validated form of ``raw`` or raise :class:`EmployeeValidationError`."""

    violations, fields = _inspect(_coerce_input(raw))
    if violations:
        raise EmployeeValidationError(violations)

    return ValidatedEmployee(**fields)


__all__ = [
    "AGE_BRACKET_MESSAGE",
    "AGE_MESSAGE",
    "BASE_SALARY_MESSAGE",
    "EMPLOYEE_ID_MESSAGE",
    "EmployeeValidationError",
    "GENDER_MESSAGE",
    "HIRE_YEAR_MESSAGE",
    "normalise_employee",
    "validate_employee",
]
