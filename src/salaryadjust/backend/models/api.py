"""Pydantic models describing the public API surface."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from salaryadjust.backend.config.schema import AgeBracket, Gender

__all__ = [
    "EmployeeInput",
    "EmployeeSummary",
    "ResultSummary",
    "ResponseMeta",
    "AdjustmentResponse",
    "INPUT_FIELDS",
]


INPUT_FIELDS = ("age", "gender", "base_salary", "hire_year", "employee_id")


class EmployeeInput(BaseModel):
    """Unvalidated employee fields as received from a query string or JSON body.

    Values are kept exactly as supplied (strings, numbers or ``None``); the
    input validator owns parsing. Besides the snake_case names, the camelCase
    spellings and the original Portuguese query parameters are accepted.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    age: Any = Field(default=None, validation_alias=AliasChoices("age", "idade"))
    gender: Any = Field(default=None, validation_alias=AliasChoices("gender", "sexo"))
    base_salary: Any = Field(
        default=None,
        validation_alias=AliasChoices("base_salary", "baseSalary", "salario_base"),
    )
    hire_year: Any = Field(
        default=None,
        validation_alias=AliasChoices("hire_year", "hireYear", "anoContratacao"),
    )
    employee_id: Any = Field(
        default=None,
        validation_alias=AliasChoices("employee_id", "employeeId", "matricula"),
    )

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when none of the employee fields were supplied."""

        return all(getattr(self, name) is None for name in INPUT_FIELDS)


class EmployeeSummary(BaseModel):
    """Validated employee data echoed back to clients."""

    model_config = ConfigDict(extra="forbid")

    employee_id: int
    age: float
    gender: Gender
    gender_label: str
    base_salary: float
    hire_year: int


class ResultSummary(BaseModel):
    """Computed adjustment figures."""

    model_config = ConfigDict(extra="forbid")

    age_bracket: AgeBracket
    new_salary: float
    reajustement_percent: float
    applied_amount: float
    adjustment_kind: Literal["discount", "surcharge"]
    years_of_service: int


class ResponseMeta(BaseModel):
    """Metadata returned alongside the adjustment output."""

    model_config = ConfigDict(extra="forbid")

    current_year: int
    currency: str
    tenure_threshold_years: int


class AdjustmentResponse(BaseModel):
    """Full response payload produced by the calculation service."""

    model_config = ConfigDict(extra="forbid")

    employee: EmployeeSummary
    result: ResultSummary
    meta: ResponseMeta
