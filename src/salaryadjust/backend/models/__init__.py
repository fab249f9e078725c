"""Typed models shared by the validation, calculation and HTTP layers.

Raw request data enters as :class:`EmployeeInput`, which carries no guarantees
at all. Only the input validator produces :class:`ValidatedEmployee`, and the
calculator accepts nothing else, so an unchecked payload cannot reach the
arithmetic. Derived results are lightweight frozen dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from salaryadjust.backend.config.schema import AgeBracket, Gender

from .api import (
    INPUT_FIELDS,
    AdjustmentResponse,
    EmployeeInput,
    EmployeeSummary,
    ResponseMeta,
    ResultSummary,
)

__all__ = [
    "AdjustmentKind",
    "AdjustmentResponse",
    "AgeBracket",
    "ComputationResult",
    "EmployeeInput",
    "EmployeeSummary",
    "Gender",
    "INPUT_FIELDS",
    "ResponseMeta",
    "ResultSummary",
    "ValidatedEmployee",
]

AdjustmentKind = Literal["discount", "surcharge"]


class ValidatedEmployee(BaseModel):
    """Employee fields that passed every validation rule."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    age: Decimal = Field(ge=18, le=99)
    gender: Gender
    base_salary: Decimal = Field(ge=0)
    hire_year: int = Field(gt=1960)
    employee_id: int = Field(gt=0)


@dataclass(frozen=True)
class ComputationResult:
    """Outcome of a single salary adjustment."""

    new_salary: Decimal
    reajustement_percent: Decimal
    applied_amount: Decimal
    years_of_service: int
    adjustment_kind: AdjustmentKind

    @property
    def is_discount(self) -> bool:
        return self.adjustment_kind == "discount"
