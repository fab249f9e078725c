"""Pydantic models describing the salary adjustment rule table."""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)


class Gender(str, Enum):
    """Genders recognised by the rule table."""

    MALE = "M"
    FEMALE = "F"

    @property
    def label(self) -> str:
        return "Male" if self is Gender.MALE else "Female"


class AgeBracket(str, Enum):
    """Age ranges used to select an adjustment rule."""

    YOUNG_ADULT = "young_adult"
    MID_CAREER = "mid_career"
    SENIOR = "senior"
    INVALID = "invalid"

    @property
    def bounds(self) -> tuple[int, int] | None:
        """Return the inclusive ``(lower, upper)`` ages, or ``None`` for INVALID."""

        return BRACKET_BOUNDS.get(self)


BRACKET_BOUNDS: Mapping[AgeBracket, tuple[int, int]] = MappingProxyType(
    {
        AgeBracket.YOUNG_ADULT: (18, 39),
        AgeBracket.MID_CAREER: (40, 69),
        AgeBracket.SENIOR: (70, 99),
    }
)

RULE_BRACKETS: tuple[AgeBracket, ...] = tuple(BRACKET_BOUNDS)


class AdjustmentRule(ImmutableModel):
    """Percentage reajustment plus the flat amounts applied around tenure."""

    reajustement_percent: Decimal
    discount_amount: Decimal
    surcharge_amount: Decimal

    @model_validator(mode="after")
    def _validate_values(self) -> Self:
        if self.reajustement_percent < 0:
            raise ConfigurationError("Reajustement percentages must be non-negative")
        if self.discount_amount < 0 or self.surcharge_amount < 0:
            raise ConfigurationError(
                "Discount and surcharge amounts are magnitudes and must be non-negative"
            )
        return self


class RuleTableMeta(ImmutableModel):
    """Presentation and threshold settings shared by every rule."""

    currency: str = "R$"
    tenure_threshold_years: int = Field(default=10, ge=0)


class RuleTable(ImmutableModel):
    """Complete bracket x gender rule table.

    Validation guarantees one rule for every combination of a valid bracket and
    a gender, so lookups against a loaded table can never miss.
    """

    meta: RuleTableMeta = Field(default_factory=RuleTableMeta)
    rules: Mapping[AgeBracket, Mapping[Gender, AdjustmentRule]]

    @field_validator("rules", mode="before")
    @classmethod
    def _require_mapping(cls, value: Any) -> Any:
        if not isinstance(value, Mapping):
            raise ConfigurationError("Rule table requires a mapping of brackets")
        return value

    @model_validator(mode="after")
    def _validate_completeness(self) -> Self:
        if AgeBracket.INVALID in self.rules:
            raise ConfigurationError("The invalid bracket cannot carry a rule")

        missing: list[str] = []
        for bracket in RULE_BRACKETS:
            by_gender = self.rules.get(bracket, {})
            for gender in Gender:
                if gender not in by_gender:
                    missing.append(f"{bracket.value}.{gender.value}")
        if missing:
            raise ConfigurationError(
                f"Rule table is missing entries for: {', '.join(missing)}"
            )

        frozen = MappingProxyType(
            {
                bracket: MappingProxyType(
                    {gender: self.rules[bracket][gender] for gender in Gender}
                )
                for bracket in RULE_BRACKETS
            }
        )
        object.__setattr__(self, "rules", frozen)
        return self

    def rule_for(self, bracket: AgeBracket, gender: Gender) -> AdjustmentRule:
        """Return the rule for ``bracket`` and ``gender``."""

        if bracket is AgeBracket.INVALID:
            raise LookupError("No adjustment rule exists for an invalid age bracket")
        return self.rules[bracket][Gender(gender)]


__all__ = [
    "AdjustmentRule",
    "AgeBracket",
    "BRACKET_BOUNDS",
    "ConfigurationError",
    "Gender",
    "ImmutableModel",
    "RULE_BRACKETS",
    "RuleTable",
    "RuleTableMeta",
]
