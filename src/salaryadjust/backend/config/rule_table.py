"""Configuration loader for the salary adjustment rule table."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .schema import (
    AdjustmentRule,
    AgeBracket,
    BRACKET_BOUNDS,
    ConfigurationError,
    Gender,
    RULE_BRACKETS,
    RuleTable,
    RuleTableMeta,
)

CONFIG_DIRECTORY = Path(__file__).resolve().parent / "data"
RULES_FILE = CONFIG_DIRECTORY / "rules.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must define a mapping at the top level")
    return data


def parse_rule_table(raw: dict[str, Any]) -> RuleTable:
    """Validate ``raw`` YAML content into an immutable :class:`RuleTable`."""

    try:
        return RuleTable.model_validate(raw)
    except ValidationError as error:
        raise ConfigurationError(f"Rule table validation failed: {error}") from error


def read_rule_table(path: Path) -> RuleTable:
    """Load the rule table stored at ``path`` without caching."""

    if not path.exists():
        raise FileNotFoundError(f"Rule table not found: {path}")
    return parse_rule_table(_load_yaml(path))


@lru_cache(maxsize=1)
def load_rule_table() -> RuleTable:
    """Load and cache the configured rule table."""

    return read_rule_table(RULES_FILE)


def lookup(bracket: AgeBracket, gender: Gender | str) -> AdjustmentRule:
    """Return the adjustment rule for ``bracket`` and ``gender``.

    ``bracket`` must be one of the three valid brackets; asking for
    :attr:`AgeBracket.INVALID` raises :class:`LookupError`.
    """

    return load_rule_table().rule_for(bracket, Gender(gender))


__all__ = [
    "AdjustmentRule",
    "AgeBracket",
    "BRACKET_BOUNDS",
    "CONFIG_DIRECTORY",
    "ConfigurationError",
    "Gender",
    "RULES_FILE",
    "RULE_BRACKETS",
    "RuleTable",
    "RuleTableMeta",
    "load_rule_table",
    "lookup",
    "parse_rule_table",
    "read_rule_table",
]
