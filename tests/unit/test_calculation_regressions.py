"""Regression coverage ensuring calculator outputs stay stable."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from salaryadjust.backend.services import calculate_adjustment

_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "regression_scenarios.json"


@pytest.mark.parametrize(
    "scenario",
    json.loads(_DATA_PATH.read_text("utf-8")),
    ids=lambda item: item["name"],
)
def test_calculate_adjustment_matches_regression_scenario(scenario: dict[str, object]) -> None:
    """The calculation service returns the expected results for known payloads."""

    result = calculate_adjustment(scenario["payload"], scenario["current_year"])["result"]

    for key, value in scenario["expectations"].items():
        if isinstance(value, float):
            assert result[key] == pytest.approx(value)
        else:
            assert result[key] == value
