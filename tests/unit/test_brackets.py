"""Unit tests for age bracket classification."""

from __future__ import annotations

from decimal import Decimal

import pytest

from salaryadjust.backend.config.schema import AgeBracket
from salaryadjust.backend.services.calculators import classify


@pytest.mark.parametrize(
    ("age", "expected"),
    [
        (17, AgeBracket.INVALID),
        (18, AgeBracket.YOUNG_ADULT),
        (39, AgeBracket.YOUNG_ADULT),
        (40, AgeBracket.MID_CAREER),
        (69, AgeBracket.MID_CAREER),
        (70, AgeBracket.SENIOR),
        (99, AgeBracket.SENIOR),
        (100, AgeBracket.INVALID),
    ],
)
def test_classify_bracket_boundaries(age: int, expected: AgeBracket) -> None:
    assert classify(age) is expected


def test_classify_covers_every_valid_age() -> None:
    for age in range(18, 100):
        assert classify(age) is not AgeBracket.INVALID


@pytest.mark.parametrize("age", [-5, 0, 16, 17, 100, 150])
def test_classify_rejects_ages_outside_range(age: int) -> None:
    assert classify(age) is AgeBracket.INVALID


@pytest.mark.parametrize("age", ["17.9", "39.5", "69.5", "99.5", "100.0"])
def test_classify_rejects_fractional_ages_between_brackets(age: str) -> None:
    assert classify(Decimal(age)) is AgeBracket.INVALID


@pytest.mark.parametrize(
    ("age", "expected"),
    [
        ("18.0", AgeBracket.YOUNG_ADULT),
        ("25.5", AgeBracket.YOUNG_ADULT),
        ("38.99", AgeBracket.YOUNG_ADULT),
        ("40.5", AgeBracket.MID_CAREER),
        ("98.5", AgeBracket.SENIOR),
        ("99.0", AgeBracket.SENIOR),
    ],
)
def test_classify_accepts_fractional_ages_inside_a_bracket(
    age: str, expected: AgeBracket
) -> None:
    assert classify(Decimal(age)) is expected


def test_bracket_bounds_are_exposed_on_enum() -> None:
    assert AgeBracket.MID_CAREER.bounds == (40, 69)
    assert AgeBracket.INVALID.bounds is None
