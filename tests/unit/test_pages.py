"""Unit tests for the HTML page renderers."""

from __future__ import annotations

from decimal import Decimal

from salaryadjust.backend.models import ComputationResult, Gender, ValidatedEmployee
from salaryadjust.backend.services.pages import (
    EXAMPLE_QUERY,
    render_instructions,
    render_result,
    render_violations,
)


def _employee() -> ValidatedEmployee:
    return ValidatedEmployee(
        age=45,
        gender=Gender.MALE,
        base_salary=Decimal("5000"),
        hire_year=2000,
        employee_id=7,
    )


def test_instructions_include_example_url() -> None:
    html = render_instructions("http://localhost:3000/")

    assert f"http://localhost:3000/?{EXAMPLE_QUERY}".replace("&", "&amp;") in html
    assert "<code>base_salary</code>" in html


def test_result_page_describes_surcharge() -> None:
    result = ComputationResult(
        new_salary=Decimal("5415.00"),
        reajustement_percent=Decimal("8"),
        applied_amount=Decimal("15"),
        years_of_service=24,
        adjustment_kind="surcharge",
    )

    html = render_result(_employee(), result, currency="R$", tenure_threshold_years=10)

    assert "More than 10 years (surcharge of R$ 15.00)" in html
    assert "R$ 5000.00" in html
    assert "R$ 5415.00" in html
    assert "<td>8%</td>" in html
    assert "Male" in html


def test_result_page_describes_discount() -> None:
    result = ComputationResult(
        new_salary=Decimal("5395.00"),
        reajustement_percent=Decimal("8.5"),
        applied_amount=Decimal("-5"),
        years_of_service=3,
        adjustment_kind="discount",
    )

    html = render_result(_employee(), result, currency="R$", tenure_threshold_years=10)

    assert "Up to 10 years (discount of R$ 5.00)" in html
    assert "<td>8.5%</td>" in html


def test_violation_page_lists_and_escapes_messages() -> None:
    html = render_violations(["First problem.", "<b>Second</b> problem."])

    assert "<li>First problem.</li>" in html
    assert "&lt;b&gt;Second&lt;/b&gt;" in html
    assert "<b>Second</b>" not in html
