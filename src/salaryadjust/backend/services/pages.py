"""HTML renderers for the query-string driven pages."""

from __future__ import annotations

from html import escape
from typing import Sequence

from salaryadjust.backend.models import ComputationResult, ValidatedEmployee

from .calculators import format_currency, format_percentage

EXAMPLE_QUERY = "age=18&gender=F&base_salary=1700&hire_year=2014&employee_id=12345"

_BASE_STYLE = """
      body { font-family: Arial, sans-serif; max-width: 600px; margin: 40px auto; padding: 20px; background: #f5f5f5; }
      h1 { color: #333; }
      p, ul { line-height: 1.6; color: #555; }
      code { background: #e0e0e0; padding: 2px 6px; border-radius: 4px; font-size: 14px; }
      table { width: 100%; border-collapse: collapse; background: #fff; }
      th, td { padding: 12px; text-align: left; border-bottom: 1px solid #eee; }
      th { background: #4472c4; color: #fff; }
      .highlight { background: #e2efda; font-weight: bold; color: #2e7d32; }
      .example-url { word-break: break-all; background: #fff; padding: 12px; border: 1px solid #ddd; }
      .warning { background: #ffebee; border: 1px solid #ef9a9a; padding: 16px; color: #b71c1c; }
      .back { display: inline-block; margin-top: 20px; color: #4472c4; }
"""


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{escape(title)}</title>
    <style>{_BASE_STYLE}    </style>
  </head>
  <body>
{body}
  </body>
</html>
"""


def render_instructions(base_url: str) -> str:
    """Return the usage page shown when no employee fields were supplied."""

    example_url = f"{base_url}?{EXAMPLE_QUERY}"
    body = f"""    <h1>Salary Adjustment</h1>
    <p>Calculates an employee's adjusted salary from age, gender, base salary and years of service.</p>
    <p><strong>How to use:</strong> pass the employee data as query string parameters:</p>
    <ul>
      <li><code>age</code> &ndash; employee age (greater than 16)</li>
      <li><code>gender</code> &ndash; M (male) or F (female)</li>
      <li><code>base_salary</code> &ndash; base salary (real number)</li>
      <li><code>hire_year</code> &ndash; hire year (integer greater than 1960)</li>
      <li><code>employee_id</code> &ndash; employee ID (integer greater than zero)</li>
    </ul>
    <p><strong>Example URL:</strong></p>
    <div class="example-url"><a href="{escape(example_url)}">{escape(example_url)}</a></div>"""
    return _page("Salary Adjustment - Instructions", body)


def _tenure_description(result: ComputationResult, currency: str, threshold: int) -> str:
    amount = format_currency(abs(result.applied_amount))
    if result.is_discount:
        return f"Up to {threshold} years (discount of {currency} {amount})"
    return f"More than {threshold} years (surcharge of {currency} {amount})"


def render_result(
    employee: ValidatedEmployee,
    result: ComputationResult,
    *,
    currency: str,
    tenure_threshold_years: int,
) -> str:
    """Return the page describing a successful adjustment."""

    tenure = _tenure_description(result, currency, tenure_threshold_years)
    rows = [
        ("Employee ID", str(employee.employee_id)),
        ("Age", f"{employee.age:f} years"),
        ("Gender", employee.gender.label),
        ("Base salary", f"{currency} {format_currency(employee.base_salary)}"),
        ("Hire year", str(employee.hire_year)),
        ("Years of service", f"{result.years_of_service} years ({tenure})"),
        ("Reajustment applied", format_percentage(result.reajustement_percent)),
    ]
    rows_html = "\n".join(
        f"      <tr><td>{escape(label)}</td><td>{escape(value)}</td></tr>" for label, value in rows
    )
    new_salary = escape(f"{currency} {format_currency(result.new_salary)}")

    body = f"""    <h1>Employee Details</h1>
    <table>
      <tr><th>Field</th><th>Value</th></tr>
{rows_html}
      <tr class="highlight"><td>New salary</td><td>{new_salary}</td></tr>
    </table>
    <a class="back" href="/">Calculate another adjustment</a>"""
    return _page("Result - Salary Adjustment", body)


def render_violations(violations: Sequence[str]) -> str:
    """Return the page listing every validation failure."""

    items = "".join(f"<li>{escape(message)}</li>" for message in violations)
    body = f"""    <h1>Unable to calculate the adjustment</h1>
    <p class="warning">The submitted data is invalid. Correct the items below and try again:</p>
    <ul>{items}</ul>
    <a class="back" href="/">Back to instructions</a>"""
    return _page("Invalid data", body)


__all__ = ["EXAMPLE_QUERY", "render_instructions", "render_result", "render_violations"]
