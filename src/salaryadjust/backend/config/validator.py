"""Utilities for validating the rule table and surfacing issues."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Sequence

from .rule_table import (
    RULES_FILE,
    AdjustmentRule,
    ConfigurationError,
    RuleTable,
    read_rule_table,
)

_MAX_PERCENT = 100


def _format_scope(scope: str, message: str) -> str:
    return f"{scope}: {message}"


def _validate_rule(scope: str, rule: AdjustmentRule) -> list[str]:
    errors: list[str] = []

    if rule.reajustement_percent > _MAX_PERCENT:
        errors.append(
            _format_scope(
                scope,
                f"reajustement percent should be between 0 and {_MAX_PERCENT}",
            )
        )

    if rule.discount_amount == 0 and rule.surcharge_amount == 0:
        errors.append(
            _format_scope(scope, "tenure has no effect (discount and surcharge are both zero)")
        )

    return errors


def validate_rule_table(table: RuleTable) -> list[str]:
    """Return a list of human-readable issues found in ``table``."""

    errors: list[str] = []

    if not table.meta.currency.strip():
        errors.append(_format_scope("meta", "currency label must not be blank"))
    if table.meta.tenure_threshold_years == 0:
        errors.append(
            _format_scope("meta", "tenure threshold of zero disables the discount branch")
        )

    for bracket, by_gender in table.rules.items():
        for gender, rule in by_gender.items():
            errors.extend(_validate_rule(f"rules.{bracket.value}.{gender.value}", rule))

    return errors


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the salary adjustment rule table and report issues."
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Rule table files to validate (defaults to the bundled table)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for running validations from the command line."""

    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    paths = args.paths or [RULES_FILE]

    exit_code = 0

    for path in paths:
        try:
            table = read_rule_table(path)
        except (FileNotFoundError, ConfigurationError) as error:
            print(f"[{path.name}] failed to load rule table: {error}")
            exit_code = 1
            continue

        issues = validate_rule_table(table)
        if issues:
            exit_code = 1
            print(f"[{path.name}] {len(issues)} issue(s) detected:")
            for issue in issues:
                print(f"  - {issue}")
        else:
            print(f"[{path.name}] OK")

    return exit_code


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
