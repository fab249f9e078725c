"""REST endpoints for salary adjustments and the rule table."""

from __future__ import annotations

from typing import Any

from flask import Blueprint, jsonify, request

from salaryadjust.backend.app.http import request_current_year
from salaryadjust.backend.config.rule_table import load_rule_table
from salaryadjust.backend.services import (
    calculate_adjustment,
    parse_adjustment_payload,
    parse_query_fields,
)

blueprint = Blueprint("adjustments", __name__, url_prefix="/api/v1")


@blueprint.get("/adjustments")
def read_adjustment() -> tuple[Any, int]:
    """Calculate an adjustment from query string parameters."""

    fields = parse_query_fields(request)
    result = calculate_adjustment(fields, request_current_year())

    return jsonify(result), 200


@blueprint.post("/adjustments")
def create_adjustment() -> tuple[Any, int]:
    """Calculate an adjustment using the submitted JSON payload."""

    fields = parse_adjustment_payload(request)
    result = calculate_adjustment(fields, request_current_year())

    return jsonify(result), 200


@blueprint.get("/rules")
def list_rules() -> tuple[Any, int]:
    """Expose the rule table so clients can display the applicable rates."""

    table = load_rule_table()
    rules = [
        {
            "age_bracket": bracket.value,
            "min_age": bracket.bounds[0],
            "max_age": bracket.bounds[1],
            "gender": gender.value,
            "reajustement_percent": float(rule.reajustement_percent),
            "discount_amount": float(rule.discount_amount),
            "surcharge_amount": float(rule.surcharge_amount),
        }
        for bracket, by_gender in table.rules.items()
        for gender, rule in by_gender.items()
    ]
    payload = {
        "currency": table.meta.currency,
        "tenure_threshold_years": table.meta.tenure_threshold_years,
        "rules": rules,
    }
    return jsonify(payload), 200
