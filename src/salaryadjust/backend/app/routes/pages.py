"""Server-rendered pages driven by query string parameters."""

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, request

from salaryadjust.backend.app.http import request_current_year
from salaryadjust.backend.config.rule_table import load_rule_table
from salaryadjust.backend.services import (
    EmployeeValidationError,
    evaluate_adjustment,
    parse_query_fields,
)
from salaryadjust.backend.services.pages import (
    render_instructions,
    render_result,
    render_violations,
)

blueprint = Blueprint("pages", __name__)

_HTML_MIMETYPE = "text/html"


@blueprint.get("/")
def adjustment_page() -> Response:
    """Show usage instructions, a validation report or the adjustment result."""

    fields = parse_query_fields(request)
    if fields.is_empty:
        return Response(render_instructions(request.base_url), mimetype=_HTML_MIMETYPE)

    try:
        employee, result = evaluate_adjustment(fields, request_current_year())
    except EmployeeValidationError as error:
        return Response(
            render_violations(error.violations),
            HTTPStatus.BAD_REQUEST,
            mimetype=_HTML_MIMETYPE,
        )

    meta = load_rule_table().meta
    html = render_result(
        employee,
        result,
        currency=meta.currency,
        tenure_threshold_years=meta.tenure_threshold_years,
    )
    return Response(html, mimetype=_HTML_MIMETYPE)
