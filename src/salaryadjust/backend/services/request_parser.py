"""Helpers for normalising incoming adjustment requests."""

from __future__ import annotations

from collections.abc import Mapping

from flask import Request
from werkzeug.exceptions import BadRequest

from salaryadjust.backend.models import EmployeeInput


def parse_query_fields(req: Request) -> EmployeeInput:
    """Collect employee fields from the query string of ``req``.

    Repeated parameters keep their first value.
    """

    return EmployeeInput.model_validate(req.args.to_dict(flat=True))


def parse_adjustment_payload(req: Request) -> EmployeeInput:
    """Extract employee fields from a JSON body on ``req``."""

    data = req.get_json(silent=True)
    if data is None:
        raise BadRequest("Request body must be valid JSON")
    if not isinstance(data, Mapping):
        raise BadRequest("Request JSON must be an object")

    return EmployeeInput.model_validate(dict(data))
