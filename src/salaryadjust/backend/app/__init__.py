"""Application factory for SalaryAdjust backend services."""

from __future__ import annotations

import logging
import os
from warnings import warn

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import BadRequest

from salaryadjust.backend.config.rule_table import load_rule_table
from salaryadjust.backend.services import EmployeeValidationError
from salaryadjust.backend.version import get_project_version

from .http import problem_response, request_current_year
from .routes import register_routes

logger = logging.getLogger(__name__)

ALLOWED_ORIGINS_ENV = "SALARYADJUST_ALLOWED_ORIGINS"
CURRENT_YEAR_ENV = "SALARYADJUST_CURRENT_YEAR"


def _parse_allowed_origins(raw: str | None) -> set[str]:
    """Convert an environment variable into a normalised set of origins."""

    if not raw:
        return set()

    return {origin.strip() for origin in raw.split(",") if origin.strip()}


def parse_positive_int(value: str | None, *, env: str) -> int | None:
    """Return ``value`` as a positive integer, logging and ignoring bad input."""

    if value is None or not value.strip():
        return None
    try:
        parsed = int(value)
    except ValueError:
        logger.warning("Ignoring invalid value for %s: %s", env, value)
        return None
    if parsed <= 0:
        logger.warning("Ignoring non-positive value for %s: %s", env, value)
        return None
    return parsed


def create_app() -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__)

    # Fail at startup rather than on the first request when the table is broken.
    rule_table = load_rule_table()

    app.config["CURRENT_YEAR"] = parse_positive_int(
        os.getenv(CURRENT_YEAR_ENV), env=CURRENT_YEAR_ENV
    )

    allowed_origins = _parse_allowed_origins(os.getenv(ALLOWED_ORIGINS_ENV))
    if not allowed_origins:
        warn(
            "No allowed origins configured; cross-origin requests will be rejected.",
            stacklevel=1,
        )

    CORS(
        app,
        resources={r"/api/*": {"origins": sorted(allowed_origins)}},
        supports_credentials=False,
        methods=["GET", "OPTIONS", "POST"],
        allow_headers=["Content-Type"],
    )

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "current_year": request_current_year(),
            "currency": rule_table.meta.currency,
        }
        return jsonify(payload)

    @app.errorhandler(EmployeeValidationError)
    def handle_employee_validation_error(error: EmployeeValidationError):
        """Return every violated rule so clients can fix all fields at once."""

        return problem_response(
            "validation_error",
            status=400,
            message="Employee data is invalid",
            violations=error.violations,
        ).to_response()

    @app.errorhandler(BadRequest)
    def handle_bad_request(error: BadRequest):
        """Return consistent JSON responses for malformed payloads."""

        message = error.description or "Invalid request"
        return problem_response("bad_request", status=400, message=message).to_response()

    return app
