"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from salaryadjust.backend.app import create_app  # noqa: E402

REFERENCE_YEAR = 2024


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application pinned to a known reference year."""

    application = create_app()
    application.config.update(TESTING=True, CURRENT_YEAR=REFERENCE_YEAR)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def valid_fields() -> dict[str, str]:
    """Raw query-string style fields that pass every validation rule."""

    return {
        "age": "18",
        "gender": "F",
        "base_salary": "1700",
        "hire_year": "2014",
        "employee_id": "12345",
    }
