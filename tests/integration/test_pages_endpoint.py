"""Integration tests for the query-string driven HTML pages."""

from http import HTTPStatus

import pytest
from flask.testing import FlaskClient

from salaryadjust.backend.services.validation import (
    AGE_BRACKET_MESSAGE,
    AGE_MESSAGE,
    GENDER_MESSAGE,
)


def test_root_without_parameters_shows_instructions(client: FlaskClient) -> None:
    response = client.get("/")

    assert response.status_code == HTTPStatus.OK
    assert "text/html" in (response.content_type or "").lower()
    assert b"How to use" in response.data
    assert b"base_salary=1700" in response.data


def test_root_with_valid_parameters_shows_result(
    client: FlaskClient, valid_fields: dict[str, str]
) -> None:
    response = client.get("/", query_string=valid_fields)

    assert response.status_code == HTTPStatus.OK
    body = response.get_data(as_text=True)
    assert "R$ 1825.00" in body
    assert "Up to 10 years (discount of R$ 11.00)" in body
    assert "Female" in body


def test_root_accepts_original_parameter_names(client: FlaskClient) -> None:
    response = client.get(
        "/?idade=45&sexo=M&salario_base=5000&anoContratacao=2000&matricula=7"
    )

    assert response.status_code == HTTPStatus.OK
    body = response.get_data(as_text=True)
    assert "R$ 5415.00" in body
    assert "More than 10 years (surcharge of R$ 15.00)" in body


def test_root_with_invalid_parameters_lists_violations(client: FlaskClient) -> None:
    response = client.get("/?age=15&gender=x")

    assert response.status_code == HTTPStatus.BAD_REQUEST
    body = response.get_data(as_text=True)
    assert body.index(AGE_MESSAGE) < body.index(GENDER_MESSAGE)
    assert "R$" not in body


@pytest.mark.parametrize("age", ["17", "39.5", "99.5"])
def test_root_reports_age_outside_brackets(
    client: FlaskClient, valid_fields: dict[str, str], age: str
) -> None:
    valid_fields["age"] = age

    response = client.get("/", query_string=valid_fields)

    assert response.status_code == HTTPStatus.BAD_REQUEST
    body = response.get_data(as_text=True)
    assert AGE_BRACKET_MESSAGE in body
    assert "R$" not in body


def test_root_shows_fractional_age_unchanged(
    client: FlaskClient, valid_fields: dict[str, str]
) -> None:
    valid_fields["age"] = "25.5"

    response = client.get("/", query_string=valid_fields)

    assert response.status_code == HTTPStatus.OK
    assert "25.5 years" in response.get_data(as_text=True)
