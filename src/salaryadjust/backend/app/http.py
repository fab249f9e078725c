"""HTTP helper utilities shared across Flask blueprints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from flask import current_app, jsonify

from salaryadjust.backend.services.calculation_service import current_calendar_year


@dataclass(frozen=True)
class ProblemResponse:
    """Lightweight representation of an RFC 7807-style error payload."""

    error: str
    status: int
    message: str | None = None
    violations: Sequence[str] = ()
    extra: Mapping[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the serialisable payload for this problem response."""

        payload: dict[str, Any] = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        if self.violations:
            payload["violations"] = list(self.violations)
        if self.extra:
            payload.update(self.extra)
        return payload

    def to_response(self) -> tuple[Any, int]:
        """Convert the problem payload into a Flask response tuple."""

        return jsonify(self.as_dict()), self.status


def problem_response(
    error: str,
    *,
    status: int,
    message: str | None = None,
    violations: Sequence[str] = (),
    **extra: Any,
) -> ProblemResponse:
    """Convenience factory mirroring Flask's ``jsonify`` interface."""

    additional: Mapping[str, Any] | None = extra or None
    return ProblemResponse(
        error=error,
        status=status,
        message=message,
        violations=tuple(violations),
        extra=additional,
    )


def request_current_year() -> int:
    """Return the reference year for the active request.

    ``CURRENT_YEAR`` in the application config pins the year (used by tests and
    reproducible deployments); otherwise the calendar year is read once here.
    """

    configured = current_app.config.get("CURRENT_YEAR")
    if configured is not None:
        return int(configured)
    return current_calendar_year()


__all__ = ["ProblemResponse", "problem_response", "request_current_year"]
