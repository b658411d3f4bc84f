"""
Validation-problem responses (RFC 9457 style body with per-field messages).
"""

from __future__ import annotations

from typing import Iterable, Mapping

from fastapi.responses import JSONResponse

VALIDATION_PROBLEM_TYPE = "https://tools.ietf.org/html/rfc9110#section-15.5.1"
VALIDATION_PROBLEM_TITLE = "One or more validation errors occurred."


def validation_problem(errors: Mapping[str, Iterable[str]], status_code: int = 400) -> JSONResponse:
    return JSONResponse(
        {
            "type": VALIDATION_PROBLEM_TYPE,
            "title": VALIDATION_PROBLEM_TITLE,
            "status": status_code,
            "errors": {field: list(messages) for field, messages in errors.items()},
        },
        status_code=status_code,
        media_type="application/problem+json",
    )


def errors_from_request_validation(details: Iterable[dict]) -> dict[str, list[str]]:
    """Group FastAPI/pydantic error entries by their last named location segment."""
    errors: dict[str, list[str]] = {}
    for item in details:
        # loc vem como ("body", <offset>) para JSON invalido, ("path", "person_id") etc.
        loc = [part for part in item.get("loc", ()) if isinstance(part, str) and part != "body"]
        field = loc[-1] if loc else "body"
        errors.setdefault(field, []).append(item.get("msg", "invalid value"))
    return errors
