"""Domain rules for person payloads (field validation, date parsing)."""
from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

EMAIL_REQUIRED = "must complete the email field"
EMAIL_INVALID = "invalid email format"
BIRTH_DATE_REQUIRED = "must complete the birth date field"
BIRTH_DATE_NOT_PAST = "birth date must be earlier than the current date"
BIRTH_DATE_INVALID = "birth date is not a valid date"
DOCUMENT_NUMBER_REQUIRED = "must complete the document number field"

# Formatos aceitos alem do ISO 8601
DATE_FORMATS = ("%d/%m/%Y", "%d-%m-%Y", "%Y/%m/%d")


def _blank(value: Any) -> bool:
    return value is None or not str(value).strip()


def is_valid_email(value: str | None) -> bool:
    """Return True when value has valid email syntax (no DNS lookups; .test and dotless domains allowed)."""
    if _blank(value):
        return False
    try:
        validate_email(
            str(value).strip(),
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
        )
    except EmailNotValidError:
        return False
    return True


def parse_birth_date(value: str | None) -> Optional[datetime]:
    """Parse a birth date; returns None when the text is not a recognizable date."""
    if _blank(value):
        return None
    text = str(value).strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def _comparable_now(now: datetime | None, *, aware: bool) -> datetime:
    # naive datetimes are read as local time on both sides
    reference = now or datetime.now()
    if aware:
        return reference.astimezone()
    if reference.tzinfo is not None:
        return reference.astimezone().replace(tzinfo=None)
    return reference


def validate_person(payload: Mapping[str, Any], now: datetime | None = None) -> dict[str, list[str]]:
    """
    Run every rule against a payload keyed by JSON field names.

    Returns a mapping field -> messages; an empty mapping means valid.
    """
    errors: dict[str, list[str]] = {}

    def _add(field: str, message: str) -> None:
        errors.setdefault(field, []).append(message)

    email = payload.get("email")
    if _blank(email):
        _add("email", EMAIL_REQUIRED)
    # null skips the format rule; "" and whitespace fail both
    if email is not None and not is_valid_email(email):
        _add("email", EMAIL_INVALID)

    birth_date = payload.get("birthDate")
    if _blank(birth_date):
        _add("birthDate", BIRTH_DATE_REQUIRED)
    else:
        parsed = parse_birth_date(birth_date)
        if parsed is None:
            _add("birthDate", BIRTH_DATE_INVALID)
        elif not parsed < _comparable_now(now, aware=parsed.tzinfo is not None):
            _add("birthDate", BIRTH_DATE_NOT_PAST)

    if _blank(payload.get("documentNumber")):
        _add("documentNumber", DOCUMENT_NUMBER_REQUIRED)

    return errors
