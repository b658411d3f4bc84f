from __future__ import annotations

from datetime import datetime, timedelta, timezone

from personas_api.domain import persons
from personas_api.domain.persons import parse_birth_date, validate_person

NOW = datetime(2024, 6, 15, 12, 0, 0)


def _payload(**overrides):
    data = {
        "fullName": "Ana Perez",
        "documentNumber": "12345678",
        "email": "ana.perez@mail.com",
        "phone": "0981 000 000",
        "birthDate": "1990-05-01",
    }
    data.update(overrides)
    return data


def test_valid_payload_has_no_errors():
    assert validate_person(_payload(), now=NOW) == {}


def test_optional_fields_may_be_missing():
    assert validate_person(_payload(fullName=None, phone=None), now=NOW) == {}


def test_empty_payload_collects_every_required_message():
    errors = validate_person({}, now=NOW)

    assert errors == {
        "email": [persons.EMAIL_REQUIRED],
        "birthDate": [persons.BIRTH_DATE_REQUIRED],
        "documentNumber": [persons.DOCUMENT_NUMBER_REQUIRED],
    }


def test_whitespace_counts_as_empty():
    errors = validate_person(_payload(documentNumber="   ", email=" "), now=NOW)

    assert errors["documentNumber"] == [persons.DOCUMENT_NUMBER_REQUIRED]
    assert errors["email"] == [persons.EMAIL_REQUIRED, persons.EMAIL_INVALID]


def test_empty_email_reports_required_and_format_messages():
    errors = validate_person(_payload(email=""), now=NOW)

    assert errors == {"email": [persons.EMAIL_REQUIRED, persons.EMAIL_INVALID]}


def test_missing_email_reports_only_required_message():
    assert validate_person(_payload(email=None), now=NOW) == {"email": [persons.EMAIL_REQUIRED]}


def test_test_and_intranet_domains_are_syntactically_valid():
    for good in ("ana@mail.test", "ana@test", "ana@intranet"):
        assert validate_person(_payload(email=good), now=NOW) == {}


def test_invalid_email_format():
    for bad in ("not-an-email", "ana@", "@mail.com", "ana perez@mail.com"):
        assert validate_person(_payload(email=bad), now=NOW) == {"email": [persons.EMAIL_INVALID]}


def test_future_and_current_birth_dates_are_rejected():
    future = validate_person(_payload(birthDate="2030-01-01"), now=NOW)
    same_instant = validate_person(_payload(birthDate=NOW.isoformat()), now=NOW)

    assert future == {"birthDate": [persons.BIRTH_DATE_NOT_PAST]}
    assert same_instant == {"birthDate": [persons.BIRTH_DATE_NOT_PAST]}


def test_unparseable_birth_date_is_a_validation_error():
    errors = validate_person(_payload(birthDate="yesterday"), now=NOW)

    assert errors == {"birthDate": [persons.BIRTH_DATE_INVALID]}


def test_failures_in_several_fields_are_reported_together():
    errors = validate_person(_payload(email="bad", birthDate="2999-01-01", documentNumber=""), now=NOW)

    assert set(errors) == {"email", "birthDate", "documentNumber"}


def test_parse_birth_date_formats():
    assert parse_birth_date("1990-05-01") == datetime(1990, 5, 1)
    assert parse_birth_date("01/05/1990") == datetime(1990, 5, 1)
    assert parse_birth_date("01-05-1990") == datetime(1990, 5, 1)
    assert parse_birth_date("1990/05/01") == datetime(1990, 5, 1)
    assert parse_birth_date("1990-05-01T08:30:00") == datetime(1990, 5, 1, 8, 30)
    assert parse_birth_date("31/02/1990") is None
    assert parse_birth_date("") is None
    assert parse_birth_date(None) is None


def test_timezone_aware_birth_date_compares_with_aware_now():
    aware_now = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)
    past = (aware_now - timedelta(days=1)).isoformat()
    future = (aware_now + timedelta(days=1)).isoformat()

    assert validate_person(_payload(birthDate=past), now=aware_now) == {}
    assert validate_person(_payload(birthDate=future), now=aware_now) == {"birthDate": [persons.BIRTH_DATE_NOT_PAST]}
