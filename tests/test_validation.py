"""
Tests for the validation engine and the login/signup schemas.
"""

import pytest

from categorydesk.models import LoginDraft, RegistrationDraft
from categorydesk.validation import (
    LOGIN_SCHEMA,
    REGISTRATION_SCHEMA,
    ValidationErrors,
    ValidationSchema,
    matches,
    min_length,
    required,
    resolve_path,
)

from conftest import registration_draft


def registration(**overrides):
    return registration_draft(**overrides).to_payload()


def test_valid_registration_has_no_errors():
    errors = REGISTRATION_SCHEMA.validate(registration())
    assert not errors
    assert len(errors) == 0


def test_empty_registration_reports_every_field():
    errors = REGISTRATION_SCHEMA.validate(RegistrationDraft().to_payload())

    assert set(errors) == {
        "fullName", "email", "dateOfBirth",
        "address.street", "address.city", "address.state", "address.zipCode",
        "password",
    }
    assert errors["address.zipCode"] == "Post Code is required"
    assert errors["address.street"] == "Address is required"


def test_required_failure_stops_the_field_chain():
    errors = REGISTRATION_SCHEMA.validate(registration(password=""))
    assert errors.all("password") == ["Password is required"]


def test_weak_password_reports_each_missing_class():
    errors = REGISTRATION_SCHEMA.validate(registration(password="abc"))

    assert errors.fields() == ["password"]
    assert errors.all("password") == [
        "Password must be at least 8 characters long",
        "Password must contain at least one uppercase letter",
        "Password must contain at least one number",
        "Password must contain at least one special character",
    ]
    # Inline message is the first failure
    assert errors["password"] == "Password must be at least 8 characters long"


@pytest.mark.parametrize("password, message", [
    ("lowercase1!", "Password must contain at least one uppercase letter"),
    ("UPPERCASE1!", "Password must contain at least one lowercase letter"),
    ("NoDigits!!", "Password must contain at least one number"),
    ("NoSymbol12", "Password must contain at least one special character"),
    ("Sh0rt!", "Password must be at least 8 characters long"),
])
def test_password_rules_individually(password, message):
    assert REGISTRATION_SCHEMA.validate(registration(password=password)).all("password") == [message]


@pytest.mark.parametrize("symbol", list('!@#$%^&*(),.?":{}|<>'))
def test_every_listed_symbol_satisfies_symbol_rule(symbol):
    assert not REGISTRATION_SCHEMA.validate(registration(password=f"Abcdefg1{symbol}"))


def test_symbol_outside_the_set_does_not_count():
    errors = REGISTRATION_SCHEMA.validate(registration(password="Abcdefg1_"))
    assert errors.all("password") == ["Password must contain at least one special character"]


@pytest.mark.parametrize("email", ["jane@example.com", "j.doe-1@mail.example.org", "a_b@x.io"])
def test_accepts_well_formed_emails(email):
    assert "email" not in LOGIN_SCHEMA.validate({"email": email, "password": "x"})


@pytest.mark.parametrize("email", ["jane", "jane@", "@example.com", "jane@example", "jane@example.c",
                                   "jane@example.toolong", "jane doe@example.com"])
def test_rejects_malformed_emails(email):
    errors = LOGIN_SCHEMA.validate({"email": email, "password": "x"})
    assert errors.all("email") == ["Invalid email format"]


def test_login_schema_only_requires_password():
    errors = LOGIN_SCHEMA.validate(LoginDraft("jane@example.com", "a").to_payload())
    assert not errors

    errors = LOGIN_SCHEMA.validate(LoginDraft("", "").to_payload())
    assert errors == {"email": "Email is required", "password": "Password is required"}


@pytest.mark.parametrize("value", ["2023-02-30", "12/04/1990", "yesterday", "1990-13-01",
                                   "19900412", "1990-W15-4", "1990-4-1"])
def test_date_of_birth_must_parse(value):
    errors = REGISTRATION_SCHEMA.validate(registration(date_of_birth=value))
    assert errors.all("dateOfBirth") == ["Date of Birth must be a valid date"]


def test_whitespace_only_counts_as_missing():
    errors = REGISTRATION_SCHEMA.validate(registration(full_name="   "))
    assert errors["fullName"] == "Full Name is required"


def test_resolve_path_handles_nesting_and_missing_segments():
    values = {"address": {"city": "Springfield"}}
    assert resolve_path(values, "address.city") == "Springfield"
    assert resolve_path(values, "address.street") is None
    assert resolve_path(values, "missing.city") is None


def test_schema_evaluates_all_fields_and_keeps_rule_order():
    schema = ValidationSchema({
        "code": [required("code required"), min_length(4, "too short"), matches(r"\d+", "digits only")],
        "label": [required("label required")],
    })

    errors = schema.validate({"code": "ab", "label": ""})

    assert errors.all("code") == ["too short", "digits only"]
    assert errors.all("label") == ["label required"]
    assert errors.messages() == ["too short", "digits only", "label required"]


def test_empty_error_set_is_falsy():
    assert not ValidationErrors()
    assert not ValidationErrors({"x": []})


def test_non_ascii_digit_does_not_count_as_number():
    errors = REGISTRATION_SCHEMA.validate(registration(password="Abcdefg٣!"))
    assert errors.all("password") == ["Password must contain at least one number"]


def test_non_ascii_letters_rejected_in_email():
    errors = LOGIN_SCHEMA.validate({"email": "jürgen@example.com", "password": "x"})
    assert errors.all("email") == ["Invalid email format"]
