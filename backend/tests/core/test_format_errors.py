"""Validation Error Formatting - pydantic error dicts to one description."""

from app.core.format_errors import (
    describe_error, describe_validation_errors, field_name,
)


def test_field_name_strips_body_prefix():
    assert field_name(("body", "name")) == "name"


def test_field_name_keeps_nested_path():
    assert field_name(("body", "address", 0, "city")) == "address.0.city"


def test_field_name_of_bare_body():
    assert field_name(("body",)) == "body"


def test_missing_field_reads_required():
    assert describe_error({"type": "missing", "loc": ("body", "name"), "msg": "Field required"}) == "name is required"


def test_value_error_uses_validator_message():
    error = {
        "type": "value_error",
        "loc": ("body", "email"),
        "msg": "Value error, email is invalid",
        "ctx": {"error": ValueError("email is invalid")},
    }
    assert describe_error(error) == "email is invalid"


def test_json_error_reads_invalid_json():
    error = {
        "type": "json_invalid",
        "loc": ("body", 9),
        "msg": "JSON decode error",
        "ctx": {"error": "Expecting value"},
    }
    assert describe_error(error) == "invalid JSON: Expecting value"


def test_other_errors_prefix_field():
    error = {"type": "string_type", "loc": ("body", "name"), "msg": "Input should be a valid string"}
    assert describe_error(error) == "name: Input should be a valid string"


def test_multiple_errors_joined_in_order():
    errors = [
        {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
        {"type": "string_too_long", "loc": ("body", "email"), "msg": "too long"},
    ]
    assert describe_validation_errors(errors) == "name is required; email: too long"


def test_empty_error_list():
    assert describe_validation_errors([]) == "invalid request"
