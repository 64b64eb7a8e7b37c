"""Required-message registry and missing-field resolution.

Tests cover:
    - Registry holds NotNull messages only
    - Unknown type → fallback
    - Known type, unknown field → fallback
    - Field whose only rule is not NotNull → fallback
    - Violation text format
"""

from param_validation.core.constraints import Min, NotNull
from param_validation.core.errors import FieldError
from param_validation.core.message_catalog import MessageLocale
from param_validation.core.message_resolution import (
    build_registry,
    constraint_violation_message,
    missing_parameter_message,
    required_messages,
    resolve_missing_field_message,
)
from param_validation.core.user import RECORD_RULES, USER_NAME_REQUIRED_MESSAGE

FALLBACK = "raw deserializer message"


def test_required_messages_ignore_non_null_rules():
    rules = {"name": [NotNull(message="name please")], "age": [Min(0)]}
    assert required_messages(rules) == {"name": "name please"}


def test_required_messages_use_catalog_default_without_custom_text():
    assert required_messages({"nick": [NotNull()]}, MessageLocale.KO) == {
        "nick": "널이어서는 안됩니다",
    }


def test_registry_for_user_record():
    registry = build_registry(RECORD_RULES)
    assert registry == {"User": {"name": USER_NAME_REQUIRED_MESSAGE}}


def test_resolves_configured_required_message():
    registry = build_registry(RECORD_RULES)
    assert resolve_missing_field_message(
        "User", "name", registry, FALLBACK,
    ) == USER_NAME_REQUIRED_MESSAGE


def test_unknown_type_falls_back():
    registry = build_registry(RECORD_RULES)
    assert resolve_missing_field_message("Order", "name", registry, FALLBACK) == FALLBACK


def test_field_without_required_rule_falls_back():
    registry = build_registry(RECORD_RULES)
    assert resolve_missing_field_message("User", "age", registry, FALLBACK) == FALLBACK


def test_unknown_field_falls_back():
    registry = build_registry(RECORD_RULES)
    assert resolve_missing_field_message("User", "email", registry, FALLBACK) == FALLBACK


def test_missing_parameter_message_names_type_and_field():
    message = missing_parameter_message("User", "age")
    assert "class User" in message
    assert "JSON property age" in message


def test_constraint_violation_message_joins_errors():
    errors = [
        FieldError("user.age", "must be greater than or equal to 0"),
        FieldError("user.name", "must not be null"),
    ]
    assert constraint_violation_message(errors) == (
        "user.age: must be greater than or equal to 0, user.name: must not be null"
    )
