"""Constraints — explicit per-field validation rules.

Invariants:
    - check() returns a FieldError or None — rules never raise
    - Min treats None as valid (presence is NotNull's job)
    - validate_fields() evaluates every rule of every field, in declaration order
    - Custom message text wins over the catalog default

Design Decisions:
    - Rule objects over decorators/annotations: rules are plain data that the
      binding step composes, and that message_resolution can inspect without
      runtime introspection of the record class
"""

from collections.abc import Mapping, Sequence
from typing import Any

from param_validation.core.errors import ErrorCategory, FieldError
from param_validation.core.message_catalog import (
    MIN_MESSAGE_KEY,
    NOT_NULL_MESSAGE_KEY,
    MessageLocale,
    interpolate,
)


class Constraint:
    """Base rule. Subclasses implement is_valid() and expose template attributes."""

    default_message = ""

    def __init__(self, message: str | None = None):
        self.message = message

    def is_valid(self, value: Any) -> bool:
        raise NotImplementedError

    def attributes(self) -> dict[str, Any]:
        return {}

    def message_for(self, locale: MessageLocale = MessageLocale.EN) -> str:
        return interpolate(
            self.message or self.default_message, locale, **self.attributes(),
        )

    def check(
        self, value: Any, path: str, locale: MessageLocale = MessageLocale.EN,
    ) -> FieldError | None:
        if self.is_valid(value):
            return None
        return FieldError(
            path, self.message_for(locale), ErrorCategory.CONSTRAINT_VIOLATION,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attributes()!r}, message={self.message!r})"


class NotNull(Constraint):
    """Value must be present."""

    default_message = NOT_NULL_MESSAGE_KEY

    def is_valid(self, value: Any) -> bool:
        return value is not None


class Min(Constraint):
    """Numeric value must be >= the configured minimum."""

    default_message = MIN_MESSAGE_KEY

    def __init__(self, value: int, message: str | None = None):
        super().__init__(message)
        self.value = value

    def is_valid(self, value: Any) -> bool:
        return value is None or value >= self.value

    def attributes(self) -> dict[str, Any]:
        return {"value": self.value}


FieldRules = Mapping[str, Sequence[Constraint]]


def validate_value(
    value: Any,
    constraints: Sequence[Constraint],
    path: str,
    locale: MessageLocale = MessageLocale.EN,
) -> list[FieldError]:
    """Run every constraint against one value."""
    errors = []
    for constraint in constraints:
        error = constraint.check(value, path, locale)
        if error is not None:
            errors.append(error)
    return errors


def validate_fields(
    values: Mapping[str, Any],
    rules: FieldRules,
    root: str = "",
    locale: MessageLocale = MessageLocale.EN,
) -> list[FieldError]:
    """Validate a mapping of field values; paths are prefixed with root."""
    errors = []
    for field, constraints in rules.items():
        path = f"{root}.{field}" if root else field
        errors.extend(validate_value(values.get(field), constraints, path, locale))
    return errors
