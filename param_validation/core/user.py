"""User Record — the one structured input of the demo, and its rules.

Invariants:
    - A constructed User always has a name and age >= 0
    - build_user() validates before constructing — no invalid instance exists
    - str(User) renders as "User(name=<name>, age=<age>)"
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from param_validation.core.constraints import FieldRules, Min, NotNull, validate_fields
from param_validation.core.message_catalog import MessageLocale
from param_validation.core.validation_result import ValidationResult

USER_NAME_REQUIRED_MESSAGE = "사용자의 이름은 필수 입력 값 입니다."


@dataclass(frozen=True)
class User:
    name: str
    age: int

    def __str__(self) -> str:
        return f"User(name={self.name}, age={self.age})"


USER_RULES: FieldRules = {
    "name": [NotNull(message=USER_NAME_REQUIRED_MESSAGE)],
    "age": [Min(0)],
}

# Records whose required messages are resolvable by type name
RECORD_RULES: dict[str, FieldRules] = {User.__name__: USER_RULES}


def build_user(
    values: Mapping[str, Any],
    locale: MessageLocale = MessageLocale.EN,
    root: str = "user",
) -> ValidationResult[User]:
    """Validate already-typed values and construct a User."""
    errors = validate_fields(values, USER_RULES, root, locale)
    if errors:
        return ValidationResult.invalid(errors)
    return ValidationResult.valid(User(name=values["name"], age=values["age"]))
