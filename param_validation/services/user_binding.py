"""User Binding — raw JSON body → ValidationResult[User].

Invariants:
    - Deserialization failures and rule violations both come back as FieldErrors
    - A missing key or explicit null is a MISSING_FIELD error whose message is
      resolved through the required-message registry
    - Any other deserialization failure is a TYPE_MISMATCH with pydantic's text
    - Value rules only run once the payload deserialized cleanly

Design Decisions:
    - pydantic does the type work, core/user.py does the value work: the
      record is never instantiated with an out-of-range age
"""

import logging
from typing import Any

from pydantic import ValidationError

from param_validation.core.errors import ErrorCategory, FieldError
from param_validation.core.message_catalog import MessageLocale
from param_validation.core.message_resolution import (
    RequiredMessages,
    missing_parameter_message,
    resolve_missing_field_message,
)
from param_validation.core.user import User, build_user
from param_validation.core.validation_result import ValidationResult
from param_validation.schemas.user import UserPayload

logger = logging.getLogger(__name__)

USER_ROOT = "user"


def bind_user(
    raw: Any,
    registry: RequiredMessages,
    locale: MessageLocale = MessageLocale.EN,
) -> ValidationResult[User]:
    """Deserialize and validate a /user body."""
    try:
        payload = UserPayload.model_validate(raw)
    except ValidationError as exc:
        return ValidationResult.invalid(
            deserialization_errors(exc, User.__name__, registry),
        )
    return build_user(payload.model_dump(), locale, root=USER_ROOT)


def deserialization_errors(
    exc: ValidationError, type_name: str, registry: RequiredMessages,
) -> list[FieldError]:
    """Convert pydantic errors into FieldErrors, resolving missing-field messages."""
    errors = []
    for e in exc.errors():
        loc = [str(part) for part in e["loc"]]
        path = ".".join([USER_ROOT, *loc])
        if loc and _is_missing(e):
            field = loc[0]
            fallback = missing_parameter_message(type_name, field)
            message = resolve_missing_field_message(
                type_name, field, registry, fallback,
            )
            if message == fallback:
                logger.debug(
                    f"No required message for {type_name}.{field}, using default",
                )
            errors.append(FieldError(path, message, ErrorCategory.MISSING_FIELD))
        else:
            errors.append(FieldError(path, e["msg"], ErrorCategory.TYPE_MISMATCH))
    return errors


def _is_missing(error: dict) -> bool:
    """Absent key, or a key whose value is JSON null."""
    return error["type"] == "missing" or (
        "input" in error and error["input"] is None
    )
