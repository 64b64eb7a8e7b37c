"""Response Writers — plain-text bodies for validation outcomes.

Invariants:
    - Every validation failure answers 400 with a text/plain body
    - Missing-field failures answer with the first missing field's message only
    - Other failures answer with "<path>: <message>" joined by ", "
"""

import logging
from collections.abc import Sequence

from fastapi import status
from fastapi.responses import PlainTextResponse

from param_validation.core.errors import ErrorCategory, FieldError
from param_validation.core.message_resolution import constraint_violation_message

logger = logging.getLogger(__name__)


def validation_error_body(errors: Sequence[FieldError]) -> str:
    """Text shown to the client for a failed ValidationResult."""
    missing = [e for e in errors if e.category is ErrorCategory.MISSING_FIELD]
    if missing:
        # Construction stops at the first absent value
        return missing[0].message
    return constraint_violation_message(errors)


def validation_error_response(
    errors: Sequence[FieldError], request_path: str | None = None,
) -> PlainTextResponse:
    """400 response for a failed ValidationResult, logged at WARNING."""
    for error in errors:
        logger.warning(
            f"Validation failed: {error.render()}",
            extra={
                "error_code": error.category.value.upper(),
                "path": request_path,
                "field": error.field,
                "category": error.category.value,
            },
        )
    return PlainTextResponse(
        validation_error_body(errors), status_code=status.HTTP_400_BAD_REQUEST,
    )
