"""Validation Demo Routes — /test2, /test, /user.

Invariants:
    - Query rule (no >= 0) is evaluated in a dependency, before the handler body
    - no outside the 32-bit range is a type error (400 via the framework handler)
    - /test offloads its body to the worker pool; output identical to /test2
    - /user answers from bind_user()'s ValidationResult — no exception control flow
    - Success bodies are text/plain "Success <value>"

Design Decisions:
    - validated_no() is a dependency factory so the violation path names
      the operation ("test2.no", "test.no")
    - Required-message registry cached per locale: built once, then a dict lookup
"""

from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from param_validation.api.responses import validation_error_response
from param_validation.config import Settings, get_settings
from param_validation.core.constraints import Min, validate_value
from param_validation.core.message_catalog import MessageLocale, resolve_locale
from param_validation.core.message_resolution import RequiredMessages, build_registry
from param_validation.core.user import RECORD_RULES, User
from param_validation.core.validation_result import ValidationResult
from param_validation.infrastructure.worker_pool import WorkerPool, get_worker_pool
from param_validation.schemas.types import INT32_MAX, INT32_MIN
from param_validation.services.user_binding import bind_user

router = APIRouter(tags=["validation"])

NO_RULES = [Min(0)]


@lru_cache
def required_message_registry(locale: MessageLocale) -> RequiredMessages:
    return build_registry(RECORD_RULES, locale)


def get_message_locale(
    settings: Settings = Depends(get_settings),
) -> MessageLocale:
    return resolve_locale(settings.message_locale)


def validated_no(operation: str):
    """Build a dependency that reads ?no= and checks it against NO_RULES."""

    def dependency(
        no: int = Query(..., ge=INT32_MIN, le=INT32_MAX),
        locale: MessageLocale = Depends(get_message_locale),
    ) -> ValidationResult[int]:
        errors = validate_value(no, NO_RULES, f"{operation}.no", locale)
        if errors:
            return ValidationResult.invalid(errors)
        return ValidationResult.valid(no)

    return dependency


def _success(value: Any) -> str:
    return f"Success {value}"


@router.get("/test2", response_class=PlainTextResponse)
def test2(
    request: Request,
    no: ValidationResult[int] = Depends(validated_no("test2")),
):
    """Synchronous variant: validate, then echo."""
    if not no.ok:
        return validation_error_response(no.errors, request.url.path)
    return no.map(_success).value


@router.get("/test", response_class=PlainTextResponse)
async def test(
    request: Request,
    no: ValidationResult[int] = Depends(validated_no("test")),
    pool: WorkerPool = Depends(get_worker_pool),
):
    """Asynchronous variant: the handler body runs on the worker pool."""
    if not no.ok:
        return validation_error_response(no.errors, request.url.path)
    return await pool.run(_success, no.value)


@router.post("/user", response_class=PlainTextResponse)
async def create_user(
    request: Request,
    payload: Any = Body(...),
    locale: MessageLocale = Depends(get_message_locale),
    pool: WorkerPool = Depends(get_worker_pool),
):
    """Bind the JSON body to a User and echo it."""
    result: ValidationResult[User] = bind_user(
        payload, required_message_registry(locale), locale,
    )
    if not result.ok:
        return validation_error_response(result.errors, request.url.path)
    return await pool.run(_success, result.value)
