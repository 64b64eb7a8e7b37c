"""Error Handlers — global exception handlers for the demo API.

Invariants:
    - DemoServiceError → its own status code, plain-text message
    - RequestValidationError (type coercion) → 400, "<loc>: <msg>" per error
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: service (DemoServiceError), framework validation
      (pydantic), catch-all (Exception)
    - Rule violations never get here: routes answer those from ValidationResult
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from param_validation.core.errors import DemoServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:
    """Register infrastructure error handler."""

    @app.exception_handler(DemoServiceError)
    async def service_error_handler(request: Request, exc: DemoServiceError):
        logger.error(
            f"DemoServiceError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "category": exc.category.value,
            },
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register framework-level (type coercion) validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Request validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "TYPE_MISMATCH", "path": request.url.path},
        )
        return PlainTextResponse(
            build_request_validation_message(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return PlainTextResponse(
            "An unexpected error occurred",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )


def build_request_validation_message(exc: RequestValidationError) -> str:
    return ", ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
