"""Error Types — field-level validation errors and service exceptions.

Invariants:
    - Validation failures are data (FieldError), never raised
    - Every FieldError has a path, message, and category
    - Only infrastructure failures raise (DemoServiceError subclasses)
    - No internal details leaked in user-facing messages

Design Decisions:
    - FieldError as frozen dataclass: safe to share between result objects
    - Single DemoServiceError base: one global handler maps all of them
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    CONSTRAINT_VIOLATION = "constraint_violation"
    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    UNAVAILABLE = "unavailable"
    INTERNAL = "internal"


@dataclass(frozen=True)
class FieldError:
    """One failed input rule, addressed by a dotted path (e.g. ``user.age``)."""
    path: str
    message: str
    category: ErrorCategory = ErrorCategory.CONSTRAINT_VIOLATION

    @property
    def field(self) -> str:
        """Last segment of the path — the field name itself."""
        return self.path.rsplit(".", 1)[-1]

    def render(self) -> str:
        return f"{self.path}: {self.message}"


class DemoServiceError(Exception):
    """Base exception for infrastructure failures surfaced to clients."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory = ErrorCategory.INTERNAL,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status


class WorkerPoolUnavailableError(DemoServiceError):
    """Background work was requested before the pool started or after it closed."""
    def __init__(self):
        super().__init__(
            "Background worker pool is not available",
            "WORKER_POOL_UNAVAILABLE", ErrorCategory.UNAVAILABLE, 503,
        )
