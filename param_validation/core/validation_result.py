"""Validation Result — a valid value or a non-empty list of field errors.

Invariants:
    - Exactly one side is populated: ok ⇔ errors is empty
    - invalid() rejects an empty error list

Design Decisions:
    - Result object over exceptions: the route decides how to answer,
      so validation never unwinds through FastAPI's exception machinery
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from param_validation.core.errors import FieldError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    value: T | None = None
    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @classmethod
    def valid(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, errors: Iterable[FieldError]) -> "ValidationResult[T]":
        errors = tuple(errors)
        if not errors:
            raise ValueError("invalid result requires at least one error")
        return cls(errors=errors)

    def map(self, fn: Callable[[T], U]) -> "ValidationResult[U]":
        """Transform the value of a valid result; errors pass through untouched."""
        if not self.ok:
            return ValidationResult(errors=self.errors)
        return ValidationResult.valid(fn(self.value))
