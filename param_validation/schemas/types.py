"""Wire Types — integer shapes shared by query parameters and JSON bodies.

Invariants:
    - Int32 accepts only values in the signed 32-bit range
    - Int32 rejects booleans (JSON true/false is not a number)
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def _reject_bool(value: Any) -> Any:
    if isinstance(value, bool):
        raise ValueError("boolean is not an integer")
    return value


Int32 = Annotated[
    int, BeforeValidator(_reject_bool), Field(ge=INT32_MIN, le=INT32_MAX),
]
