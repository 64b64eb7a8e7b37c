"""User Payload — JSON shape of the POST /user body.

Invariants:
    - name and age are required; absence yields a pydantic "missing" error
    - age is a 32-bit integer; booleans and out-of-range numbers are type errors
    - Unknown keys are ignored
"""

from pydantic import BaseModel, ConfigDict

from param_validation.schemas.types import Int32


class UserPayload(BaseModel):
    """Deserialized /user body, before value rules run."""
    model_config = ConfigDict(extra="ignore")

    name: str
    age: Int32
