"""Int32 wire type — range bounds and boolean rejection."""

import pytest
from pydantic import TypeAdapter, ValidationError

from param_validation.schemas.types import INT32_MAX, INT32_MIN, Int32

int32 = TypeAdapter(Int32)


@pytest.mark.parametrize("value", [INT32_MIN, -5, 0, 20, INT32_MAX])
def test_accepts_values_in_range(value):
    assert int32.validate_python(value) == value


@pytest.mark.parametrize("value", [INT32_MIN - 1, INT32_MAX + 1, 1099511627776])
def test_rejects_values_out_of_range(value):
    with pytest.raises(ValidationError):
        int32.validate_python(value)


@pytest.mark.parametrize("value", [True, False])
def test_rejects_booleans(value):
    with pytest.raises(ValidationError):
        int32.validate_python(value)


def test_rejects_json_boolean():
    with pytest.raises(ValidationError):
        int32.validate_json("true")
