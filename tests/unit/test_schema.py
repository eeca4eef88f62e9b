"""Unit tests for output schema resolution."""

from __future__ import annotations

import pytest
from pydantic import BaseModel

from exa_client import resolve_output_schema


class _Company(BaseModel):
    name: str
    employees: int | None = None


def test_none_passes_through() -> None:
    assert resolve_output_schema(None) is None


def test_dict_is_used_as_is() -> None:
    schema = {"type": "object", "properties": {"name": {"type": "string"}}}

    assert resolve_output_schema(schema) is schema


def test_pydantic_model_becomes_json_schema() -> None:
    schema = resolve_output_schema(_Company)

    assert schema is not None
    assert schema["type"] == "object"
    assert set(schema["properties"]) == {"name", "employees"}
    assert schema["required"] == ["name"]


@pytest.mark.parametrize("value", ["schema", 42, _Company(name="x")])
def test_other_values_raise_type_error(value: object) -> None:
    with pytest.raises(TypeError):
        resolve_output_schema(value)  # type: ignore[arg-type]
