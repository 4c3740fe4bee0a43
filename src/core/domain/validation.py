"""Generic schema validation.

`validate` is the single interpreter for every schema in the domain: a
Pydantic model class or an annotated type such as `FindSmartLeadsOutput`.
Validation is total and side-effect-free; the `TypeAdapter` built for each
schema is cached and shared by every invocation.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.errors import SchemaValidationError


@lru_cache(maxsize=None)
def _adapter_for(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


def schema_name(schema: Any) -> str:
    if isinstance(schema, type):
        return schema.__name__
    return "value"


def validate(schema: Any, value: Any, *, name: str | None = None) -> Any:
    """Return `value` coerced to `schema` or raise `SchemaValidationError`."""

    try:
        return _adapter_for(schema).validate_python(value)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise SchemaValidationError(name or schema_name(schema), errors) from exc


def schema_hint(schema: Any) -> dict[str, Any]:
    """JSON Schema (wire names) describing `schema`, sent to the model as the output contract."""

    return _adapter_for(schema).json_schema(by_alias=True)
