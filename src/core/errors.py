"""Core errors.

Why a dedicated module:
- Callers (CLI, server actions) need to tell a bad input apart from a model
  that produced nothing usable, without importing adapters.
- Every message is human-readable so the UI can show it as-is.
"""

from __future__ import annotations

from typing import Any


class SchemaValidationError(ValueError):
    """A value does not conform to its schema."""

    def __init__(self, schema_name: str, errors: list[dict[str, Any]]) -> None:
        self.schema_name = schema_name
        self.errors = errors
        super().__init__(f"{schema_name} is invalid: {format_error_locations(errors)}")


class TemplateError(ValueError):
    """A prompt template references data that is not there."""


class FlowError(Exception):
    """Base class for failures surfaced by a flow to its caller."""

    def __init__(self, flow_name: str, message: str) -> None:
        self.flow_name = flow_name
        super().__init__(f"[{flow_name}] {message}")


class InputValidationError(FlowError):
    """Caller-supplied data was rejected before any model call."""

    def __init__(self, flow_name: str, cause: SchemaValidationError) -> None:
        self.cause = cause
        super().__init__(flow_name, f"invalid input: {format_error_locations(cause.errors)}")


class EmptyOutputError(FlowError):
    """The model produced no schema-conformant output and the flow needs one."""

    def __init__(self, flow_name: str, detail: str | None = None) -> None:
        self.detail = detail
        message = "analysis produced no output"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(flow_name, message)


class ProviderNotFoundError(LookupError):
    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"Provider profile not found: {provider_id!r}")


class ConfigurationError(RuntimeError):
    """Settings are missing or inconsistent (e.g. no API key for a hosted model)."""


def format_error_locations(errors: list[dict[str, Any]]) -> str:
    parts: list[str] = []
    for err in errors:
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "unknown error"
