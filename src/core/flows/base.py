"""Shared flow machinery.

Every flow walks the same states:

    IDLE -> VALIDATING -> RENDERING -> INVOKING -> (VALIDATED | EMPTY)
         -> [POST_PROCESSING] -> DONE | FAILED

No state is retried or revisited within one call. A `FlowRun` holds the
state of a single invocation only; specs, schemas and templates are shared
read-only across concurrent runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping, NamedTuple

from core.domain.validation import validate
from core.errors import EmptyOutputError, InputValidationError, SchemaValidationError
from core.interfaces.model_adapter import ModelAdapter
from core.prompts.renderer import Template, render

logger = logging.getLogger(__name__)


class FlowState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    RENDERING = "rendering"
    INVOKING = "invoking"
    VALIDATED = "validated"
    EMPTY = "empty"
    POST_PROCESSING = "post_processing"
    DONE = "done"
    FAILED = "failed"


class FlowSpec(NamedTuple):
    name: str
    input_schema: Any
    output_schema: Any
    template: Template


@dataclass
class FlowHooks:
    """Optional callbacks for UI layers (progress, tracing)."""

    on_state: Callable[[str, FlowState], None] | None = None


class FlowRun:
    """State of one flow invocation."""

    def __init__(self, spec: FlowSpec, hooks: FlowHooks | None = None) -> None:
        self.spec = spec
        self.hooks = hooks or FlowHooks()
        self.state = FlowState.IDLE
        self.history: list[FlowState] = [FlowState.IDLE]

    def advance(self, state: FlowState) -> None:
        logger.debug("[%s] %s -> %s", self.spec.name, self.state.value, state.value)
        self.state = state
        self.history.append(state)
        if self.hooks.on_state:
            self.hooks.on_state(self.spec.name, state)

    async def execute(
        self,
        payload: Any,
        adapter: ModelAdapter,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> tuple[Any, Any | None]:
        """Validate, render and invoke; return (validated input, output or None)."""

        self.advance(FlowState.VALIDATING)
        try:
            data = validate(self.spec.input_schema, payload)
        except SchemaValidationError as exc:
            self.advance(FlowState.FAILED)
            raise InputValidationError(self.spec.name, exc) from exc

        self.advance(FlowState.RENDERING)
        prompt = render(self.spec.template, data, context)

        self.advance(FlowState.INVOKING)
        output = await adapter.invoke(prompt, self.spec.output_schema)

        self.advance(FlowState.EMPTY if output is None else FlowState.VALIDATED)
        return data, output

    def fail(self, detail: str | None = None) -> EmptyOutputError:
        self.advance(FlowState.FAILED)
        logger.warning("[%s] model returned no usable output%s", self.spec.name, f": {detail}" if detail else "")
        return EmptyOutputError(self.spec.name, detail)

    def finish(self, result: Any) -> Any:
        self.advance(FlowState.DONE)
        return result
