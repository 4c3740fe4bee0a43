"""Job Triage flow: a "Smart Ticket" (likely cause, parts, tools, urgency) for a job request."""

from __future__ import annotations

from typing import Any

from core.config import AppSettings
from core.domain.models import JobTriageInput, JobTriageOutput
from core.flows.base import FlowHooks, FlowRun
from core.flows.registry import JOB_TRIAGE, resolve_adapter
from core.interfaces.model_adapter import ModelAdapter


async def get_job_triage(
    payload: JobTriageInput | dict[str, Any],
    *,
    adapter: ModelAdapter | None = None,
    settings: AppSettings | None = None,
    hooks: FlowHooks | None = None,
) -> JobTriageOutput:
    model = resolve_adapter(adapter, settings)
    run = FlowRun(JOB_TRIAGE, hooks)
    _, output = await run.execute(payload, model)
    if output is None:
        raise run.fail()
    return run.finish(output)
