"""Smart Leads flow.

Takes a provider profile and the open jobs and returns at most five
recommended jobs, ranked by confidence. An Empty model result is a valid
outcome here (no good leads) and maps to an empty list.
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import AppSettings
from core.domain.models import FindSmartLeadsInput, LeadRecommendation
from core.flows.base import FlowHooks, FlowRun, FlowState
from core.flows.ranking import rank_leads
from core.flows.registry import SMART_LEADS, resolve_adapter
from core.interfaces.model_adapter import ModelAdapter

logger = logging.getLogger(__name__)


async def find_smart_leads(
    payload: FindSmartLeadsInput | dict[str, Any],
    *,
    adapter: ModelAdapter | None = None,
    settings: AppSettings | None = None,
    hooks: FlowHooks | None = None,
) -> list[LeadRecommendation]:
    """Recommend up to five jobs for a provider.

    Raises:
        InputValidationError: `payload` does not match `FindSmartLeadsInput`.
    """

    settings = settings or AppSettings()
    model = resolve_adapter(adapter, settings)
    run = FlowRun(SMART_LEADS, hooks)
    data, output = await run.execute(payload, model, context={"currency": settings.currency})
    if output is None:
        logger.warning("[%s] model returned no usable output; no leads", SMART_LEADS.name)
        return run.finish([])

    run.advance(FlowState.POST_PROCESSING)
    ranked = rank_leads(output, [job.id for job in data.available_jobs])
    return run.finish(ranked)
