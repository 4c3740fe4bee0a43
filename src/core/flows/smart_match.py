"""Smart Match flow: suggest providers for a job description.

Like Smart Leads, an Empty model result maps to an empty list.
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import AppSettings
from core.domain.models import SmartMatchInput, SmartMatchSuggestion
from core.flows.base import FlowHooks, FlowRun, FlowState
from core.flows.ranking import keep_known_providers
from core.flows.registry import SMART_MATCH, resolve_adapter
from core.interfaces.model_adapter import ModelAdapter

logger = logging.getLogger(__name__)


async def get_smart_match_suggestions(
    payload: SmartMatchInput | dict[str, Any],
    *,
    adapter: ModelAdapter | None = None,
    settings: AppSettings | None = None,
    hooks: FlowHooks | None = None,
) -> list[SmartMatchSuggestion]:
    model = resolve_adapter(adapter, settings)
    run = FlowRun(SMART_MATCH, hooks)
    data, output = await run.execute(payload, model)
    if output is None:
        logger.warning("[%s] model returned no usable output; no suggestions", SMART_MATCH.name)
        return run.finish([])

    run.advance(FlowState.POST_PROCESSING)
    kept = keep_known_providers(output, [provider.id for provider in data.available_providers])
    if len(kept) < len(output):
        logger.info("[%s] dropped %d suggestions for unknown providers", SMART_MATCH.name, len(output) - len(kept))
    return run.finish(kept)
