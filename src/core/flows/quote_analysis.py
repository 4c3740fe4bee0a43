"""Quote Analysis flow.

Takes a job and the quotes received for it and returns an overall summary,
one pros/cons entry per quote and the ID of the best-value quote.

An Empty model result is fatal here: a best-value recommendation is
mandatory, so the caller gets `EmptyOutputError` and never a partial result.
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import AppSettings
from core.domain.models import QuoteAnalysisInput, QuoteAnalysisOutput
from core.flows.base import FlowHooks, FlowRun, FlowState
from core.flows.registry import QUOTE_ANALYSIS, resolve_adapter
from core.interfaces.model_adapter import ModelAdapter

logger = logging.getLogger(__name__)


def find_coverage_problem(data: QuoteAnalysisInput, output: QuoteAnalysisOutput) -> str | None:
    """Cross-check the model output against the input quotes.

    Returns a description of the first problem found, or None when every
    input quote has exactly one pros/cons entry and the recommendation names
    one of the input quotes.
    """

    quote_ids = [quote.id for quote in data.quotes]
    known = set(quote_ids)

    seen: set[str] = set()
    for entry in output.pros_cons:
        if entry.quote_id not in known:
            return f"pros/cons for unknown quote {entry.quote_id!r}"
        if entry.quote_id in seen:
            return f"duplicate pros/cons for quote {entry.quote_id!r}"
        seen.add(entry.quote_id)

    missing = [quote_id for quote_id in quote_ids if quote_id not in seen]
    if missing:
        return f"missing pros/cons for quotes {', '.join(missing)}"

    if output.best_value_recommendation not in known:
        return f"best value recommendation {output.best_value_recommendation!r} is not one of the quotes"
    return None


async def analyze_job_quotes(
    payload: QuoteAnalysisInput | dict[str, Any],
    *,
    adapter: ModelAdapter | None = None,
    settings: AppSettings | None = None,
    hooks: FlowHooks | None = None,
) -> QuoteAnalysisOutput:
    """Analyze the quotes received for a job.

    Raises:
        InputValidationError: `payload` does not match `QuoteAnalysisInput`.
        EmptyOutputError: the model returned nothing usable, or an output that
            does not cover exactly the input quotes.
    """

    model = resolve_adapter(adapter, settings)
    run = FlowRun(QUOTE_ANALYSIS, hooks)
    data, output = await run.execute(payload, model)
    if output is None:
        raise run.fail()

    problem = find_coverage_problem(data, output)
    if problem:
        raise run.fail(problem)

    run.advance(FlowState.POST_PROCESSING)
    order = {quote.id: index for index, quote in enumerate(data.quotes)}
    ordered = sorted(output.pros_cons, key=lambda entry: order[entry.quote_id])
    logger.info(
        "[%s] analyzed %d quotes, best value %s",
        QUOTE_ANALYSIS.name,
        len(ordered),
        output.best_value_recommendation,
    )
    return run.finish(output.model_copy(update={"pros_cons": ordered}))
