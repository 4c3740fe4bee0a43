"""Smart leads for a provider, joined onto the open job snapshots.

This is the entry point used by the "Smart Leads" tool: it reads the
provider profile and open jobs through the marketplace directory, runs the
Smart Leads flow and turns its recommendations into `SmartLead` values the
UI can render directly.
"""

from __future__ import annotations

import logging

from core.config import AppSettings
from core.domain.models import FindSmartLeadsInput, SmartLead
from core.errors import ProviderNotFoundError
from core.flows.base import FlowHooks
from core.flows.smart_leads import find_smart_leads
from core.interfaces.directory import MarketplaceDirectory
from core.interfaces.model_adapter import ModelAdapter

logger = logging.getLogger(__name__)


async def get_smart_leads(
    provider_id: str,
    *,
    directory: MarketplaceDirectory,
    adapter: ModelAdapter | None = None,
    settings: AppSettings | None = None,
    hooks: FlowHooks | None = None,
) -> list[SmartLead]:
    """Return ranked leads for `provider_id` (possibly empty).

    Recommendations naming a job that is not among the open jobs are dropped,
    and a job named more than once keeps only its highest-confidence lead.
    """

    settings = settings or AppSettings()
    profile = await directory.get_provider_profile(provider_id)
    if profile is None:
        raise ProviderNotFoundError(provider_id)

    jobs = await directory.list_open_jobs(settings.candidate_jobs_limit)
    if not jobs:
        logger.info("No open jobs; skipping smart leads for %s", provider_id)
        return []

    recommendations = await find_smart_leads(
        FindSmartLeadsInput(provider_profile=profile, available_jobs=jobs),
        adapter=adapter,
        settings=settings,
        hooks=hooks,
    )

    jobs_by_id = {job.id: job for job in jobs}
    leads: list[SmartLead] = []
    for rec in recommendations:
        job = jobs_by_id.pop(rec.job_id, None)
        if job is None:
            logger.info("Dropping lead for unknown or repeated job %s", rec.job_id)
            continue
        leads.append(SmartLead(**job.model_dump(), reason=rec.reason, confidence_score=rec.confidence_score))
    return leads
