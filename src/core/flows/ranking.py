"""Deterministic post-processing applied to structurally valid model output."""

from __future__ import annotations

from typing import Iterable, Sequence

from core.domain.models import LeadRecommendation, SmartMatchSuggestion


def rank_leads(leads: Iterable[LeadRecommendation], job_order: Sequence[str]) -> list[LeadRecommendation]:
    """Sort by confidence (descending); ties keep the jobs' input order.

    Leads for jobs that were not in the input rank after known ones with the
    same score, in the order the model returned them (`sorted` is stable).
    """

    position = {job_id: index for index, job_id in enumerate(job_order)}
    unknown = len(position)
    return sorted(leads, key=lambda lead: (-lead.confidence_score, position.get(lead.job_id, unknown)))


def keep_known_providers(
    suggestions: Iterable[SmartMatchSuggestion],
    provider_ids: Iterable[str],
) -> list[SmartMatchSuggestion]:
    """Drop suggestions for unknown providers and repeated provider IDs."""

    known = set(provider_ids)
    seen: set[str] = set()
    kept: list[SmartMatchSuggestion] = []
    for suggestion in suggestions:
        if suggestion.provider_id not in known or suggestion.provider_id in seen:
            continue
        seen.add(suggestion.provider_id)
        kept.append(suggestion)
    return kept
