"""Tests for the Smart Leads flow and lead ranking."""

from __future__ import annotations

import pytest

from core.domain.models import LeadRecommendation
from core.errors import InputValidationError
from core.flows import FlowHooks, FlowState, find_smart_leads
from core.flows.ranking import rank_leads
from tests.fakes import FixedResponseAdapter


def _lead(job_id: str, score: float, reason: str = "Matches skills") -> dict:
    return {"jobId": job_id, "reason": reason, "confidenceScore": score}


class TestRankLeads:
    def test_sorted_by_confidence_descending(self):
        leads = [LeadRecommendation.model_validate(_lead(j, s)) for j, s in [("a", 40), ("b", 90), ("c", 65)]]

        ranked = rank_leads(leads, ["a", "b", "c"])

        assert [lead.job_id for lead in ranked] == ["b", "c", "a"]

    def test_ties_follow_input_job_order(self):
        leads = [LeadRecommendation.model_validate(_lead(j, 70)) for j in ["c", "a", "b"]]

        ranked = rank_leads(leads, ["a", "b", "c"])

        assert [lead.job_id for lead in ranked] == ["a", "b", "c"]

    def test_unknown_jobs_rank_after_known_ties(self):
        leads = [LeadRecommendation.model_validate(_lead(j, 70)) for j in ["x", "b", "y", "a"]]

        ranked = rank_leads(leads, ["a", "b"])

        assert [lead.job_id for lead in ranked] == ["a", "b", "x", "y"]


class TestFindSmartLeads:
    @pytest.mark.asyncio
    async def test_returns_ranked_leads(self, leads_input, settings):
        adapter = FixedResponseAdapter([_lead("job-5", 60), _lead("job-1", 95), _lead("job-3", 60)])

        leads = await find_smart_leads(leads_input, adapter=adapter, settings=settings)

        assert [lead.job_id for lead in leads] == ["job-1", "job-3", "job-5"]
        assert all(0 <= lead.confidence_score <= 100 for lead in leads)
        assert len(leads) <= 5

    @pytest.mark.asyncio
    async def test_seven_entries_are_rejected_by_schema(self, leads_input, settings):
        adapter = FixedResponseAdapter([_lead(f"job-{n}", 90 - n) for n in range(1, 7)] + [_lead("job-1", 10)])

        leads = await find_smart_leads(leads_input, adapter=adapter, settings=settings)

        assert leads == []
        assert len(adapter.calls) == 1

    @pytest.mark.asyncio
    async def test_score_out_of_range_is_rejected(self, leads_input, settings):
        adapter = FixedResponseAdapter([_lead("job-1", 120)])

        assert await find_smart_leads(leads_input, adapter=adapter, settings=settings) == []

    @pytest.mark.asyncio
    async def test_empty_output_degrades_to_no_leads(self, leads_input, settings):
        states: list[FlowState] = []
        hooks = FlowHooks(on_state=lambda _name, state: states.append(state))

        leads = await find_smart_leads(leads_input, adapter=FixedResponseAdapter(None), settings=settings, hooks=hooks)

        assert leads == []
        assert states[-2:] == [FlowState.EMPTY, FlowState.DONE]

    @pytest.mark.asyncio
    async def test_repeated_calls_are_identical(self, leads_input, settings):
        adapter = FixedResponseAdapter([_lead("job-2", 80), _lead("job-4", 80), _lead("job-6", 85)])

        first = await find_smart_leads(leads_input, adapter=adapter, settings=settings)
        second = await find_smart_leads(leads_input, adapter=adapter, settings=settings)

        assert [lead.model_dump_json() for lead in first] == [lead.model_dump_json() for lead in second]
        assert [lead.job_id for lead in first] == ["job-6", "job-2", "job-4"]

    @pytest.mark.asyncio
    async def test_prompt_uses_configured_currency(self, leads_input, settings):
        adapter = FixedResponseAdapter([])
        settings = settings.model_copy(update={"currency": "UGX"})

        await find_smart_leads(leads_input, adapter=adapter, settings=settings)

        assert "Budget: UGX 3000" in adapter.last_prompt
        assert "Budget: Not specified" in adapter.last_prompt

    @pytest.mark.asyncio
    async def test_invalid_input(self, leads_input, settings):
        leads_input["availableJobs"][0]["budget"] = -5
        adapter = FixedResponseAdapter([])

        with pytest.raises(InputValidationError):
            await find_smart_leads(leads_input, adapter=adapter, settings=settings)

        assert adapter.calls == []
