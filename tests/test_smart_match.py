"""Tests for the Smart Match flow."""

from __future__ import annotations

import pytest

from core.flows import get_smart_match_suggestions
from tests.fakes import FixedResponseAdapter


@pytest.fixture
def match_input() -> dict:
    return {
        "jobDescription": "Install a 3kW solar system on a bungalow roof.",
        "location": "Kisumu",
        "preferredCriteria": "Certified, at least 5 years of experience",
        "availableProviders": [
            {
                "id": "p-1",
                "name": "Sunny Installers",
                "profile": "Solar specialists",
                "location": "Kisumu",
                "experience": "7 years",
                "certifications": ["EPRA T3", "NCA"],
                "rating": 4.6,
            },
            {
                "id": "p-2",
                "name": "Odhiambo Electric",
                "location": "Kisumu",
                "rating": 4.1,
            },
        ],
    }


@pytest.mark.asyncio
async def test_suggestions_for_unknown_providers_are_dropped(match_input, settings):
    adapter = FixedResponseAdapter(
        [
            {"providerId": "p-1", "reason": "Solar specialists nearby"},
            {"providerId": "p-9", "reason": "Hallucinated"},
            {"providerId": "p-1", "reason": "Repeated"},
        ]
    )

    suggestions = await get_smart_match_suggestions(match_input, adapter=adapter, settings=settings)

    assert [(s.provider_id, s.reason) for s in suggestions] == [("p-1", "Solar specialists nearby")]
    assert "Certifications: EPRA T3, NCA, Rating: 4.6" in adapter.last_prompt


@pytest.mark.asyncio
async def test_empty_output_means_no_suggestions(match_input, settings):
    assert await get_smart_match_suggestions(match_input, adapter=FixedResponseAdapter(None), settings=settings) == []
