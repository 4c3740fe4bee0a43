"""Shared fixtures: sample marketplace payloads."""

from __future__ import annotations

from typing import Any

import pytest

from core.config import AppSettings


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, ai_api_key="test-key", currency="KES")


@pytest.fixture
def quote_input() -> dict[str, Any]:
    return {
        "jobDetails": {
            "title": "Fix leaking pipe",
            "description": "Kitchen sink pipe is leaking under the cabinet.",
        },
        "quotes": [
            {
                "id": "quote-a",
                "amount": 1500,
                "currency": "KES",
                "messageToClient": "I can come tomorrow morning with all parts.",
                "providerDetails": {
                    "businessName": "Juma Plumbing",
                    "rating": 4.8,
                    "reviewsCount": 32,
                    "yearsOfExperience": 8,
                },
            },
            {
                "id": "quote-b",
                "amount": 2200,
                "currency": "KES",
                "messageToClient": "Available next week.",
                "providerDetails": {
                    "businessName": "Quick Fix Ltd",
                    "rating": 3.9,
                    "reviewsCount": 7,
                    "yearsOfExperience": 2,
                },
            },
        ],
    }


@pytest.fixture
def quote_output() -> dict[str, Any]:
    return {
        "overallSummary": "Two quotes were received. Juma Plumbing is cheaper and better rated.",
        "prosCons": [
            {
                "quoteId": "quote-b",
                "providerName": "Quick Fix Ltd",
                "pros": ["Registered company"],
                "cons": ["Higher price", "Lower rating"],
            },
            {
                "quoteId": "quote-a",
                "providerName": "Juma Plumbing",
                "pros": ["Lower price", "High rating"],
                "cons": [],
            },
        ],
        "bestValueRecommendation": "quote-a",
    }


@pytest.fixture
def provider_profile() -> dict[str, Any]:
    return {
        "id": "prov-1",
        "businessName": "Wanjiku Electricals",
        "mainService": "Electrical",
        "specialties": ["Wiring", "Solar installation"],
        "skills": ["Inverters", "Fault finding"],
        "location": "Nairobi",
        "bio": "Certified electrician with 10 years of experience.",
    }


@pytest.fixture
def available_jobs() -> list[dict[str, Any]]:
    return [
        {
            "id": f"job-{n}",
            "title": f"Job {n}",
            "description": f"Description {n}",
            "serviceCategory": "Electrical" if n % 2 else "Plumbing",
            "location": "Nairobi",
            "budget": None if n == 2 else 1000 * n,
        }
        for n in range(1, 7)
    ]


@pytest.fixture
def leads_input(provider_profile: dict[str, Any], available_jobs: list[dict[str, Any]]) -> dict[str, Any]:
    return {"providerProfile": provider_profile, "availableJobs": available_jobs}
