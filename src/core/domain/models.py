"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Each model is the schema exchanged with the generative model: field types,
  required/optional fields, numeric bounds and enumerations live in `Field`.
- The same classes validate caller input at flow entry and the model's reply
  on the way back, and they render their own JSON Schema as the output hint.

Note:
- Wire names are camelCase (as stored in the marketplace documents); Python
  code uses snake_case. Both spellings are accepted on input.
- Instances are frozen and revalidated whenever they are handed to a flow, so
  the flows never rely on the caller's static typing alone.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, conlist, model_validator
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict

MAX_SMART_LEADS = 5


class _Schema(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        revalidate_instances="always",
    )


def _ensure_unique_ids(ids: list[str], kind: str) -> None:
    seen: set[str] = set()
    for item_id in ids:
        if item_id in seen:
            raise ValueError(f"duplicate {kind} id {item_id!r}")
        seen.add(item_id)


# --- Quote analysis ---------------------------------------------------------


class JobDetails(_Schema):
    title: str = Field(..., min_length=1, description="Title of the job posted by the client.")
    description: str = Field(..., description="Client's description of the work needed.")


class ProviderReputation(_Schema):
    """Provider data denormalized onto a quote for display and analysis."""

    business_name: str = Field(..., min_length=1)
    rating: float = Field(..., ge=0, le=5, description="Average review rating (0-5).")
    reviews_count: int = Field(..., ge=0)
    years_of_experience: float = Field(..., ge=0)


class QuoteSummary(_Schema):
    id: str = Field(..., min_length=1, description="Quote document ID.")
    amount: float = Field(..., ge=0)
    currency: str = Field(..., min_length=1, description="ISO-like currency code, e.g. 'KES'.")
    message_to_client: str = Field(..., description="Provider's message accompanying the quote.")
    provider_details: ProviderReputation


class QuoteAnalysisInput(_Schema):
    job_details: JobDetails
    quotes: list[QuoteSummary] = Field(
        ...,
        min_length=1,
        description="A list of quotes received for the job.",
    )

    @model_validator(mode="after")
    def _quote_ids_unique(self) -> "QuoteAnalysisInput":
        _ensure_unique_ids([quote.id for quote in self.quotes], "quote")
        return self


class QuoteProsCons(_Schema):
    quote_id: str = Field(..., min_length=1)
    provider_name: str
    pros: list[str] = Field(..., description="Positive aspects of this specific quote/provider.")
    cons: list[str] = Field(..., description="Potential drawbacks or considerations for this quote/provider.")


class QuoteAnalysisOutput(_Schema):
    overall_summary: str = Field(
        ...,
        min_length=1,
        description="A brief, two-sentence summary of the quotes received.",
    )
    pros_cons: list[QuoteProsCons] = Field(
        ...,
        min_length=1,
        description="A pros and cons list for each individual quote.",
    )
    best_value_recommendation: str = Field(
        ...,
        min_length=1,
        description=(
            "The ID of the quote recommended as the best overall value, "
            "considering factors beyond just price."
        ),
    )


# --- Smart leads ------------------------------------------------------------


class ProviderProfileSummary(_Schema):
    id: str = Field(..., min_length=1)
    business_name: str = Field(..., min_length=1)
    main_service: str = Field(..., min_length=1)
    specialties: list[str] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    location: str
    bio: str


class AvailableJobSummary(_Schema):
    id: str = Field(..., min_length=1)
    title: str
    description: str
    service_category: str
    location: str
    budget: float | None = Field(default=None, ge=0, description="Client budget, if one was given.")


class FindSmartLeadsInput(_Schema):
    provider_profile: ProviderProfileSummary
    available_jobs: list[AvailableJobSummary] = Field(
        default_factory=list,
        description="A list of available jobs to analyze.",
    )

    @model_validator(mode="after")
    def _job_ids_unique(self) -> "FindSmartLeadsInput":
        _ensure_unique_ids([job.id for job in self.available_jobs], "job")
        return self


class LeadRecommendation(_Schema):
    job_id: str = Field(..., min_length=1, description="The ID of the recommended job.")
    reason: str = Field(
        ...,
        description="A brief explanation of why this job is a strong match for the provider.",
    )
    confidence_score: float = Field(
        ...,
        ge=0,
        le=100,
        description="A confidence score (0-100) indicating how good the match is.",
    )


# The model may return at most five leads; a longer list is non-conformant.
FindSmartLeadsOutput = conlist(LeadRecommendation, max_length=MAX_SMART_LEADS)


class SmartLead(AvailableJobSummary):
    """An open job joined with the reason it was recommended."""

    reason: str
    confidence_score: float = Field(..., ge=0, le=100)


# --- Job triage -------------------------------------------------------------


class Urgency(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"


class JobTriageInput(_Schema):
    job_title: str = Field(..., min_length=1, description="The title of the job.")
    job_description: str = Field(..., min_length=1, description="A detailed description of the job or problem.")
    service_category: str = Field(
        ...,
        min_length=1,
        description="The general category of the job (e.g., Plumbing, Electrical).",
    )


class JobTriageOutput(_Schema):
    likely_cause: str = Field(
        ...,
        description="A brief analysis of the most probable cause of the issue based on the description.",
    )
    suggested_parts: list[str] = Field(
        default_factory=list,
        description="A list of specific parts that might be required to complete the job.",
    )
    suggested_tools: list[str] = Field(
        default_factory=list,
        description="A list of tools likely needed for the job.",
    )
    urgency_assessment: Urgency = Field(..., description="An assessment of the job's urgency.")
    notes_for_artisan: str = Field(
        default="",
        description="Additional helpful notes, potential complexities, or questions to ask the client.",
    )


# --- Smart match ------------------------------------------------------------


class ProviderCandidate(_Schema):
    id: str = Field(..., min_length=1, description="The unique ID of the service provider.")
    name: str
    profile: str = ""
    location: str
    experience: str = ""
    certifications: list[str] = Field(default_factory=list)
    rating: float = Field(..., ge=0, le=5)


class SmartMatchInput(_Schema):
    job_description: str = Field(..., min_length=1, description="Detailed description of the job needed.")
    location: str = Field(..., description="The location where the service is required.")
    preferred_criteria: str = Field(
        default="",
        description="Preferred criteria for selecting a service provider (e.g., experience, rating).",
    )
    available_providers: list[ProviderCandidate] = Field(
        default_factory=list,
        description="An array of available service providers to choose from.",
    )


class SmartMatchSuggestion(_Schema):
    provider_id: str = Field(..., min_length=1, description="The ID of the suggested service provider.")
    reason: str = Field(..., description="Reason why this provider is a good match.")


SmartMatchOutput = conlist(SmartMatchSuggestion)
