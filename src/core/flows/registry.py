"""Process-wide, read-only flow specifications."""

from __future__ import annotations

from types import MappingProxyType

from adapters.ai_model import OpenAIModelAdapter
from core.config import AppSettings
from core.domain.models import (
    FindSmartLeadsInput,
    FindSmartLeadsOutput,
    JobTriageInput,
    JobTriageOutput,
    QuoteAnalysisInput,
    QuoteAnalysisOutput,
    SmartMatchInput,
    SmartMatchOutput,
)
from core.flows.base import FlowSpec
from core.interfaces.model_adapter import ModelAdapter
from core.prompts.templates import (
    JOB_TRIAGE_TEMPLATE,
    QUOTE_ANALYSIS_TEMPLATE,
    SMART_LEADS_TEMPLATE,
    SMART_MATCH_TEMPLATE,
)

QUOTE_ANALYSIS = FlowSpec("quoteAnalysis", QuoteAnalysisInput, QuoteAnalysisOutput, QUOTE_ANALYSIS_TEMPLATE)
SMART_LEADS = FlowSpec("smartLeads", FindSmartLeadsInput, FindSmartLeadsOutput, SMART_LEADS_TEMPLATE)
JOB_TRIAGE = FlowSpec("jobTriage", JobTriageInput, JobTriageOutput, JOB_TRIAGE_TEMPLATE)
SMART_MATCH = FlowSpec("smartMatchSuggestions", SmartMatchInput, SmartMatchOutput, SMART_MATCH_TEMPLATE)

FLOW_SPECS = MappingProxyType({spec.name: spec for spec in (QUOTE_ANALYSIS, SMART_LEADS, JOB_TRIAGE, SMART_MATCH)})


def resolve_adapter(adapter: ModelAdapter | None, settings: AppSettings | None) -> ModelAdapter:
    if adapter is not None:
        return adapter
    return OpenAIModelAdapter(settings)
