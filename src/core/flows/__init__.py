"""Flow orchestrators: validate input, render the prompt, invoke the model, post-process.

Public entry points:
- `analyze_job_quotes` (fails on Empty)
- `find_smart_leads` (Empty -> [])
- `get_job_triage` (fails on Empty)
- `get_smart_match_suggestions` (Empty -> [])
"""

from core.flows.base import FlowHooks, FlowSpec, FlowState
from core.flows.job_triage import get_job_triage
from core.flows.quote_analysis import analyze_job_quotes
from core.flows.registry import FLOW_SPECS
from core.flows.smart_leads import find_smart_leads
from core.flows.smart_match import get_smart_match_suggestions

__all__ = [
    "FLOW_SPECS",
    "FlowHooks",
    "FlowSpec",
    "FlowState",
    "analyze_job_quotes",
    "find_smart_leads",
    "get_job_triage",
    "get_smart_match_suggestions",
]
