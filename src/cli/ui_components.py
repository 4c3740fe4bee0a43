"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Tables/panels are reused by several commands.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    JobTriageOutput,
    LeadRecommendation,
    QuoteAnalysisOutput,
    SmartLead,
    SmartMatchSuggestion,
)


def print_banner(console: Console) -> None:
    title = Text("FUNDI AI", style="bold cyan")
    subtitle = Text("Quote analysis • Smart leads • Job triage • Smart match", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_quote_analysis_panel(analysis: QuoteAnalysisOutput) -> Panel:
    body = Text()
    body.append(analysis.overall_summary.strip() + "\n")
    for entry in analysis.pros_cons:
        best = entry.quote_id == analysis.best_value_recommendation
        body.append(f"\n{entry.provider_name} ", style="bold")
        body.append(f"({entry.quote_id})", style="dim")
        if best:
            body.append("  ★ best value", style="bold green")
        body.append("\n")
        for pro in entry.pros:
            body.append(f"  + {pro}\n", style="green")
        for con in entry.cons:
            body.append(f"  - {con}\n", style="red")

    return Panel(body, title=Text("Quote Analysis", style="bold yellow"), border_style="yellow")


def build_leads_table(leads: Sequence[LeadRecommendation | SmartLead]) -> Table:
    table = Table(title="Smart Leads")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("Job", style="cyan", no_wrap=True)
    table.add_column("Confidence", style="green", justify="right")
    table.add_column("Reason", style="white")
    for index, lead in enumerate(leads, start=1):
        job = f"{lead.title} ({lead.id})" if isinstance(lead, SmartLead) else lead.job_id
        table.add_row(str(index), job, f"{lead.confidence_score:g}", lead.reason)
    return table


def build_triage_panel(triage: JobTriageOutput) -> Panel:
    body = Text()
    body.append("Likely cause: ", style="bold")
    body.append(triage.likely_cause + "\n")
    body.append("Urgency: ", style="bold")
    body.append(triage.urgency_assessment.value + "\n")
    if triage.suggested_tools:
        body.append("\nTools:\n", style="bold")
        for tool in triage.suggested_tools:
            body.append(f"- {tool}\n")
    if triage.suggested_parts:
        body.append("\nParts:\n", style="bold")
        for part in triage.suggested_parts:
            body.append(f"- {part}\n")
    if triage.notes_for_artisan:
        body.append("\nNotes: ", style="bold")
        body.append(triage.notes_for_artisan)

    return Panel(body, title=Text("Smart Ticket", style="bold yellow"), border_style="yellow")


def build_match_table(suggestions: Sequence[SmartMatchSuggestion]) -> Table:
    table = Table(title="Suggested Providers")
    table.add_column("Provider", style="cyan", no_wrap=True)
    table.add_column("Reason", style="white")
    for suggestion in suggestions:
        table.add_row(suggestion.provider_id, suggestion.reason)
    return table
