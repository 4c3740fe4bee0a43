"""Fundi AI command line.

The CLI only parses arguments, loads JSON input and prints results; all the
work happens in `core.flows` and `core.services`.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Awaitable, Optional, TypeVar

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.ai_model import OpenAIModelAdapter
from adapters.json_exporter import export_result_json
from adapters.snapshot_directory import JsonSnapshotDirectory
from cli import doctor
from cli.ui_components import (
    build_leads_table,
    build_match_table,
    build_quote_analysis_panel,
    build_triage_panel,
    print_banner,
)
from core.config import AppSettings
from core.errors import ConfigurationError, EmptyOutputError, InputValidationError, ProviderNotFoundError
from core.flows import analyze_job_quotes, find_smart_leads, get_job_triage, get_smart_match_suggestions
from core.interfaces.model_adapter import ModelAdapter
from core.services.smart_leads_service import get_smart_leads

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Structured AI flows for the Fundi marketplace.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

OutputOption = typer.Option(None, "--output", "-o", help="Also write the result as JSON to this path.")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )


def build_adapter(settings: AppSettings) -> ModelAdapter:
    return OpenAIModelAdapter(settings)


def _adapter(settings: AppSettings) -> ModelAdapter:
    try:
        return build_adapter(settings)
    except ConfigurationError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


def _load_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read JSON from {path}: {exc}") from exc


def _run(coro: Awaitable[T]) -> T:
    """Run a flow and map its failures to exit codes."""

    try:
        return asyncio.run(coro)  # type: ignore[arg-type]
    except InputValidationError as exc:
        _console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    except EmptyOutputError as exc:
        _console.print(f"[red]Analysis unavailable.[/red] [dim]{exc}[/dim]")
        raise typer.Exit(code=1) from exc
    except ProviderNotFoundError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc


def _export(result: Any, output: Optional[Path]) -> None:
    if output is not None:
        path = export_result_json(result=result, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log flow transitions (DEBUG)."),
    banner: bool = typer.Option(False, "--banner", help="Print the banner first."),
) -> None:
    settings = AppSettings()
    configure_logging("DEBUG" if verbose else settings.log_level)
    if banner:
        print_banner(_console)


@app.command("analyze-quotes")
def analyze_quotes(
    input_file: Path = typer.Argument(..., help="JSON file with jobDetails and quotes."),
    output: Optional[Path] = OutputOption,
) -> None:
    """Summarize the quotes received for a job and recommend the best value."""

    settings = AppSettings()
    payload = _load_json(input_file)
    analysis = _run(analyze_job_quotes(payload, adapter=_adapter(settings), settings=settings))
    _console.print(build_quote_analysis_panel(analysis))
    _export(analysis, output)


@app.command("smart-leads")
def smart_leads(
    input_file: Path = typer.Argument(..., help="JSON file with providerProfile and availableJobs."),
    output: Optional[Path] = OutputOption,
) -> None:
    """Rank the best job leads for a provider (at most five)."""

    settings = AppSettings()
    payload = _load_json(input_file)
    leads = _run(find_smart_leads(payload, adapter=_adapter(settings), settings=settings))
    if leads:
        _console.print(build_leads_table(leads))
    else:
        _console.print("[yellow]No matching leads right now.[/yellow]")
    _export(leads, output)


@app.command("leads-for")
def leads_for(
    provider_id: str = typer.Argument(..., help="Provider ID in the snapshot."),
    snapshot: Path = typer.Option(..., "--snapshot", "-s", help="Marketplace JSON snapshot (providers + jobs)."),
    output: Optional[Path] = OutputOption,
) -> None:
    """Smart leads for a provider, read from a marketplace snapshot."""

    settings = AppSettings()
    if not snapshot.is_file():
        raise typer.BadParameter(f"Snapshot not found: {snapshot}")
    directory = JsonSnapshotDirectory(snapshot)
    leads = _run(get_smart_leads(provider_id, directory=directory, adapter=_adapter(settings), settings=settings))
    if leads:
        _console.print(build_leads_table(leads))
    else:
        _console.print("[yellow]No matching leads right now.[/yellow]")
    _export(leads, output)


@app.command()
def triage(
    title: str = typer.Option(..., "--title", help="Job title."),
    description: str = typer.Option(..., "--description", help="Description of the job or problem."),
    category: str = typer.Option(..., "--category", help="Service category (e.g. Plumbing)."),
    output: Optional[Path] = OutputOption,
) -> None:
    """Build a Smart Ticket (likely cause, tools, parts, urgency) for a job."""

    settings = AppSettings()
    payload = {"jobTitle": title, "jobDescription": description, "serviceCategory": category}
    result = _run(get_job_triage(payload, adapter=_adapter(settings), settings=settings))
    _console.print(build_triage_panel(result))
    _export(result, output)


@app.command()
def match(
    input_file: Path = typer.Argument(..., help="JSON file with jobDescription, location and availableProviders."),
    output: Optional[Path] = OutputOption,
) -> None:
    """Suggest the best providers for a job."""

    settings = AppSettings()
    payload = _load_json(input_file)
    suggestions = _run(get_smart_match_suggestions(payload, adapter=_adapter(settings), settings=settings))
    if suggestions:
        _console.print(build_match_table(suggestions))
    else:
        _console.print("[yellow]No provider suggestions.[/yellow]")
    _export(suggestions, output)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
