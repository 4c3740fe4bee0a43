"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.ai_model import build_model_client
from adapters.http_client import probe_url
from core.config import AppSettings, write_user_env_vars
from core.errors import ConfigurationError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

PRESETS: dict[str, dict[str, str]] = {
    "gemini": {
        "FUNDI_AI_BASE_URL": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "FUNDI_AI_MODEL": "gemini-2.0-flash",
    },
    "openai": {"FUNDI_AI_BASE_URL": "https://api.openai.com/v1", "FUNDI_AI_MODEL": "gpt-4o-mini"},
    "groq": {"FUNDI_AI_BASE_URL": "https://api.groq.com/openai/v1", "FUNDI_AI_MODEL": "llama-3.3-70b-versatile"},
    "deepseek": {"FUNDI_AI_BASE_URL": "https://api.deepseek.com", "FUNDI_AI_MODEL": "deepseek-chat"},
    "ollama": {"FUNDI_AI_BASE_URL": "http://localhost:11434/v1", "FUNDI_AI_MODEL": "llama3"},
}


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="Fundi AI Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        build_model_client(settings)
        table.add_row("AI client", "OK", "API key present" if settings.ai_api_key else "Local endpoint, no key needed")
    except ConfigurationError as exc:
        table.add_row("AI client", "FAIL", str(exc))
    table.add_row("AI base_url", "OK", settings.ai_base_url)
    table.add_row("AI model", "OK", settings.ai_model)

    ok_http, detail_http = asyncio.run(probe_url(settings.ai_base_url, settings))
    table.add_row("Model endpoint", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup-ai")
def setup_ai() -> None:
    """Interactive AI setup (stores config in the user config .env)."""

    provider = typer.prompt("AI provider", default="gemini", show_default=True).strip().lower()

    values = PRESETS.get(provider, {}).copy()
    if not values:
        _console.print("[yellow]Unknown provider preset. You can still enter custom values.[/yellow]")

    base_url = typer.prompt("AI base URL", default=values.get("FUNDI_AI_BASE_URL", ""), show_default=True).strip()
    model = typer.prompt("AI model", default=values.get("FUNDI_AI_MODEL", ""), show_default=True).strip()
    api_key = typer.prompt("AI API key", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not model:
        raise typer.BadParameter("base_url and model are required")

    env_path = write_user_env_vars(
        {
            "FUNDI_AI_BASE_URL": base_url,
            "FUNDI_AI_MODEL": model,
            "FUNDI_AI_API_KEY": api_key,
        }
    )

    _console.print(f"[green]Saved AI config to:[/green] {env_path}")
