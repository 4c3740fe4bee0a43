"""Settings for the flows, the model adapter and the CLI.

Values come from `FUNDI_*` environment variables, then the project `.env`,
then the per-user `.env` that `fundi-ai doctor setup-ai` writes.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_env_file() -> Path:
    """The per-user `.env`, read after the project one.

    `FUNDI_CONFIG_DIR` moves it; otherwise it lives under `$XDG_CONFIG_HOME`
    (default `~/.config`) in `fundi-ai/`.
    """

    override = os.environ.get("FUNDI_CONFIG_DIR")
    if override:
        return Path(override) / ".env"
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "fundi-ai" / ".env"


def write_user_env_vars(values: Mapping[str, str | None], *, env_path: Path | None = None) -> Path:
    """Set `values` in the user .env; other lines and comments are left as they are."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.touch(exist_ok=True)
    for key, value in sorted(values.items()):
        if value is not None:
            set_key(env_path, key, value)
    return env_path


class AppSettings(BaseSettings):
    """Typed settings shared by the CLI, the adapters and the flows."""

    model_config = SettingsConfigDict(
        env_prefix="FUNDI_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    ai_api_key: str | None = Field(
        default=None,
        description="API key for the OpenAI-compatible model provider.",
    )
    ai_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta/openai/",
        min_length=8,
        description="OpenAI-compatible base URL (Gemini by default).",
    )
    ai_model: str = Field(
        default="gemini-2.0-flash",
        min_length=1,
        description="Model used by every flow.",
    )
    ai_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout for a single model call (seconds). There are no retries.",
    )
    ai_temperature: float = Field(
        default=0.2,
        ge=0.0,
        le=2.0,
    )
    ai_max_tokens: int = Field(
        default=2048,
        ge=64,
        le=32_768,
        description="Upper bound on tokens generated per call.",
    )

    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout for diagnostic HTTP checks (doctor).",
    )
    user_agent: str = Field(
        default="fundi-ai/0.1",
        min_length=1,
    )

    currency: str = Field(
        default="KES",
        min_length=1,
        description="Currency shown next to job budgets in the smart leads prompt.",
    )
    candidate_jobs_limit: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Maximum number of open jobs sent to the smart leads flow.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI (DEBUG, INFO, WARNING, ERROR).",
    )
