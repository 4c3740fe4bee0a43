"""Generative model adapter (OpenAI-compatible SDK).

Responsibilities:
- Send the rendered prompt together with the output JSON Schema.
- Pull the JSON payload out of the reply (fences, surrounding prose).
- Validate it against the requested schema.

Any transport error, empty reply, unparsable JSON or schema violation is
logged and reported as `None` (Empty). There are no retries at this layer:
one call per invocation, `max_retries=0` on the SDK client.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from openai import APIError, AsyncOpenAI

from core.config import AppSettings
from core.domain.validation import schema_hint, schema_name, validate
from core.errors import ConfigurationError, SchemaValidationError

logger = logging.getLogger(__name__)

_JSON_FENCE_RE = re.compile(r"```(?:json)?\s*([\[{].*?[\]}])\s*```", re.DOTALL | re.IGNORECASE)
_DECODER = json.JSONDecoder()


def _is_local_base_url(url: str) -> bool:
    url_l = (url or "").strip().lower()
    return url_l.startswith("http://localhost") or url_l.startswith("http://127.0.0.1") or url_l.startswith(
        "http://0.0.0.0"
    )


def build_model_client(settings: AppSettings) -> AsyncOpenAI:
    """Create the SDK client; hosted providers require an API key."""

    api_key = (settings.ai_api_key or "").strip()
    if not api_key:
        # Local OpenAI-compatible servers (Ollama, LM Studio) accept any key.
        if not _is_local_base_url(settings.ai_base_url):
            raise ConfigurationError(
                "No AI API key configured. Set FUNDI_AI_API_KEY or run `fundi-ai doctor setup-ai`."
            )
        api_key = "local"

    return AsyncOpenAI(
        api_key=api_key,
        base_url=settings.ai_base_url,
        timeout=settings.ai_timeout_seconds,
        max_retries=0,
    )


def extract_json_payload(text: str) -> str:
    """Return the first JSON object or array present in the model reply."""

    match = _JSON_FENCE_RE.search(text)
    if match:
        return match.group(1).strip()

    stripped = text.strip()
    if stripped[:1] in ("{", "[") and stripped[-1:] in ("}", "]"):
        return stripped

    # Prose around the payload: decode from the first bracket that opens a complete value.
    for start, char in enumerate(stripped):
        if char not in "{[":
            continue
        try:
            _, end = _DECODER.raw_decode(stripped, start)
        except json.JSONDecodeError:
            continue
        return stripped[start:end]

    raise ValueError("Could not locate a JSON payload in the model response.")


def build_system_prompt(output_schema: Any) -> str:
    hint = json.dumps(schema_hint(output_schema), ensure_ascii=False, sort_keys=True)
    return (
        "You are a backend component of a services marketplace. "
        "Answer with STRICT JSON only (no prose, no code fences) that conforms to this JSON Schema:\n"
        f"{hint}"
    )


class OpenAIModelAdapter:
    """`ModelAdapter` backed by any OpenAI-compatible chat completions endpoint."""

    def __init__(self, settings: AppSettings | None = None, *, client: AsyncOpenAI | None = None) -> None:
        self._settings = settings or AppSettings()
        self._client = client or build_model_client(self._settings)

    @property
    def model(self) -> str:
        return self._settings.ai_model

    async def invoke(self, prompt: str, output_schema: Any) -> Any | None:
        name = schema_name(output_schema)
        messages = [
            {"role": "system", "content": build_system_prompt(output_schema)},
            {"role": "user", "content": prompt},
        ]

        try:
            response = await self._client.chat.completions.create(
                model=self._settings.ai_model,
                messages=messages,  # type: ignore[arg-type]
                temperature=self._settings.ai_temperature,
                max_tokens=self._settings.ai_max_tokens,
            )
        except APIError as exc:
            logger.warning("Model call failed (%s): %s", type(exc).__name__, exc)
            return None

        content = ""
        if response.choices:
            content = (response.choices[0].message.content or "").strip()
        if not content:
            logger.warning("Model returned no content for %s", name)
            return None

        try:
            data: Any = json.loads(extract_json_payload(content))
        except ValueError as exc:
            logger.warning("Model reply for %s is not JSON: %s", name, exc)
            return None

        try:
            return validate(output_schema, data)
        except SchemaValidationError as exc:
            logger.warning("Model reply does not conform: %s", exc)
            return None
