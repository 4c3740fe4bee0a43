"""Marketplace directory backed by a JSON snapshot.

Supported format:
    {"providers": [...], "jobs": [...]}

Providers use the `ProviderProfileSummary` wire shape; jobs use the
`AvailableJobSummary` shape plus an optional `status` (only "open" jobs,
or jobs without a status, are listed) and an optional `postedAt` used for
newest-first ordering.

Note:
- The repo ships no data. Export a snapshot from the marketplace store and
  point the CLI at it with `--snapshot`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.models import AvailableJobSummary, ProviderProfileSummary


class _JobRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    status: str = Field(default="open")
    posted_at: str = Field(default="", alias="postedAt")


class MarketplaceSnapshot(BaseModel):
    providers: list[ProviderProfileSummary] = Field(default_factory=list)
    jobs: list[AvailableJobSummary] = Field(default_factory=list)


def load_snapshot(path: Path) -> MarketplaceSnapshot:
    raw = path.read_text(encoding="utf-8")
    data: dict[str, Any] = json.loads(raw)

    records = [(job, _JobRecord.model_validate(job)) for job in data.get("jobs", [])]
    open_records = [(job, record) for job, record in records if record.status == "open"]
    # Newest first; ISO timestamps sort lexically and `sort` keeps file order on ties.
    open_records.sort(key=lambda pair: pair[1].posted_at, reverse=True)
    open_jobs = [job for job, _ in open_records]
    return MarketplaceSnapshot.model_validate({"providers": data.get("providers", []), "jobs": open_jobs})


class JsonSnapshotDirectory:
    """`MarketplaceDirectory` reading a snapshot file once, at construction."""

    def __init__(self, path: Path) -> None:
        self._snapshot = load_snapshot(path)
        self._providers = {p.id: p for p in self._snapshot.providers}

    async def get_provider_profile(self, provider_id: str) -> ProviderProfileSummary | None:
        return self._providers.get(provider_id)

    async def list_open_jobs(self, limit: int) -> list[AvailableJobSummary]:
        return list(self._snapshot.jobs[:limit])
