"""Marketplace read service contract.

Providers and jobs live in the marketplace document store; the core only
reads snapshots of them through this contract.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import AvailableJobSummary, ProviderProfileSummary


@runtime_checkable
class MarketplaceDirectory(Protocol):
    async def get_provider_profile(self, provider_id: str) -> ProviderProfileSummary | None:
        """Profile snapshot for `provider_id`, or None when it does not exist."""

        ...

    async def list_open_jobs(self, limit: int) -> list[AvailableJobSummary]:
        """Up to `limit` jobs still open for quotes, newest first."""

        ...
