"""HTTP client fetching the full Witches' Revel card catalog."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import ValidationError

from spellcracker.adapters.http_resilience import ResilientClient
from spellcracker.config.catalog import get_catalog_config
from spellcracker.domain.errors import DataSourceError

from .schema import CatalogResponse
from .translator import translate_catalog

if TYPE_CHECKING:
    from collections.abc import Callable

    from spellcracker.config.catalog import CatalogConfig
    from spellcracker.config.http_resilience import ResilienceConfig
    from spellcracker.domain.model import CatalogSnapshot
    from spellcracker.domain.ports import SnapshotSource

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class CatalogFetcher:
    """Fetch ``cards/all.json`` and turn it into a ``CatalogSnapshot``.

    Every failure (transport, HTTP status, JSON, schema) surfaces as
    ``DataSourceError``; a partial catalog is never returned.
    """

    config: CatalogConfig = field(default_factory=get_catalog_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> CatalogSnapshot:
        response = asyncio.run(self._fetch_catalog_async())
        snapshot = translate_catalog(response)
        log.info(
            "Fetched catalog snapshot: cards=%s, expansions=%s",
            len(snapshot.entries),
            len(snapshot.expansions),
        )
        return snapshot

    async def _fetch_catalog_async(self) -> CatalogResponse:
        url = self.config.catalog_url
        async with self.client_factory(self.config.resilience) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
                payload = response.json()
            except httpx.HTTPError as exc:
                raise DataSourceError(f"Failed to load data from API ({url}): {exc}") from exc
            except ValueError as exc:
                raise DataSourceError(f"Invalid JSON from API ({url}): {exc}") from exc

        if not isinstance(payload, dict):
            raise DataSourceError(f"Unexpected catalog payload from {url}")
        try:
            return CatalogResponse.model_validate(payload)
        except ValidationError as exc:
            raise DataSourceError(f"Malformed catalog payload from {url}: {exc}") from exc


if TYPE_CHECKING:
    _source_check: SnapshotSource = CatalogFetcher()
