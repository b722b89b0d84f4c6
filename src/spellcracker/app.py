"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from spellcracker.adapters.aliases import JsonAliasFile
from spellcracker.adapters.witchesrevel import CatalogFetcher
from spellcracker.config.catalog import get_catalog_config
from spellcracker.domain.references import extract_references
from spellcracker.domain.resolver import resolve
from spellcracker.domain.store import CatalogStore
from spellcracker.domain.text import normalize

if TYPE_CHECKING:
    import random

    from spellcracker.config.catalog import CatalogConfig
    from spellcracker.domain.model import CatalogEntry, Expansion, ResolvedReference
    from spellcracker.domain.ports import AliasSource, SnapshotSource

log = getLogger(__name__)

DEFAULT_SUGGESTION_LIMIT = 25


class CardLookupService:
    """Card lookups against the live catalog.

    Every public method reads the current index (and alias table) once, so a
    reload running in parallel never mixes old and new data within one call.
    """

    def __init__(
        self,
        *,
        config: CatalogConfig,
        snapshot_source: SnapshotSource | None = None,
        alias_source: AliasSource | None = None,
    ) -> None:
        self.config = config
        if alias_source is None and config.aliases_path is not None:
            alias_source = JsonAliasFile(config.aliases_path)
        self.store = CatalogStore(
            snapshot_source=snapshot_source or CatalogFetcher(config=config),
            alias_source=alias_source,
        )

    def start(self) -> None:
        """Load the catalog and the aliases; a catalog failure aborts startup."""

        log.info("Initialising card catalog from %s", self.config.catalog_url)
        self.store.reload_catalog()
        self.store.reload_aliases()

    def reload_catalog(self) -> int:
        return len(self.store.reload_catalog())

    def reload_aliases(self) -> int:
        return len(self.store.reload_aliases())

    def lookup(self, query: str) -> CatalogEntry | None:
        """Resolve one query, applying an alias first when one matches."""

        index = self.store.index
        canonical = self.store.aliases.lookup(query)
        return resolve(index, canonical if canonical is not None else query)

    def scan(self, text: str, *, max_results: int | None = None) -> list[ResolvedReference]:
        index = self.store.index
        return extract_references(
            text,
            resolve=lambda query: resolve(index, query),
            aliases=self.store.aliases,
            max_results=max_results if max_results is not None else self.config.result_limit,
            max_query_length=self.config.max_query_length,
        )

    def suggest(
        self, prefix: str, *, limit: int = DEFAULT_SUGGESTION_LIMIT
    ) -> list[tuple[str, str]]:
        """Autocomplete: ``(normalized title, display title)`` pairs for a prefix."""

        index = self.store.index
        titles = index.search_titles(normalize(prefix))[:limit]
        return [(title, index.denormalize(title) or title) for title in titles]

    def aliases_for(self, query: str) -> tuple[CatalogEntry | None, tuple[str, ...]]:
        """Resolve ``query`` and list the aliases pointing at the matched card."""

        entry = self.lookup(query)
        if entry is None:
            return None, ()
        return entry, self.store.aliases.list_aliases(entry.id)

    def random_card(self, rng: random.Random | None = None) -> CatalogEntry:
        return self.store.index.random_entry(rng)

    def expansion(self, expansion_id: str) -> Expansion | None:
        return self.store.index.expansion(expansion_id)


def build_service() -> CardLookupService:
    """Create a service from environment configuration and load its data."""

    service = CardLookupService(config=get_catalog_config())
    service.start()
    return service
