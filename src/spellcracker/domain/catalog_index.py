"""Derived lookup structures over one catalog snapshot.

An index is built in full by ``build_index`` and never mutated afterwards.
Reloading means building a new index and swapping it in (see
``spellcracker.domain.store``).

Collisions between entries are resolved by catalog order: the first entry to
claim an id, a normalized title or an acronym keeps it.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from .errors import DataSourceError
from .text import acronym, normalize

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .model import CatalogEntry, CatalogSnapshot, Expansion

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CatalogIndex:
    by_id: Mapping[str, CatalogEntry]
    normalized_titles: tuple[str, ...]
    denormalized: Mapping[str, str]
    ids_by_title: Mapping[str, str]
    acronyms: Mapping[str, str]
    prefix_buckets: Mapping[str, tuple[str, ...]]
    expansions: Mapping[str, Expansion]

    def __len__(self) -> int:
        return len(self.by_id)

    def entry(self, entry_id: str) -> CatalogEntry | None:
        return self.by_id.get(entry_id)

    def entry_for_title(self, normalized_title: str) -> CatalogEntry | None:
        entry_id = self.ids_by_title.get(normalized_title)
        if entry_id is None:
            return None
        return self.by_id.get(entry_id)

    def acronym_entry(self, value: str) -> CatalogEntry | None:
        entry_id = self.acronyms.get(value)
        if entry_id is None:
            return None
        return self.by_id.get(entry_id)

    def denormalize(self, normalized_title: str) -> str | None:
        """Original display form of a normalized title."""

        return self.denormalized.get(normalized_title)

    def search_titles(self, prefix: str) -> list[str]:
        """Normalized titles starting with ``prefix`` (which must be normalized)."""

        if not prefix:
            return []
        bucket = self.prefix_buckets.get(prefix[0], ())
        return [title for title in bucket if title.startswith(prefix)]

    def expansion(self, expansion_id: str) -> Expansion | None:
        return self.expansions.get(expansion_id)

    def random_entry(self, rng: random.Random | None = None) -> CatalogEntry:
        chooser = rng or random
        return self.by_id[chooser.choice(tuple(self.by_id))]


def build_index(snapshot: CatalogSnapshot) -> CatalogIndex:
    """Build every lookup structure for ``snapshot``.

    Raises ``DataSourceError`` when the snapshot has no entries or an entry
    lacks an id; nothing is published in that case.
    """

    if not snapshot.entries:
        raise DataSourceError("Catalog snapshot contains no entries")

    by_id: dict[str, CatalogEntry] = {}
    normalized_titles: list[str] = []
    denormalized: dict[str, str] = {}
    ids_by_title: dict[str, str] = {}
    acronyms: dict[str, str] = {}
    buckets: dict[str, list[str]] = {}

    for entry in snapshot.entries:
        if not entry.id:
            raise DataSourceError(f"Catalog entry without id: {entry.title!r}")
        if entry.id in by_id:
            log.warning(
                "Duplicate catalog id %s (%r); keeping the first entry", entry.id, entry.title
            )
            continue
        by_id[entry.id] = entry

        normalized = normalize(entry.title)
        normalized_titles.append(normalized)
        denormalized.setdefault(normalized, entry.title)
        ids_by_title.setdefault(normalized, entry.id)
        if not normalized:
            log.debug("Title %r of %s normalizes to nothing", entry.title, entry.id)
            continue

        short = acronym(normalized)
        claimed = acronyms.setdefault(short, entry.id)
        if claimed != entry.id:
            log.debug("Acronym %r of %s already taken by %s", short, entry.id, claimed)

        buckets.setdefault(normalized[0], []).append(normalized)

    expansions: dict[str, Expansion] = {}
    for expansion in snapshot.expansions:
        expansions.setdefault(expansion.id, expansion)

    return CatalogIndex(
        by_id=MappingProxyType(by_id),
        normalized_titles=tuple(normalized_titles),
        denormalized=MappingProxyType(denormalized),
        ids_by_title=MappingProxyType(ids_by_title),
        acronyms=MappingProxyType(acronyms),
        prefix_buckets=MappingProxyType(
            {char: tuple(titles) for char, titles in buckets.items()}
        ),
        expansions=MappingProxyType(expansions),
    )
