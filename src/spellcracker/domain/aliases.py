"""Alias indirection applied to queries before resolution.

An alias maps to a canonical query string, which is then resolved like any
other query. Aliases are applied once; an alias whose target is itself an
alias is not followed further.

Grouping aliases by card needs a catalog: :meth:`AliasTable.bind` resolves
every target and files the alias under the identifier of the matched entry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING

from .text import normalize

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

    from .model import CatalogEntry

log = getLogger(__name__)


def _empty() -> Mapping[str, str]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class AliasTable:
    targets: Mapping[str, str] = field(default_factory=_empty)
    groups: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    group_titles: Mapping[str, str] = field(default_factory=_empty)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> AliasTable:
        """Build an unbound table from ``(alias, canonical query)`` pairs.

        Alias keys are normalized. A later definition of the same alias replaces
        an earlier one.
        """

        targets: dict[str, str] = {}
        for raw_alias, raw_target in pairs:
            alias = normalize(raw_alias)
            target = raw_target.strip()
            if not alias or not target:
                log.warning("Ignoring blank alias definition %r -> %r", raw_alias, raw_target)
                continue
            previous = targets.get(alias)
            if previous is not None and previous != target:
                log.warning("Alias %r redefined: %r -> %r", alias, previous, target)
            targets[alias] = target
        return cls(targets=MappingProxyType(targets))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> AliasTable:
        return cls.from_pairs(mapping.items())

    def bind(self, resolve: Callable[[str], CatalogEntry | None]) -> AliasTable:
        """Copy of the table with aliases grouped by the entry their target resolves to."""

        groups: dict[str, list[str]] = {}
        titles: dict[str, str] = {}
        for alias, target in self.targets.items():
            entry = resolve(target)
            if entry is None:
                log.info("Alias %r -> %r matches no card", alias, target)
                continue
            groups.setdefault(entry.id, []).append(alias)
            for title in entry.titles:
                titles.setdefault(normalize(title), entry.id)

        return AliasTable(
            targets=self.targets,
            groups=MappingProxyType({key: tuple(value) for key, value in groups.items()}),
            group_titles=MappingProxyType(titles),
        )

    def __len__(self) -> int:
        return len(self.targets)

    def lookup(self, raw_query: str) -> str | None:
        """Canonical query for ``raw_query`` if it is an alias."""

        return self.targets.get(normalize(raw_query))

    def apply_alias(self, raw_query: str) -> str:
        """Normalized ``raw_query``, replaced by its canonical query if aliased."""

        query = normalize(raw_query)
        return self.targets.get(query, query)

    def list_aliases(self, identifier_or_title: str) -> tuple[str, ...]:
        """Aliases filed under an entry id or one of that entry's titles.

        Always empty on a table that has not been bound to a catalog.
        """

        found = self.groups.get(identifier_or_title)
        if found is not None:
            return found
        entry_id = self.group_titles.get(normalize(identifier_or_title))
        if entry_id is None:
            return ()
        return self.groups.get(entry_id, ())
