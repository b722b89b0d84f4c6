"""Immutable records describing catalog entries and resolution results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


def _frozen_payload(payload: Mapping[str, object] | None) -> Mapping[str, object]:
    return MappingProxyType(dict(payload or {}))


@dataclass(frozen=True, slots=True)
class Printing:
    """One printed presentation of a card inside an expansion."""

    expansion_id: str
    number: str


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """A single card.

    ``titles`` holds the display titles with the primary one first. ``payload``
    carries every other field of the source record untouched; the core never
    looks inside it.
    """

    id: str
    titles: tuple[str, ...]
    prints: tuple[Printing, ...] = ()
    payload: Mapping[str, object] = field(
        default_factory=lambda: _frozen_payload(None), compare=False
    )

    def __post_init__(self) -> None:
        if not self.titles:
            raise ValueError(f"Catalog entry {self.id!r} has no title")
        object.__setattr__(self, "payload", _frozen_payload(self.payload))

    @property
    def title(self) -> str:
        return self.titles[0]


@dataclass(frozen=True, slots=True)
class Expansion:
    id: str
    name: str
    payload: Mapping[str, object] = field(
        default_factory=lambda: _frozen_payload(None), compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", _frozen_payload(self.payload))


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """Full catalog as delivered by the data source, in source order."""

    entries: tuple[CatalogEntry, ...]
    expansions: tuple[Expansion, ...] = ()


class ViewKind(StrEnum):
    FULL = "full"
    ART = "art"


@dataclass(frozen=True, slots=True)
class ResolvedReference:
    """A reference span from a text body together with the entry it resolved to."""

    entry: CatalogEntry
    view: ViewKind
    query: str
