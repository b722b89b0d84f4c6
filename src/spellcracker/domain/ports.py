"""Ports for loading catalog and alias data from external sources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from .model import CatalogSnapshot


@runtime_checkable
class SnapshotSource(Protocol):
    """Callable port returning a complete catalog snapshot.

    Implementations raise ``DataSourceError`` instead of returning partial data.
    """

    def __call__(self) -> CatalogSnapshot: ...


@runtime_checkable
class AliasSource(Protocol):
    """Callable port returning the alias mapping (alias -> canonical query)."""

    def __call__(self) -> Mapping[str, str]: ...


__all__ = ["AliasSource", "SnapshotSource"]
