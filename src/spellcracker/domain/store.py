"""Owner of the live catalog index and alias table.

Readers take the current reference once per operation and work on that
object for the rest of the call. Writers build a complete replacement first
and publish it with a single attribute assignment, so a reader sees either
the old structure or the new one, never a mix. The catalog and the aliases
have separate writer locks, so an alias reload never waits for a catalog
fetch.
"""

from __future__ import annotations

import threading
from logging import getLogger
from typing import TYPE_CHECKING

from .aliases import AliasTable
from .catalog_index import CatalogIndex, build_index
from .errors import AliasSourceError, CatalogNotLoadedError, DataSourceError
from .resolver import resolve

if TYPE_CHECKING:
    from .ports import AliasSource, SnapshotSource

log = getLogger(__name__)


class CatalogStore:
    def __init__(
        self,
        *,
        snapshot_source: SnapshotSource,
        alias_source: AliasSource | None = None,
    ) -> None:
        self._snapshot_source = snapshot_source
        self._alias_source = alias_source
        self._index: CatalogIndex | None = None
        self._aliases = AliasTable()
        # (index, unbound table, bound table) for the last pair handed out
        self._bound: tuple[CatalogIndex | None, AliasTable, AliasTable] | None = None
        self._catalog_lock = threading.Lock()
        self._alias_lock = threading.Lock()

    @property
    def loaded(self) -> bool:
        return self._index is not None

    @property
    def index(self) -> CatalogIndex:
        index = self._index
        if index is None:
            raise CatalogNotLoadedError("Catalog has not been loaded yet")
        return index

    @property
    def aliases(self) -> AliasTable:
        """Current alias table, grouped against the current index."""

        index, table = self._index, self._aliases
        cached = self._bound
        if cached is not None and cached[0] is index and cached[1] is table:
            return cached[2]
        if index is None:
            bound = table
        else:
            bound = table.bind(lambda query: resolve(index, query))
        self._bound = (index, table, bound)
        return bound

    def reload_catalog(self) -> CatalogIndex:
        """Fetch a fresh snapshot and swap in a new index.

        On failure the previous index stays live and the error propagates.
        """

        with self._catalog_lock:
            try:
                snapshot = self._snapshot_source()
                index = build_index(snapshot)
            except DataSourceError as exc:
                log.warning("Catalog reload failed; keeping the previous index: %s", exc)
                raise
            self._index = index
        log.info(
            "Catalog loaded: entries=%s, acronyms=%s, expansions=%s",
            len(index),
            len(index.acronyms),
            len(index.expansions),
        )
        return index

    def reload_aliases(self) -> AliasTable:
        """Reload the alias table; the catalog index is left alone."""

        with self._alias_lock:
            if self._alias_source is None:
                table = AliasTable()
            else:
                try:
                    table = AliasTable.from_mapping(self._alias_source())
                except AliasSourceError as exc:
                    log.warning("Alias reload failed; keeping the previous aliases: %s", exc)
                    raise
            self._aliases = table
        log.info("Aliases loaded: %s", len(table))
        return table
