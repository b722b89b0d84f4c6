"""Closest-match resolution of a raw query against a catalog index."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .distance import best_match
from .text import normalize

if TYPE_CHECKING:
    from .catalog_index import CatalogIndex
    from .model import CatalogEntry

log = getLogger(__name__)


def resolve(index: CatalogIndex, raw_query: str) -> CatalogEntry | None:
    """Find the entry whose title most closely matches ``raw_query``.

    Tiers, first hit wins:

    - an all upper-case query of two or more characters is tried as an acronym
    - titles that start with the query
    - titles that contain the query anywhere
    - every title in the catalog

    Inside the chosen tier the title with the smallest edit distance wins, the
    earliest one on ties. Returns ``None`` for queries that normalize to
    nothing.
    """

    query = normalize(raw_query)
    if not query:
        return None

    if len(query) > 1 and raw_query == raw_query.upper():
        entry = index.acronym_entry(query)
        if entry is not None:
            return entry

    containing = [title for title in index.normalized_titles if query in title]
    leading = [title for title in containing if title.startswith(query)]
    candidates = leading or containing or index.normalized_titles

    title = best_match(query, candidates)
    if title is None:
        return None
    entry = index.entry_for_title(title)
    if entry is None:
        log.error("Title %r has no catalog entry", title)
    return entry
