"""Extraction of inline card references from a message body.

``[[name]]`` asks for the full card, ``{{name}}`` for its art only. ``<<name>>``
is reserved: it is matched so that it never overlaps other spans, but it
produces no output. Anything inside a fenced code block is ignored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .model import ResolvedReference, ViewKind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .aliases import AliasTable
    from .model import CatalogEntry

log = getLogger(__name__)

DEFAULT_MAX_RESULTS = 5
DEFAULT_MAX_QUERY_LENGTH = 255

_CODE_BLOCK = re.compile(r"(?<!\\)```[\s\S]*?```")
_SPAN = re.compile(r"\[\[.*?\]\]|\{\{.*?\}\}|<<.*?>>")

_VIEWS: dict[str, ViewKind | None] = {
    "[": ViewKind.FULL,
    "{": ViewKind.ART,
    "<": None,
}


@dataclass(frozen=True, slots=True)
class ReferenceSpan:
    """A delimiter-wrapped piece of text; ``view`` is ``None`` for reserved spans."""

    query: str
    view: ViewKind | None
    start: int


def strip_code_blocks(text: str) -> str:
    return _CODE_BLOCK.sub("", text)


def find_spans(text: str) -> Iterator[ReferenceSpan]:
    """Yield reference spans left to right, code blocks excluded."""

    for match in _SPAN.finditer(strip_code_blocks(text)):
        raw = match.group()
        yield ReferenceSpan(query=raw[2:-2].strip(), view=_VIEWS[raw[0]], start=match.start())


def extract_references(
    text: str,
    *,
    resolve: Callable[[str], CatalogEntry | None],
    aliases: AliasTable | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
    max_query_length: int = DEFAULT_MAX_QUERY_LENGTH,
) -> list[ResolvedReference]:
    """Resolve every reference in ``text``, in order, up to ``max_results``.

    Empty or over-long spans, reserved spans, queries without a match and
    repeats of an already emitted card are skipped without using up a slot.
    """

    found: list[ResolvedReference] = []
    if max_results < 1:
        return found
    seen: set[str] = set()

    for span in find_spans(text):
        if not span.query or len(span.query) > max_query_length:
            log.debug(
                "Skipping malformed reference span at %d (%d chars)", span.start, len(span.query)
            )
            continue
        if span.view is None:
            log.debug("Skipping reserved reference span %r", span.query)
            continue

        canonical = aliases.lookup(span.query) if aliases is not None else None
        entry = resolve(canonical if canonical is not None else span.query)
        if entry is None:
            log.info("Card not found with query %r", span.query)
            continue
        if entry.id in seen:
            continue
        seen.add(entry.id)

        found.append(ResolvedReference(entry=entry, view=span.view, query=span.query))
        if len(found) >= max_results:
            break

    return found
