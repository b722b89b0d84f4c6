"""Text normalization shared by indexing and querying.

Both sides of a lookup must go through ``normalize`` or matches silently fail.
"""

from __future__ import annotations

import re
import unicodedata

_DISALLOWED = re.compile(r"[^a-z0-9\s]")


def normalize(value: str) -> str:
    """Fold ``value`` into its lookup form.

    Diacritics are folded to their base letters, everything is lower-cased,
    characters other than ASCII letters, digits and whitespace are dropped, and
    whitespace runs collapse to a single space.

    >>> normalize("  Witch's   Brew! ")
    'witchs brew'
    """

    text = unicodedata.normalize("NFKD", value)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = _DISALLOWED.sub("", text.casefold())
    return " ".join(text.split())


def acronym(normalized: str) -> str:
    """First character of each word of an already normalized title."""

    return "".join(word[0] for word in normalized.split(" ") if word)
