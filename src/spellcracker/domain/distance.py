"""Edit distance ranking for candidate titles."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insert/delete/substitute costs."""

    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    # keep the inner row short
    if len(b) > len(a):
        a, b = b, a
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            ins = curr[j - 1] + 1
            dele = prev[j] + 1
            sub = prev[j - 1] + (ca != cb)
            curr.append(min(ins, dele, sub))
        prev = curr
    return prev[-1]


def best_match(query: str, candidates: Iterable[str]) -> str | None:
    """Return the candidate closest to ``query``; ties go to the earliest one."""

    best: str | None = None
    best_distance = -1
    for candidate in candidates:
        distance = edit_distance(query, candidate)
        if best is None or distance < best_distance:
            best = candidate
            best_distance = distance
            if distance == 0:
                break
    return best
