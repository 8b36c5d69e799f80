from __future__ import annotations

from collections.abc import Iterable

from .item import Item

WORD_BOUNDARY_CHARS = "/_- ."


def fuzzy_positions(query: str, candidate: str) -> tuple[int, tuple[int, ...]] | None:
    if not query:
        return 0, ()
    query_folded = query.casefold()
    candidate_folded = candidate.casefold()

    score = 0
    prev_idx = -1
    run = 0
    positions: list[int] = []
    for needle in query_folded:
        idx = candidate_folded.find(needle, prev_idx + 1)
        if idx < 0:
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or candidate_folded[idx - 1] in WORD_BOUNDARY_CHARS:
            score += 35
        positions.append(idx)
        prev_idx = idx

    score -= len(candidate_folded) // 5
    return score, tuple(positions)


def fuzzy_score(query: str, candidate: str) -> int | None:
    matched = fuzzy_positions(query, candidate)
    if matched is None:
        return None
    return matched[0]


def rank_items(query: str, items: Iterable[Item], limit: int | None = None) -> list[Item]:
    """Score ``items`` against ``query`` and return matches best-first.

    Ties break on shorter label, then on input order. An empty query keeps
    every item in input order.
    """
    scored: list[tuple[int, int, int, Item]] = []
    for idx, item in enumerate(items):
        matched = fuzzy_positions(query, item.label)
        if matched is None:
            continue
        score, positions = matched
        scored.append((score, len(item.label), idx, item.with_match(score, positions)))

    if query:
        scored.sort(key=lambda entry: (-entry[0], entry[1], entry[2]))
    ranked = [item for _, _, _, item in scored]
    if limit is not None:
        return ranked[: max(0, limit)]
    return ranked


__all__ = [
    "WORD_BOUNDARY_CHARS",
    "fuzzy_positions",
    "fuzzy_score",
    "rank_items",
]
