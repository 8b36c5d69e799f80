"""Display item wrapper used by the picker.

Pairs a display label with an opaque payload delivered on confirmation.
Scored copies also carry the label positions that matched the query.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Item:
    """One pickable row: label to show and match against, payload to return."""

    label: str
    payload: Any = None
    score: int = 0
    positions: tuple[int, ...] = ()

    def __hash__(self) -> int:
        # Payloads may be unhashable (CSV rows are dicts).
        return hash(self.label)

    @classmethod
    def of(cls, label: str, payload: Any = None) -> Item:
        """Build an item whose payload defaults to its own label."""
        return cls(label=label, payload=label if payload is None else payload)

    def with_match(self, score: int, positions: tuple[int, ...] = ()) -> Item:
        """Return a copy carrying the latest match score and positions."""
        return replace(self, score=score, positions=tuple(positions))

    def highlighted_segments(self) -> list[tuple[str, bool]]:
        """Split ``label`` into runs of ``(text, is_match)`` for rendering."""
        if not self.positions:
            return [(self.label, False)] if self.label else []
        matched = set(self.positions)
        segments: list[tuple[str, bool]] = []
        run: list[str] = []
        run_is_match = False
        for idx, ch in enumerate(self.label):
            is_match = idx in matched
            if run and is_match != run_is_match:
                segments.append(("".join(run), run_is_match))
                run = []
            run.append(ch)
            run_is_match = is_match
        if run:
            segments.append(("".join(run), run_is_match))
        return segments


__all__ = ["Item"]
