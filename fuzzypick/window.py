"""Windowed selection list behind the picker UI.

Holds a bounded slice of ranked matches split into rows above the selection,
the selected row, and rows below it. No rendering and no input handling.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Iterator, Sized
from itertools import islice
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EmptySelectionError(LookupError):
    """Raised when the selected item is requested from an empty list."""


class InvariantViolation(RuntimeError):
    """Raised when ``selected`` is empty while other rows are visible."""


class _VisibleItems(Generic[T]):
    """Restartable view over the visible rows in display order."""

    def __init__(self, window: WindowedList[T]) -> None:
        self._window = window

    def __iter__(self) -> Iterator[T]:
        window = self._window
        yield from window.above
        if window.selected is not None:
            yield window.selected
        yield from window.below

    def __len__(self) -> int:
        return len(self._window)


class WindowedList(Generic[T]):
    """A list of visible items with exactly one selected, unless empty.

    The selection is encoded by three segments: ``above`` (rows above the
    selection, nearest last), ``selected`` and ``below`` (rows below the
    selection, nearest first). For ``above = [1, 2]``, ``selected = 3`` and
    ``below = [4, 5, 6]`` the rows read 1, 2, (3), 4, 5, 6.

    ``selected`` is ``None`` only when the list holds no items at all.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self._capacity = capacity
        self.above: deque[T] = deque()
        self.selected: T | None = None
        self.below: deque[T] = deque()

    def __repr__(self) -> str:
        return (
            f"WindowedList(capacity={self._capacity}, above={list(self.above)!r}, "
            f"selected={self.selected!r}, below={list(self.below)!r})"
        )

    def visible_items(self) -> _VisibleItems[T]:
        """Items in display order, top to bottom."""
        return _VisibleItems(self)

    def tagged_visible_items(self) -> Iterator[tuple[bool, T]]:
        """Yield ``(is_selected, item)`` pairs in display order."""
        selected_index = self.len_above()
        for index, item in enumerate(self.visible_items()):
            yield index == selected_index, item

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self.above) + (0 if self.selected is None else 1) + len(self.below)

    def len_above(self) -> int:
        return len(self.above)

    def len_below(self) -> int:
        return len(self.below)

    def is_empty(self) -> bool:
        # Equivalent to all three segments being empty while the invariant holds.
        return self.selected is None

    def get_selected(self) -> T:
        """Return the selected item; callers must check ``is_empty()`` first."""
        if self.selected is None:
            raise EmptySelectionError("no item is selected in an empty list")
        return self.selected

    def up(self) -> None:
        """Move the selection one row towards the top; no-op at the top."""
        if not self.above:
            return
        if self.selected is None:
            raise InvariantViolation("selection is empty while rows remain above it")
        self.below.appendleft(self.selected)
        self.selected = self.above.pop()

    def down(self) -> None:
        """Move the selection one row towards the bottom; no-op at the bottom."""
        if not self.below:
            return
        if self.selected is None:
            raise InvariantViolation("selection is empty while rows remain below it")
        self.above.append(self.selected)
        self.selected = self.below.popleft()

    def update(self, matches: Iterable[T]) -> None:
        """Replace the visible rows with the best of ``matches``.

        ``matches`` must already be sorted best-first. The best match is
        shown at the bottom of the window. When the list already had a
        selection, the number of rows below it is kept so the cursor stays
        on the same screen row; otherwise the best match becomes selected.
        """
        was_empty = self.is_empty()
        prior_selected_count = 0 if self.selected is None else 1
        prior_below_len = len(self.below)
        target_above_len = max(0, self._capacity - prior_selected_count - prior_below_len)

        self.above.clear()
        self.below.clear()
        self.selected = None

        total = len(matches) if isinstance(matches, Sized) else None
        taken = list(islice(matches, self._capacity))
        if total is None:
            logger.info("Updating view, showing %d match(es)", len(taken))
        else:
            logger.info("Updating view with %d match(es)", total)

        if was_empty:
            # Bottom item of ``above`` is promoted below, so the best match gets selected.
            self.above.extend(reversed(taken))
        else:
            self.below.extend(reversed(taken[:prior_below_len]))
            if len(taken) > prior_below_len:
                self.selected = taken[prior_below_len]
            rest = taken[prior_below_len + 1 : prior_below_len + 1 + target_above_len]
            self.above.extend(reversed(rest))

        if self.selected is None:
            if self.below:
                self.selected = self.below.popleft()
            elif self.above:
                self.selected = self.above.pop()


__all__ = [
    "EmptySelectionError",
    "InvariantViolation",
    "WindowedList",
]
