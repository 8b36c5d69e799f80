"""Interactive picker session and its terminal loop.

``FinderSession`` owns the query, the ranked matches, and the windowed list;
it maps key tokens to state changes and knows nothing about the terminal.
``run_session`` and ``find`` wire a session to a tty for one interactive run.
"""

from __future__ import annotations

import enum
import logging
import os
from collections.abc import Callable, Sequence
from typing import Any

from .input import read_key
from .item import Item
from .matching import rank_items
from .render import build_frame, build_frame_rows, clear_frame
from .terminal import TerminalController
from .ui_theme import UITheme, resolve_theme
from .window import WindowedList

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"
RESIZE_POLL_MS = 250
DEFAULT_TERMINAL_COLUMNS = 80
DEFAULT_TERMINAL_ROWS = 24

ACCEPT_KEYS = frozenset({"ENTER_CR", "ENTER_LF"})
CANCEL_KEYS = frozenset({"ESC", "CTRL_C"})
UP_KEYS = frozenset({"UP", "CTRL_P"})
DOWN_KEYS = frozenset({"DOWN", "CTRL_N"})


class FinderOutcome(enum.Enum):
    CONTINUE = "continue"
    ACCEPT = "accept"
    CANCEL = "cancel"


def _delete_last_word(query: str) -> str:
    trimmed = query.rstrip()
    cut = trimmed.rfind(" ")
    return trimmed[: cut + 1]


class FinderSession:
    """Query, ranked matches, and visible window for one picker run."""

    def __init__(self, items: Sequence[Item], lines_to_show: int) -> None:
        self.items: list[Item] = list(items)
        self.query = ""
        self.matches: list[Item] = []
        self.window: WindowedList[Item] = WindowedList(lines_to_show)
        self.dirty = True

    @property
    def match_count(self) -> int:
        return len(self.matches)

    def refresh_matches(self) -> None:
        """Re-rank all items for the current query and refill the window."""
        self.matches = rank_items(self.query, self.items)
        logger.debug("Query %r matched %d of %d item(s)", self.query, len(self.matches), len(self.items))
        self.window.update(self.matches)
        self.dirty = True

    def set_query(self, query: str) -> None:
        if query == self.query:
            return
        self.query = query
        self.refresh_matches()

    def selected_item(self) -> Item | None:
        if self.window.is_empty():
            return None
        return self.window.get_selected()

    def selected_payload(self) -> Any:
        item = self.selected_item()
        return None if item is None else item.payload

    def handle_key(self, key: str) -> FinderOutcome:
        """Apply one key token and report whether the session should end."""
        if key in CANCEL_KEYS:
            return FinderOutcome.CANCEL
        if key in ACCEPT_KEYS:
            if self.window.is_empty():
                return FinderOutcome.CONTINUE
            return FinderOutcome.ACCEPT
        if key in UP_KEYS:
            self.window.up()
            self.dirty = True
            return FinderOutcome.CONTINUE
        if key in DOWN_KEYS:
            self.window.down()
            self.dirty = True
            return FinderOutcome.CONTINUE
        if key == "BACKSPACE":
            self.set_query(self.query[:-1])
            return FinderOutcome.CONTINUE
        if key == "CTRL_W":
            self.set_query(_delete_last_word(self.query))
            return FinderOutcome.CONTINUE
        if key == "CTRL_U":
            self.set_query("")
            return FinderOutcome.CONTINUE
        if len(key) == 1 and key.isprintable():
            self.set_query(self.query + key)
        return FinderOutcome.CONTINUE


def terminal_columns(fd: int) -> int:
    try:
        return max(1, os.get_terminal_size(fd).columns)
    except OSError:
        return DEFAULT_TERMINAL_COLUMNS


def terminal_rows(fd: int) -> int:
    try:
        return max(1, os.get_terminal_size(fd).lines)
    except OSError:
        return DEFAULT_TERMINAL_ROWS


def run_session(
    session: FinderSession,
    terminal: TerminalController,
    theme: UITheme,
    *,
    read_key_fn: Callable[..., str] = read_key,
    columns: Callable[[], int] | None = None,
) -> FinderOutcome:
    """Draw and drive ``session`` until the user accepts or cancels.

    The drawn region is erased before returning, also when an exception
    escapes the loop.
    """
    get_columns = columns or (lambda: terminal_columns(terminal.stdout_fd))
    frame_height = session.window.capacity + 1
    drawn = False
    last_width = -1
    with terminal.raw_mode():
        try:
            while True:
                width = get_columns()
                if width != last_width:
                    last_width = width
                    session.dirty = True
                if session.dirty:
                    rows = build_frame_rows(
                        session.window,
                        session.query,
                        session.match_count,
                        len(session.items),
                        theme,
                        width,
                    )
                    terminal.write(build_frame(rows, redraw=drawn))
                    drawn = True
                    session.dirty = False

                key = read_key_fn(terminal.stdin_fd, timeout_ms=RESIZE_POLL_MS)
                if not key:
                    continue
                outcome = session.handle_key(key)
                if outcome is not FinderOutcome.CONTINUE:
                    return outcome
        finally:
            if drawn:
                terminal.write(clear_frame(frame_height))


def find(
    items: Sequence[Item],
    lines_to_show: int,
    *,
    theme: UITheme | None = None,
    tty_path: str = TTY_PATH,
) -> Any:
    """Let the user pick one of ``items`` and return its payload.

    Returns ``None`` when the user cancels or when there is nothing to pick.
    The picker reads keys from and draws to the controlling terminal, so
    standard input and output stay free for piping.
    """
    if not items:
        logger.info("No items to pick from")
        return None

    fd = os.open(tty_path, os.O_RDWR)
    try:
        # The list rows plus the prompt row must fit on screen for redraws to line up.
        capped = max(1, min(lines_to_show, terminal_rows(fd) - 1))
        if capped != lines_to_show:
            logger.info("Showing %d row(s) instead of %d to fit the terminal", capped, lines_to_show)
        session = FinderSession(items, capped)
        session.refresh_matches()
        terminal = TerminalController(stdin_fd=fd, stdout_fd=fd)
        outcome = run_session(session, terminal, theme or resolve_theme(None))
    finally:
        os.close(fd)

    if outcome is FinderOutcome.ACCEPT:
        selected = session.selected_item()
        logger.info("Picked %r", None if selected is None else selected.label)
        return session.selected_payload()
    logger.info("Picker cancelled")
    return None


__all__ = [
    "FinderOutcome",
    "FinderSession",
    "find",
    "run_session",
]
