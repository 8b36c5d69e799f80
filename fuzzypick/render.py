"""Frame building for the inline picker.

A frame is ``capacity`` list rows followed by the prompt row. The list grows
upwards from the prompt, so short result sets are padded with blank rows at
the top. Everything here is pure string building; writing is the caller's job.
"""

from __future__ import annotations

from .ansi import clip_ansi_line, sanitize_label
from .item import Item
from .ui_theme import UITheme
from .window import WindowedList

POINTER = "> "
NO_POINTER = "  "
PROMPT = "> "
CLEAR_LINE = "\x1b[2K"


def format_item_row(item: Item, selected: bool, theme: UITheme, width: int) -> str:
    """Render one list row with pointer, match highlights and clipping."""
    base_style = theme.selected_row if selected else theme.row
    match_style = theme.selected_match if selected else theme.match
    out: list[str] = []
    if selected:
        out.append(f"{theme.pointer}{POINTER}{theme.reset}")
    else:
        out.append(NO_POINTER)
    for text, is_match in item.highlighted_segments():
        style = match_style if is_match else base_style
        out.append(f"{style}{sanitize_label(text)}{theme.reset}")
    return clip_ansi_line("".join(out), width)


def build_list_rows(window: WindowedList[Item], theme: UITheme, width: int) -> list[str]:
    """Return exactly ``window.capacity`` rows, blank-padded at the top."""
    rows = [format_item_row(item, is_selected, theme, width) for is_selected, item in window.tagged_visible_items()]
    padding = max(0, window.capacity - len(rows))
    return [""] * padding + rows


def build_prompt_row(query: str, matched: int, total: int, theme: UITheme, width: int) -> str:
    """Render the query prompt with a ``matched/total`` counter."""
    row = (
        f"{theme.prompt}{PROMPT}{theme.reset}"
        f"{theme.query}{sanitize_label(query)}{theme.reset}"
        f"  {theme.counter}{matched}/{total}{theme.reset}"
    )
    return clip_ansi_line(row, width)


def build_frame_rows(
    window: WindowedList[Item],
    query: str,
    matched: int,
    total: int,
    theme: UITheme,
    width: int,
) -> list[str]:
    return build_list_rows(window, theme, width) + [build_prompt_row(query, matched, total, theme, width)]


def build_frame(rows: list[str], *, redraw: bool) -> str:
    """Join frame rows into one write.

    With ``redraw`` the cursor is first moved from the prompt row back to the
    top of the previously drawn region, which has the same height.
    """
    prefix = ""
    if redraw and len(rows) > 1:
        prefix = f"\x1b[{len(rows) - 1}A"
    return prefix + "\r" + "\r\n".join(f"{CLEAR_LINE}{row}" for row in rows)


def clear_frame(row_count: int) -> str:
    """Erase a drawn region of ``row_count`` rows, leaving the cursor at its top."""
    if row_count <= 0:
        return ""
    prefix = f"\x1b[{row_count - 1}A" if row_count > 1 else ""
    return prefix + "\r\x1b[J"


__all__ = [
    "POINTER",
    "build_frame",
    "build_frame_rows",
    "build_list_rows",
    "build_prompt_row",
    "clear_frame",
    "format_item_row",
]
