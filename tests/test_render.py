"""Tests for picker frame building.

Checks row padding and ordering, pointer and highlight styling, prompt
counter formatting, and the cursor movement used for inline redraws.
"""

from __future__ import annotations

import unittest

from fuzzypick.ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width
from fuzzypick.item import Item
from fuzzypick.render import (
    build_frame,
    build_frame_rows,
    build_list_rows,
    build_prompt_row,
    clear_frame,
    format_item_row,
)
from fuzzypick.ui_theme import DEFAULT_THEME, PLAIN_THEME
from fuzzypick.window import WindowedList


def _window(capacity: int, labels: list[str]) -> WindowedList[Item]:
    window: WindowedList[Item] = WindowedList(capacity)
    window.update([Item.of(label) for label in labels])
    return window


class RenderRowsTests(unittest.TestCase):
    def test_list_rows_pad_top_and_put_best_match_last(self) -> None:
        rows = build_list_rows(_window(4, ["A", "B"]), PLAIN_THEME, 80)

        self.assertEqual(rows, ["", "", "  B", "> A"])

    def test_list_rows_follow_selection(self) -> None:
        window = _window(3, ["A", "B", "C"])
        window.up()

        rows = build_list_rows(window, PLAIN_THEME, 80)

        self.assertEqual(rows, ["  C", "> B", "  A"])

    def test_empty_window_renders_blank_rows(self) -> None:
        self.assertEqual(build_list_rows(_window(2, []), PLAIN_THEME, 80), ["", ""])

    def test_item_row_highlights_matched_characters(self) -> None:
        item = Item.of("abc").with_match(5, (1,))

        row = format_item_row(item, False, DEFAULT_THEME, 80)

        self.assertIn(f"{DEFAULT_THEME.match}b{DEFAULT_THEME.reset}", row)
        self.assertEqual(ANSI_ESCAPE_RE.sub("", row), "  abc")

    def test_selected_row_uses_selection_styles(self) -> None:
        item = Item.of("abc").with_match(5, (0,))

        row = format_item_row(item, True, DEFAULT_THEME, 80)

        self.assertTrue(row.startswith(f"{DEFAULT_THEME.pointer}> "))
        self.assertIn(f"{DEFAULT_THEME.selected_match}a", row)
        self.assertIn(f"{DEFAULT_THEME.selected_row}bc", row)

    def test_rows_are_clipped_to_width(self) -> None:
        row = format_item_row(Item.of("a" * 50), True, DEFAULT_THEME, 10)

        self.assertEqual(display_width(row), 10)
        self.assertTrue(row.endswith(DEFAULT_THEME.reset))

    def test_control_characters_in_labels_are_neutralized(self) -> None:
        row = format_item_row(Item.of("a\x1bb"), False, PLAIN_THEME, 80)

        self.assertEqual(row, "  a b")

    def test_prompt_row_shows_query_and_counter(self) -> None:
        self.assertEqual(build_prompt_row("ab", 2, 10, PLAIN_THEME, 80), "> ab  2/10")
        self.assertEqual(build_prompt_row("ab", 2, 10, PLAIN_THEME, 5), "> ab ")

    def test_frame_rows_end_with_prompt(self) -> None:
        rows = build_frame_rows(_window(2, ["A"]), "", 1, 1, PLAIN_THEME, 80)

        self.assertEqual(rows, ["", "> A", ">   1/1"])


class FrameTests(unittest.TestCase):
    def test_first_frame_draws_in_place(self) -> None:
        self.assertEqual(build_frame(["a", "b"], redraw=False), "\r\x1b[2Ka\r\n\x1b[2Kb")

    def test_redraw_moves_back_to_top_of_region(self) -> None:
        self.assertEqual(build_frame(["a", "b", "c"], redraw=True), "\x1b[2A\r\x1b[2Ka\r\n\x1b[2Kb\r\n\x1b[2Kc")

    def test_clear_frame_erases_region(self) -> None:
        self.assertEqual(clear_frame(5), "\x1b[4A\r\x1b[J")
        self.assertEqual(clear_frame(1), "\r\x1b[J")
        self.assertEqual(clear_frame(0), "")


class AnsiTests(unittest.TestCase):
    def test_display_width_counts_wide_characters(self) -> None:
        self.assertEqual(display_width("\x1b[1mab\x1b[0m"), 2)
        self.assertEqual(display_width("日本"), 4)

    def test_clip_ansi_line_does_not_split_wide_characters(self) -> None:
        self.assertEqual(clip_ansi_line("日本", 3), "日")


if __name__ == "__main__":
    unittest.main()
