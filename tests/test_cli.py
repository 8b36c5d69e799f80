"""Tests for the CLI front door.

The interactive picker is patched out; these tests cover argument handling,
item loading, config fallbacks, and how picked payloads are printed.
"""

from __future__ import annotations

import io
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fuzzypick import cli
from fuzzypick.ui_theme import OCEAN_THEME, PLAIN_THEME


class CliBehaviorTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name)
        patcher = mock.patch("fuzzypick.config.CONFIG_PATH", self.root / "config" / "config.json")
        patcher.start()
        self.addCleanup(patcher.stop)

    def _write(self, name: str, text: str) -> Path:
        path = self.root / name
        path.write_text(text, encoding="utf-8")
        return path

    def _run(self, argv: list[str], payload: object) -> tuple[int, str, mock.MagicMock]:
        stdout = io.StringIO()
        with mock.patch("fuzzypick.cli.find", return_value=payload) as find_mock, mock.patch(
            "sys.stdout", stdout
        ):
            code = cli.main(argv)
        return code, stdout.getvalue(), find_mock

    def test_prints_picked_line(self) -> None:
        path = self._write("names.txt", "Frodo\nSam\n")

        code, out, find_mock = self._run([str(path)], "Sam")

        self.assertEqual(code, cli.EXIT_PICKED)
        self.assertEqual(out, "Sam\n")
        items, lines_to_show = find_mock.call_args.args
        self.assertEqual([item.label for item in items], ["Frodo", "Sam"])
        self.assertEqual(lines_to_show, 8)

    def test_cancel_returns_nonzero_without_output(self) -> None:
        path = self._write("names.txt", "Frodo\n")

        code, out, _ = self._run([str(path)], None)

        self.assertEqual(code, cli.EXIT_CANCELLED)
        self.assertEqual(out, "")

    def test_csv_output_column(self) -> None:
        path = self._write("lotr.csv", "name:bio\nFrodo:Ring-bearer\n")
        row = {"name": "Frodo", "bio": "Ring-bearer"}

        code, out, find_mock = self._run(
            [str(path), "--csv", "--delimiter", ":", "--output-column", "bio"],
            row,
        )

        self.assertEqual(code, cli.EXIT_PICKED)
        self.assertEqual(out, "Ring-bearer\n")
        items = find_mock.call_args.args[0]
        self.assertEqual(items[0].payload, row)

    def test_csv_row_is_rejoined_without_output_column(self) -> None:
        path = self._write("lotr.csv", "name:bio\nFrodo:Ring-bearer\n")

        _, out, _ = self._run([str(path), "--csv", "--delimiter", ":"], {"name": "Frodo", "bio": "Ring-bearer"})

        self.assertEqual(out, "Frodo:Ring-bearer\n")

    def test_unknown_label_column_exits_with_message(self) -> None:
        path = self._write("lotr.csv", "name:bio\nFrodo:Ring-bearer\n")

        with self.assertRaises(SystemExit) as ctx:
            self._run([str(path), "--csv", "--delimiter", ":", "--label-column", "race"], None)

        self.assertIn("race", str(ctx.exception.code))

    def test_missing_path_exits_with_message(self) -> None:
        with self.assertRaises(SystemExit) as ctx:
            self._run([str(self.root / "missing.txt")], None)

        self.assertIn("Path not found", str(ctx.exception.code))

    def test_lines_and_theme_options(self) -> None:
        path = self._write("names.txt", "Frodo\n")

        _, _, find_mock = self._run([str(path), "--lines", "3", "--theme", "ocean"], "Frodo")

        self.assertEqual(find_mock.call_args.args[1], 3)
        self.assertIs(find_mock.call_args.kwargs["theme"], OCEAN_THEME)

        _, _, find_mock = self._run([str(path), "--no-color"], "Frodo")
        self.assertIs(find_mock.call_args.kwargs["theme"], PLAIN_THEME)

    def test_save_defaults_are_used_by_later_runs(self) -> None:
        path = self._write("names.txt", "Frodo\n")

        self._run([str(path), "--lines", "5", "--theme", "OCEAN", "--save-defaults"], None)
        _, _, find_mock = self._run([str(path)], None)

        self.assertEqual(find_mock.call_args.args[1], 5)
        self.assertIs(find_mock.call_args.kwargs["theme"], OCEAN_THEME)

    def test_invalid_lines_value_is_rejected(self) -> None:
        path = self._write("names.txt", "Frodo\n")

        with mock.patch("sys.stderr", io.StringIO()):
            with self.assertRaises(SystemExit):
                self._run([str(path), "--lines", "0"], None)

    def test_terminal_errors_exit_with_message(self) -> None:
        path = self._write("names.txt", "Frodo\n")

        with mock.patch("fuzzypick.cli.find", side_effect=OSError("no tty")):
            with self.assertRaises(SystemExit) as ctx:
                cli.main([str(path)])

        self.assertIn("no tty", str(ctx.exception.code))

    def test_debug_flag_raises_log_level(self) -> None:
        path = self._write("names.txt", "Frodo\n")
        log_path = self.root / "picker.log"

        with mock.patch("fuzzypick.cli.configure_logging") as configure_mock:
            self._run([str(path), "--log-file", str(log_path), "--debug"], None)
            self._run([str(path), "--log-file", str(log_path)], None)

        self.assertEqual(
            configure_mock.call_args_list,
            [mock.call(log_path, logging.DEBUG), mock.call(log_path, logging.INFO)],
        )


if __name__ == "__main__":
    unittest.main()
