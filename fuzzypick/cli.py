"""Command-line front door for fuzzypick.

Parses CLI options, loads items from a file or standard input, and runs the
interactive picker. The picked payload is printed to standard output.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import config
from .finder import find
from .item import Item
from .log import configure_logging
from .sources import SourceError, items_from_csv, items_from_lines, read_source
from .ui_theme import available_theme_names, normalize_theme_name, resolve_theme

logger = logging.getLogger(__name__)

EXIT_PICKED = 0
EXIT_CANCELLED = 1


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzypick",
        description="Interactively fuzzy-find one line or record and print it.",
    )
    parser.add_argument("path", nargs="?", default="-", help="Input file. Defaults to standard input.")
    parser.add_argument("--csv", action="store_true", help="Parse input as delimited records with a header row.")
    parser.add_argument("--delimiter", default=",", help="Field delimiter for --csv input (default: ',').")
    parser.add_argument("--label-column", default=None, help="Column shown and matched for --csv input.")
    parser.add_argument("--output-column", default=None, help="Column printed for the picked --csv record.")
    parser.add_argument(
        "--lines",
        type=_positive_int,
        default=None,
        help=f"Rows shown in the picker (default: {config.DEFAULT_LINES_TO_SHOW}).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", type=Path, default=None, help="Append logs to this file.")
    parser.add_argument("--debug", action="store_true", help="Log per-keystroke query details.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --lines and --theme as defaults in the config file.",
    )
    return parser


def load_items(args: argparse.Namespace) -> list[Item]:
    text = read_source(args.path)
    if args.csv:
        return items_from_csv(text, delimiter=args.delimiter, label_column=args.label_column)
    return items_from_lines(text.splitlines())


def format_payload(payload: Any, args: argparse.Namespace) -> str:
    """Turn a picked payload into the line written to standard output."""
    if not isinstance(payload, dict):
        return str(payload)
    if args.output_column is not None:
        if args.output_column not in payload:
            raise SourceError(f"Unknown output column {args.output_column!r}")
        return str(payload[args.output_column] or "")
    return args.delimiter.join(str(value or "") for value in payload.values())


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, run the picker, and print the picked payload.

    Returns ``0`` when something was picked and ``1`` when the picker was
    cancelled or had nothing to show. User errors exit via ``SystemExit``.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    log_file = args.log_file or config.load_log_file()
    configure_logging(log_file, logging.DEBUG if args.debug else logging.INFO)

    if args.save_defaults:
        config.save_defaults(args.lines, normalize_theme_name(args.theme) if args.theme else None)

    lines_to_show = args.lines or config.load_lines_to_show() or config.DEFAULT_LINES_TO_SHOW
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=args.no_color)

    try:
        items = load_items(args)
    except SourceError as exc:
        raise SystemExit(str(exc)) from exc
    logger.info("Loaded %d item(s) from %s", len(items), args.path)

    try:
        payload = find(items, lines_to_show, theme=theme)
    except OSError as exc:
        raise SystemExit(f"Cannot open terminal: {exc}") from exc
    if payload is None:
        return EXIT_CANCELLED

    try:
        sys.stdout.write(format_payload(payload, args) + "\n")
    except SourceError as exc:
        raise SystemExit(str(exc)) from exc
    return EXIT_PICKED


if __name__ == "__main__":
    sys.exit(main())
