"""Item loading from plain text lines or delimited files.

Text input yields one item per non-empty line. CSV input needs a header row;
each record becomes an item whose payload is the full row mapping.
"""

from __future__ import annotations

import csv
import io
import sys
from collections.abc import Iterable
from pathlib import Path

from .item import Item


class SourceError(ValueError):
    """Raised when input data cannot be turned into items."""


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def read_source(source: str | Path) -> str:
    """Read all input text from ``source``; ``-`` means standard input."""
    if str(source) == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise SourceError(f"Path not found: {path}")
    return read_text(path)


def items_from_lines(lines: Iterable[str]) -> list[Item]:
    items: list[Item] = []
    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue
        items.append(Item.of(line))
    return items


def items_from_csv(text: str, delimiter: str = ",", label_column: str | None = None) -> list[Item]:
    """Parse delimited ``text`` with a header row into items.

    ``label_column`` names the field shown and matched against; it defaults to
    the first header field. Rows with an empty label are skipped.
    """
    if len(delimiter) != 1:
        raise SourceError(f"delimiter must be a single character, got {delimiter!r}")
    reader = csv.DictReader(io.StringIO(text), delimiter=delimiter)
    fieldnames = reader.fieldnames
    if not fieldnames:
        raise SourceError("CSV input has no header row")
    column = label_column if label_column is not None else fieldnames[0]
    if column not in fieldnames:
        raise SourceError(f"Unknown label column {column!r}; expected one of: {', '.join(fieldnames)}")

    items: list[Item] = []
    for row in reader:
        label = (row.get(column) or "").strip()
        if not label:
            continue
        items.append(Item(label=label, payload=dict(row)))
    return items


__all__ = [
    "SourceError",
    "items_from_csv",
    "items_from_lines",
    "read_source",
    "read_text",
]
