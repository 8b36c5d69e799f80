"""Public package surface for fuzzypick.

Exports the windowed selection list, the item wrapper, and ``find`` for
embedding the picker. ``main`` lazily imports the CLI entrypoint.
"""

from __future__ import annotations

import logging

from .finder import find
from .item import Item
from .window import EmptySelectionError, InvariantViolation, WindowedList

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "EmptySelectionError",
    "InvariantViolation",
    "Item",
    "WindowedList",
    "find",
    "main",
]
