"""Persistent JSON config helpers.

Stores the default window height, theme name, and log file location.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "fuzzypick"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_LINES_TO_SHOW = 8


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_lines_to_show() -> int | None:
    """Return the persisted window height when it is a positive integer."""
    value = load_config().get("lines_to_show")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value <= 0:
        return None
    return value


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip()


def load_log_file() -> Path | None:
    value = load_config().get("log_file")
    if not isinstance(value, str) or not value:
        return None
    return Path(value).expanduser()


def save_defaults(lines_to_show: int | None = None, theme: str | None = None) -> None:
    """Persist CLI-provided defaults, leaving unspecified keys untouched."""
    config = load_config()
    if lines_to_show is not None and lines_to_show > 0:
        config["lines_to_show"] = int(lines_to_show)
    if theme:
        config["theme"] = theme
    save_config(config)
