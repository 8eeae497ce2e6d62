"""Persistent JSON defaults for dropdown presentation settings.

Stores placeholders, search/outline/portal flags and popover sizing.
Selections are never written. All access is defensive: malformed or
missing config falls back to built-in defaults.
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path

from platformdirs import user_config_dir

from .state import DropdownConfig

APP_NAME = "selectdropdown"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_TEXT_KEYS = ("placeholder", "search_placeholder")
_FLAG_KEYS = ("with_search", "outlined", "use_portal")
_SIZE_KEYS = ("z_index", "max_height")


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
    """Persist config data as pretty-printed JSON, ignoring write errors."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _coerce_text(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _coerce_positive_int(value: object) -> int | None:
    """Booleans and non-integers are invalid; zero and negatives too."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value > 0 else None


def load_default_config() -> DropdownConfig:
    """Build a :class:`DropdownConfig` from persisted defaults.

    Each field is validated independently; invalid entries keep the built-in
    default for that field only.
    """
    data = load_config()
    overrides: dict[str, object] = {}
    for key in _TEXT_KEYS:
        text = _coerce_text(data.get(key))
        if text is not None:
            overrides[key] = text
    for key in _FLAG_KEYS:
        flag = data.get(key)
        if isinstance(flag, bool):
            overrides[key] = flag
    for key in _SIZE_KEYS:
        size = _coerce_positive_int(data.get(key))
        if size is not None:
            overrides[key] = size
    return dataclasses.replace(DropdownConfig(), **overrides)


def save_default_config(config: DropdownConfig) -> None:
    """Persist the presentation fields of ``config``, keeping unrelated keys."""
    data = load_config()
    for key in _TEXT_KEYS + _FLAG_KEYS + _SIZE_KEYS:
        data[key] = getattr(config, key)
    save_config(data)
