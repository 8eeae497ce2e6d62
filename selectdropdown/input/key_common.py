"""Shared key-token parsing helpers."""

from __future__ import annotations

MOUSE_LEFT_DOWN = "MOUSE_LEFT_DOWN"
MOUSE_MOVE = "MOUSE_MOVE"


def parse_pointer_row(pointer_key: str) -> int | None:
    """Parse ``MOUSE_*:<row>`` tokens into a filtered-row index."""
    parts = pointer_key.split(":")
    if len(parts) < 2:
        return None
    try:
        row = int(parts[-1])
    except ValueError:
        return None
    return row if row >= 0 else None


def is_text_key(key: str) -> bool:
    """Return whether ``key`` is a single printable character."""
    return len(key) == 1 and key.isprintable()
