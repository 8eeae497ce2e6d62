"""Active-row navigation over the filtered option sequence.

Disabled options are never highlighted: movement skips them and wraps
around at both ends of the list.
"""

from __future__ import annotations

from collections.abc import Sequence

from .options import Option, Value
from .selection import selected_options

NEXT = "next"
PREV = "prev"


def _enabled_indices(filtered: Sequence[Option]) -> list[int]:
    return [idx for idx, option in enumerate(filtered) if not option.disabled]


def first_selectable_index(filtered: Sequence[Option]) -> int | None:
    """Return the first enabled index, or ``None`` when none exists."""
    enabled = _enabled_indices(filtered)
    return enabled[0] if enabled else None


def last_selectable_index(filtered: Sequence[Option]) -> int | None:
    """Return the last enabled index, or ``None`` when none exists."""
    enabled = _enabled_indices(filtered)
    return enabled[-1] if enabled else None


def is_selectable_index(index: int | None, filtered: Sequence[Option]) -> bool:
    """Return whether ``index`` points at an enabled filtered entry."""
    return index is not None and 0 <= index < len(filtered) and not filtered[index].disabled


def move(active_index: int | None, filtered: Sequence[Option], direction: str) -> int | None:
    """Step the active index one enabled entry in ``direction`` with wraparound."""
    enabled = _enabled_indices(filtered)
    if not enabled:
        return None
    if direction not in (NEXT, PREV):
        return active_index if is_selectable_index(active_index, filtered) else None

    if active_index is None or not 0 <= active_index < len(filtered):
        return enabled[0] if direction == NEXT else enabled[-1]

    if direction == NEXT:
        following = [idx for idx in enabled if idx > active_index]
        return following[0] if following else enabled[0]
    preceding = [idx for idx in enabled if idx < active_index]
    return preceding[-1] if preceding else enabled[-1]


def commit_active(active_index: int | None, filtered: Sequence[Option]) -> Option | None:
    """Resolve the option under ``active_index``."""
    if active_index is None or not 0 <= active_index < len(filtered):
        return None
    return filtered[active_index]


def initial_active_index(filtered: Sequence[Option], value: Value) -> int | None:
    """Index of the first selected option visible in ``filtered``, if any."""
    positions = {option.id: idx for idx, option in enumerate(filtered) if not option.disabled}
    for selected in selected_options(value):
        idx = positions.get(selected.id)
        if idx is not None:
            return idx
    return None
