"""Selection policy for single- and multiple-choice dropdowns.

Functions here are pure: they take the current value and return a
``SelectionResult`` describing the next value plus any follow-up the
controller should perform (closing, clearing the query).
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .options import Option, Value


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of one toggle/remove request."""

    value: Value
    changed: bool = False
    close_requested: bool = False
    clear_query_requested: bool = False


def _dedupe_by_id(options: Iterable[Option]) -> tuple[Option, ...]:
    seen: set[str | int] = set()
    unique: list[Option] = []
    for option in options:
        if option.id in seen:
            continue
        seen.add(option.id)
        unique.append(option)
    return tuple(unique)


def normalize_value(value: object, multiple: bool) -> Value:
    """Coerce ``value`` into the canonical shape for the selection mode.

    Multiple mode always yields a tuple of unique ids or ``None``; single
    mode yields one ``Option`` or ``None``. Unknown shapes become ``None``.
    """
    if isinstance(value, Option):
        return (value,) if multiple else value
    if isinstance(value, (list, tuple)):
        items = [item for item in value if isinstance(item, Option)]
        if not items:
            return None
        if multiple:
            return _dedupe_by_id(items)
        return items[0]
    return None


def selected_options(value: Value) -> tuple[Option, ...]:
    """Return the selection as a tuple regardless of mode."""
    if value is None:
        return ()
    if isinstance(value, Option):
        return (value,)
    return tuple(value)


def is_selected(value: Value, option: Option) -> bool:
    """Return whether an option with ``option.id`` is part of ``value``."""
    return any(selected.id == option.id for selected in selected_options(value))


def _collapse(options: tuple[Option, ...]) -> Value:
    return options if options else None


def toggle(current: Value, multiple: bool, option: Option) -> SelectionResult:
    """Apply a select/deselect request for ``option``."""
    if option.disabled:
        return SelectionResult(value=current)

    if not multiple:
        return SelectionResult(
            value=option,
            changed=True,
            close_requested=True,
            clear_query_requested=True,
        )

    existing = selected_options(normalize_value(current, multiple=True))
    if any(selected.id == option.id for selected in existing):
        remaining = tuple(selected for selected in existing if selected.id != option.id)
        return SelectionResult(value=_collapse(remaining), changed=True)
    return SelectionResult(value=existing + (option,), changed=True)


def remove(current: Value, multiple: bool, option: Option) -> SelectionResult:
    """Drop ``option`` from the selection (inline remove-chip action)."""
    if option.disabled:
        return SelectionResult(value=current)

    if not multiple:
        return SelectionResult(value=None, changed=current is not None)

    existing = selected_options(normalize_value(current, multiple=True))
    remaining = tuple(selected for selected in existing if selected.id != option.id)
    if len(remaining) == len(existing):
        return SelectionResult(value=current)
    return SelectionResult(value=_collapse(remaining), changed=True)
