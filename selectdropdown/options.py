"""Option and value datatypes shared by every dropdown module."""

from __future__ import annotations

from dataclasses import dataclass

SINGLE = "single"
MULTIPLE = "multiple"


@dataclass(frozen=True)
class Option:
    """One candidate row; owned by the caller and never mutated here."""

    id: str | int
    label: str
    icon: object | None = None
    disabled: bool = False


Value = Option | tuple[Option, ...] | None


def mode_name(multiple: bool) -> str:
    """Return the selection-mode name for a ``multiple`` flag."""
    return MULTIPLE if multiple else SINGLE
