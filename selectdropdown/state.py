from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .options import Option, Value

DEFAULT_PLACEHOLDER = "Select an option..."
DEFAULT_SEARCH_PLACEHOLDER = "Search options..."
DEFAULT_Z_INDEX = 1000
DEFAULT_MAX_HEIGHT = 300


@dataclass(frozen=True)
class DropdownConfig:
    """Fixed per-control configuration; replace wholesale to change it."""

    placeholder: str = DEFAULT_PLACEHOLDER
    search_placeholder: str = DEFAULT_SEARCH_PLACEHOLDER
    with_search: bool = True
    multiple: bool = False
    disabled: bool = False
    outlined: bool = True
    option_label: Callable[[Option], object] | None = None
    use_portal: bool = False
    z_index: int = DEFAULT_Z_INDEX
    max_height: int = DEFAULT_MAX_HEIGHT


@dataclass(frozen=True)
class DropdownHooks:
    """Collaborator callbacks notified by :class:`DropdownController`."""

    on_change: Callable[[Value], None] | None = None
    on_open_change: Callable[[bool], None] | None = None
    acquire_focus: Callable[[], None] | None = None
    release_focus: Callable[[], None] | None = None
    reposition: Callable[[], None] | None = None


@dataclass
class DropdownState:
    options: list[Option]
    value: Value = None
    is_open: bool = False
    query: str = ""
    active_index: int | None = None
    filtered: list[Option] = field(default_factory=list)
