"""Public package surface for selectdropdown.

The dropdown state machine lives in :mod:`selectdropdown.controller`; the
pure filtering, selection and navigation rules it composes live in their own
modules and are re-exported here.
"""

from __future__ import annotations

from .controller import DropdownController
from .filtering import empty_reason, filter_options
from .input import DropdownKeyHandler, handle_key
from .navigation import NEXT, PREV, commit_active, move
from .options import MULTIPLE, SINGLE, Option, Value
from .selection import SelectionResult, normalize_value, remove, toggle
from .state import DropdownConfig, DropdownHooks, DropdownState
from .view import DropdownView, OptionRow, build_view


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "DropdownConfig",
    "DropdownController",
    "DropdownHooks",
    "DropdownKeyHandler",
    "DropdownState",
    "DropdownView",
    "MULTIPLE",
    "NEXT",
    "Option",
    "OptionRow",
    "PREV",
    "SINGLE",
    "SelectionResult",
    "Value",
    "build_view",
    "commit_active",
    "empty_reason",
    "filter_options",
    "handle_key",
    "main",
    "move",
    "normalize_value",
    "remove",
    "toggle",
]
