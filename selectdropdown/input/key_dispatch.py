"""Keyboard and pointer dispatch for one dropdown control.

Closed and open controls use separate binding tables; characters and
pointer tokens are handled outside the tables because they carry data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..navigation import NEXT, PREV
from .key_common import MOUSE_LEFT_DOWN, MOUSE_MOVE, is_text_key, parse_pointer_row
from .key_registry import KeyBinding, KeyBindingTable, normalize_key_token

if TYPE_CHECKING:
    from ..controller import DropdownController


def _open_and_handled(controller: DropdownController) -> bool:
    controller.open()
    return True


def _closed_bindings(controller: DropdownController) -> KeyBindingTable:
    return KeyBindingTable().bind(
        KeyBinding(("ENTER", "SPACE", "DOWN", "UP", "CLICK"), lambda: _open_and_handled(controller)),
    )


def _space_when_open(controller: DropdownController) -> bool:
    if controller.config.with_search:
        controller.type_text(" ")
    else:
        controller.commit_active()
    return True


def _open_bindings(controller: DropdownController) -> KeyBindingTable:
    def handled(action):
        def run() -> bool:
            action()
            return True

        return run

    return KeyBindingTable().bind(
        KeyBinding(("ENTER",), handled(controller.commit_active)),
        KeyBinding(("DOWN",), handled(lambda: controller.navigate(NEXT))),
        KeyBinding(("UP",), handled(lambda: controller.navigate(PREV))),
        KeyBinding(("HOME",), handled(controller.navigate_first)),
        KeyBinding(("END",), handled(controller.navigate_last)),
        KeyBinding(("ESC", "TAB", "BLUR", "OUTSIDE_CLICK", "CLICK"), handled(controller.dismiss)),
        KeyBinding(("BACKSPACE",), handled(controller.backspace)),
        KeyBinding(("SPACE",), lambda: _space_when_open(controller)),
    )


def _handle_pointer(controller: DropdownController, key: str) -> bool | None:
    token = normalize_key_token(key.split(":", 1)[0])
    if token not in (MOUSE_LEFT_DOWN, MOUSE_MOVE):
        return None
    if not controller.is_open:
        return False
    row = parse_pointer_row(key)
    if row is None:
        return True
    if token == MOUSE_LEFT_DOWN:
        controller.select_index(row)
    else:
        controller.highlight(row)
    return True


def handle_key(controller: DropdownController, key: str) -> bool:
    """Handle one key or pointer token; return whether it was consumed."""
    if controller.config.disabled or not key:
        return False

    if ":" in key and len(key) > 1:
        pointer_handled = _handle_pointer(controller, key)
        if pointer_handled is not None:
            return pointer_handled

    if not controller.is_open:
        return bool(_closed_bindings(controller).dispatch(key))

    handled = _open_bindings(controller).dispatch(key)
    if handled is not None:
        return handled
    if is_text_key(key):
        if not controller.config.with_search:
            return False
        controller.type_text(key)
        return True
    return False


class DropdownKeyHandler:
    """Reusable handler bound to one controller."""

    def __init__(self, controller: DropdownController) -> None:
        self.controller = controller

    def handle(self, key: str) -> bool:
        return handle_key(self.controller, key)

    def handle_many(self, keys: list[str]) -> int:
        """Feed ``keys`` in order and return how many were consumed."""
        return sum(1 for key in keys if self.handle(key))
