"""Key-token dispatch table used by the dropdown key handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


def normalize_key_token(key: str) -> str:
    """Uppercase named tokens (``"esc"`` -> ``"ESC"``); keep single characters as typed."""
    return key if len(key) == 1 else key.upper()


@dataclass(frozen=True)
class KeyBinding:
    """Mapping from one or more key tokens to a single dropdown action."""

    keys: tuple[str, ...]
    action: Callable[[], bool]


class KeyBindingTable:
    """Dispatch table from normalized key tokens to dropdown actions."""

    def __init__(self, normalize: Callable[[str], str] = normalize_key_token) -> None:
        self._normalize = normalize
        self._actions: dict[str, Callable[[], bool]] = {}

    def bind(self, *bindings: KeyBinding) -> KeyBindingTable:
        """Register bindings, later ones overriding earlier tokens."""
        for binding in bindings:
            for key in binding.keys:
                self._actions[self._normalize(key)] = binding.action
        return self

    def has(self, key: str) -> bool:
        return self._normalize(key) in self._actions

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when nothing is bound."""
        action = self._actions.get(self._normalize(key))
        if action is None:
            return None
        return action()
