"""Input-layer public API for dropdown key and pointer handling."""

from .key_dispatch import DropdownKeyHandler, handle_key
from .key_registry import KeyBinding, KeyBindingTable

__all__ = [
    "DropdownKeyHandler",
    "KeyBinding",
    "KeyBindingTable",
    "handle_key",
]
