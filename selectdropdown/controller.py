"""Dropdown state machine with explicit transition methods.

Every transition returns ``True`` when it changed observable state and
``False`` when the request was ignored (closed control, disabled control,
disabled option, nothing highlighted).
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Sequence

from . import navigation, selection
from .filtering import empty_reason, filter_options
from .options import Option, Value, mode_name
from .state import DropdownConfig, DropdownHooks, DropdownState

logger = logging.getLogger(__name__)


class DropdownController:
    """Owns open/closed state, query, active row and value for one control."""

    def __init__(
        self,
        options: Sequence[Option],
        *,
        value: object = None,
        config: DropdownConfig | None = None,
        hooks: DropdownHooks | None = None,
    ) -> None:
        self.config = config if config is not None else DropdownConfig()
        self.hooks = hooks if hooks is not None else DropdownHooks()
        self.state = DropdownState(
            options=list(options),
            value=selection.normalize_value(value, self.config.multiple),
        )
        self.refresh_filtered()

    # derived
    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def value(self) -> Value:
        return self.state.value

    @property
    def filtered(self) -> list[Option]:
        return self.state.filtered

    @property
    def read_only(self) -> bool:
        """Controls without ``on_change`` never change their value."""
        return self.hooks.on_change is None

    def empty_reason(self) -> str | None:
        """Return why the filtered list is empty, or ``None`` when it is not."""
        return empty_reason(self.state.options, self.state.query, self.state.filtered)

    def active_option(self) -> Option | None:
        return navigation.commit_active(self.state.active_index, self.state.filtered)

    def refresh_filtered(self) -> None:
        """Recompute visible options and drop the now-stale active row."""
        self.state.filtered = filter_options(
            self.state.options,
            self.state.query,
            with_search=self.config.with_search,
        )
        self.state.active_index = None

    # collaborator notifications
    def _notify_open_change(self, is_open: bool) -> None:
        if self.hooks.on_open_change is not None:
            self.hooks.on_open_change(is_open)
        focus_hook = self.hooks.acquire_focus if is_open else self.hooks.release_focus
        if focus_hook is not None:
            focus_hook()

    def _emit(self, result: selection.SelectionResult) -> bool:
        if not result.changed:
            return False
        if self.hooks.on_change is None:
            logger.debug("dropping value change on read-only dropdown")
            return False
        self.state.value = result.value
        logger.debug("dropdown value changed (%s): %r", mode_name(self.config.multiple), result.value)
        self.hooks.on_change(result.value)
        return True

    # open/close lifecycle
    def open(self) -> bool:
        """Enter the open state and seed the active row from the current value."""
        if self.config.disabled or self.state.is_open:
            return False
        self.state.is_open = True
        self.state.query = ""
        self.refresh_filtered()
        self.state.active_index = navigation.initial_active_index(self.state.filtered, self.state.value)
        logger.debug("dropdown opened with %d options", len(self.state.filtered))
        self._notify_open_change(True)
        return True

    def _close(self) -> None:
        self.state.is_open = False
        self.state.query = ""
        self.refresh_filtered()
        self._notify_open_change(False)

    def dismiss(self) -> bool:
        """Close without touching the value (escape, blur, outside click)."""
        if not self.state.is_open:
            return False
        self._close()
        logger.debug("dropdown dismissed")
        return True

    def toggle_open(self) -> bool:
        """Primary activation on the trigger: open when closed, else dismiss."""
        if self.state.is_open:
            return self.dismiss()
        return self.open()

    def reposition(self) -> bool:
        """Forward an anchor or viewport change to the positioner while open."""
        if not self.state.is_open or self.hooks.reposition is None:
            return False
        self.hooks.reposition()
        return True

    # query editing
    def set_query(self, query: str) -> bool:
        """Replace the filter text and recompute matches."""
        if not self.state.is_open or not self.config.with_search:
            return False
        if query == self.state.query:
            return False
        self.state.query = query
        self.refresh_filtered()
        return True

    def type_text(self, text: str) -> bool:
        return self.set_query(self.state.query + text)

    def backspace(self) -> bool:
        if not self.state.query:
            return False
        return self.set_query(self.state.query[:-1])

    def clear_query(self) -> bool:
        return self.set_query("")

    # navigation
    def _set_active_index(self, index: int | None) -> bool:
        if index == self.state.active_index:
            return False
        self.state.active_index = index
        return True

    def navigate(self, direction: str) -> bool:
        """Move the highlight one enabled row in ``direction``."""
        if not self.state.is_open:
            return False
        return self._set_active_index(
            navigation.move(self.state.active_index, self.state.filtered, direction)
        )

    def navigate_first(self) -> bool:
        if not self.state.is_open:
            return False
        return self._set_active_index(navigation.first_selectable_index(self.state.filtered))

    def navigate_last(self) -> bool:
        if not self.state.is_open:
            return False
        return self._set_active_index(navigation.last_selectable_index(self.state.filtered))

    def highlight(self, index: int) -> bool:
        """Pointer hover over a filtered row; disabled rows are not highlighted."""
        if not self.state.is_open or not navigation.is_selectable_index(index, self.state.filtered):
            return False
        return self._set_active_index(index)

    # selection
    def select(self, option: Option) -> bool:
        """Toggle ``option`` under the configured selection mode."""
        if self.config.disabled or not self.state.is_open:
            return False
        if option.disabled:
            logger.debug("ignoring selection of disabled option %r", option.id)
            return False
        result = selection.toggle(self.state.value, self.config.multiple, option)
        changed = self._emit(result)
        if result.close_requested:
            self._close()
            return True
        return changed

    def select_index(self, index: int) -> bool:
        """Toggle the filtered row at ``index`` (pointer click)."""
        option = navigation.commit_active(index, self.state.filtered)
        if option is None:
            return False
        return self.select(option)

    def commit_active(self) -> bool:
        """Toggle the highlighted row; no-op when nothing is highlighted."""
        option = self.active_option()
        if option is None:
            return False
        return self.select(option)

    def remove(self, option: Option) -> bool:
        """Inline remove-chip action; never changes the open state."""
        if self.config.disabled:
            return False
        return self._emit(selection.remove(self.state.value, self.config.multiple, option))

    # controlled updates
    def set_value(self, value: object) -> None:
        """Adopt a caller-supplied value, normalized to the current mode.

        Caller-owned values are stored as given, disabled options included;
        only user selections are checked against ``Option.disabled``.
        """
        self.state.value = selection.normalize_value(value, self.config.multiple)

    def set_options(self, options: Sequence[Option]) -> None:
        """Replace the candidate list; the active row is reset."""
        self.state.options = list(options)
        self.refresh_filtered()

    def set_config(self, **changes: object) -> None:
        """Apply configuration changes; disabling an open control dismisses it.

        Switching selection mode reshapes the value (a multi-selection keeps
        its first option) and reports the reshaped value through ``on_change``.
        """
        self.config = dataclasses.replace(self.config, **changes)
        previous = self.state.value
        reshaped = selection.normalize_value(previous, self.config.multiple)
        if reshaped != previous:
            self.state.value = reshaped
            if self.hooks.on_change is not None:
                logger.debug("dropdown value reshaped for %s mode", mode_name(self.config.multiple))
                self.hooks.on_change(reshaped)
        if self.config.disabled and self.state.is_open:
            self._close()
            return
        if not self.config.with_search:
            self.state.query = ""
        if "with_search" in changes:
            self.refresh_filtered()
