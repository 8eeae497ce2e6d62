"""Read-only view snapshot consumed by renderers and positioners.

Nothing here mutates the controller; ``option_label`` delegates receive the
option and their result is passed through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .filtering import NO_MATCHES, NO_OPTIONS
from .options import Option
from .selection import is_selected, selected_options

if TYPE_CHECKING:
    from .controller import DropdownController

NO_OPTIONS_MESSAGE = "No options available"
NO_MATCHES_MESSAGE = "No options found"
NO_MATCHES_HINT = "Try adjusting your search terms"
MOUNT_PORTAL = "portal"
MOUNT_INLINE = "inline"


@dataclass(frozen=True)
class OptionRow:
    option: Option
    index: int
    content: object
    is_active: bool
    is_selected: bool
    is_disabled: bool


@dataclass(frozen=True)
class DropdownView:
    """Everything a renderer needs to draw the trigger and the popover."""

    is_open: bool
    trigger_text: str
    has_selection: bool
    show_remove_button: bool
    query: str
    show_clear_query: bool
    rows: tuple[OptionRow, ...]
    empty_message: str | None
    empty_hint: str | None
    placeholder: str
    search_placeholder: str
    with_search: bool
    multiple: bool
    outlined: bool
    disabled: bool
    mount: str
    z_index: int
    max_height: int


def trigger_text(controller: DropdownController) -> str:
    """Label shown on the closed trigger."""
    selected = selected_options(controller.value)
    if not selected:
        return controller.config.placeholder
    if controller.config.multiple and len(selected) > 1:
        return f"{len(selected)} selected"
    return selected[0].label


def _row_content(controller: DropdownController, option: Option) -> object:
    if controller.config.option_label is not None:
        return controller.config.option_label(option)
    return option.label


def build_rows(controller: DropdownController) -> tuple[OptionRow, ...]:
    state = controller.state
    return tuple(
        OptionRow(
            option=option,
            index=idx,
            content=_row_content(controller, option),
            is_active=idx == state.active_index,
            is_selected=is_selected(state.value, option),
            is_disabled=option.disabled,
        )
        for idx, option in enumerate(state.filtered)
    )


def build_view(controller: DropdownController) -> DropdownView:
    """Snapshot the controller into a :class:`DropdownView`."""
    config = controller.config
    selected = selected_options(controller.value)
    reason = controller.empty_reason()
    empty_message = None
    empty_hint = None
    if reason == NO_OPTIONS:
        empty_message = NO_OPTIONS_MESSAGE
    elif reason == NO_MATCHES:
        empty_message = NO_MATCHES_MESSAGE
        empty_hint = NO_MATCHES_HINT
    return DropdownView(
        is_open=controller.is_open,
        trigger_text=trigger_text(controller),
        has_selection=bool(selected),
        show_remove_button=config.multiple and len(selected) == 1,
        query=controller.state.query,
        show_clear_query=bool(controller.state.query),
        rows=build_rows(controller) if controller.is_open else (),
        empty_message=empty_message,
        empty_hint=empty_hint,
        placeholder=config.placeholder,
        search_placeholder=config.search_placeholder,
        with_search=config.with_search,
        multiple=config.multiple,
        outlined=config.outlined,
        disabled=config.disabled,
        mount=MOUNT_PORTAL if config.use_portal else MOUNT_INLINE,
        z_index=config.z_index,
        max_height=config.max_height,
    )
