"""Command-line front door for selectdropdown.

Builds a dropdown from option arguments, replays a scripted key sequence
against it, and prints the resulting value and view as JSON.
"""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from .config import load_default_config
from .controller import DropdownController
from .input import DropdownKeyHandler
from .options import Option, Value
from .selection import selected_options
from .state import DropdownHooks
from .view import build_view


def _option_id(raw: str) -> str | int:
    return int(raw) if raw.isdigit() else raw


def _parse_option(raw: str, position: int) -> Option:
    """Parse ``id=label`` or ``label`` (id defaults to the 1-based position)."""
    if "=" in raw:
        raw_id, label = raw.split("=", 1)
        if not raw_id or not label:
            raise argparse.ArgumentTypeError(f"invalid option spec: {raw!r}")
        return Option(id=_option_id(raw_id), label=label)
    if not raw:
        raise argparse.ArgumentTypeError("option label must not be empty")
    return Option(id=position, label=raw)


def _parse_keys(raw: str) -> list[str]:
    return [token for token in raw.split(",") if token]


def _value_payload(value: Value) -> object:
    if value is None:
        return None
    if isinstance(value, Option):
        return {"id": value.id, "label": value.label}
    return [{"id": option.id, "label": option.label} for option in selected_options(value)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="selectdropdown",
        description="Replay key tokens against a dropdown and print the outcome.",
    )
    parser.add_argument("options", nargs="*", help="options as 'id=label' or 'label'")
    parser.add_argument("--multiple", action="store_true", help="allow selecting many options")
    parser.add_argument("--no-search", action="store_true", help="disable query filtering")
    parser.add_argument(
        "--disabled-option",
        action="append",
        default=[],
        metavar="LABEL",
        help="mark the option with this label as disabled (repeatable)",
    )
    parser.add_argument(
        "--value",
        action="append",
        default=[],
        metavar="ID",
        help="initially selected option id (repeatable)",
    )
    parser.add_argument(
        "--keys",
        type=_parse_keys,
        default=[],
        help="comma-separated key tokens, e.g. 'ENTER,b,a,n,DOWN,ENTER'",
    )
    parser.add_argument("--verbose", action="store_true", help="log state transitions to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the scripted dropdown session and print JSON to stdout."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    try:
        options = [_parse_option(raw, position) for position, raw in enumerate(args.options, start=1)]
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))

    disabled_labels = set(args.disabled_option)
    options = [
        dataclasses.replace(option, disabled=True) if option.label in disabled_labels else option
        for option in options
    ]
    wanted_ids = [str(raw) for raw in args.value]
    initial = [option for wanted in wanted_ids for option in options if str(option.id) == wanted]

    changes: list[object] = []
    config = dataclasses.replace(
        load_default_config(),
        multiple=args.multiple,
        with_search=not args.no_search,
    )
    controller = DropdownController(
        options,
        value=initial,
        config=config,
        hooks=DropdownHooks(on_change=lambda value: changes.append(_value_payload(value))),
    )
    consumed = DropdownKeyHandler(controller).handle_many(args.keys)

    view = build_view(controller)
    payload = {
        "value": _value_payload(controller.value),
        "changes": changes,
        "consumed_keys": consumed,
        "is_open": view.is_open,
        "query": view.query,
        "trigger_text": view.trigger_text,
        "active_index": controller.state.active_index,
        "filtered": [option.label for option in controller.filtered],
        "empty_message": view.empty_message,
    }
    sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    return 0
