"""Bindings active on every persistent panel."""

from typing import Callable, List, Tuple

from .keys import KeyEvent, parse_key
from .table import KeybindingTable


def next_panel(event: KeyEvent) -> None:
    event.ctx.panels.cycle(1)


def previous_panel(event: KeyEvent) -> None:
    event.ctx.panels.cycle(-1)


def quit_app(event: KeyEvent) -> None:
    event.ctx.request_exit()


GLOBAL_BINDINGS: List[Tuple[str, Callable[[KeyEvent], None], str, str]] = [
    ("tab", next_panel, "next_panel", "Next panel"),
    ("shift+tab", previous_panel, "previous_panel", "Previous panel"),
    ("q", quit_app, "quit", "Quit"),
    ("ctrl+c", quit_app, "quit", "Quit"),
]


def bind_global_keys(table: KeybindingTable) -> None:
    for spec, handler, action, description in GLOBAL_BINDINGS:
        key, modifier = parse_key(spec)
        table.bind_global(key, handler, modifier, action=action, description=description)
