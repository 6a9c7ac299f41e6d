"""
Panel Protocol - the contract every docui panel implements.

The set of panel kinds is closed: persistent list and detail panels, and
the two overlay kinds (confirmation and input form). Every panel exposes
the same three capabilities:

- initialize(): create its view and register its keybindings
- refresh(): redraw its content
- handle_key(event): run the panel's own binding for a key, if it has one

Keybindings are declared Textual-style, as (key, action, description)
tuples in BINDINGS. An action name resolves to the panel's
`action_<name>` method, or to one of the SHARED_ACTIONS handlers that
several panels bind to the same function (cursor movement).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Dict,
    Iterator,
    Optional,
    Protocol,
    Sequence,
    Tuple,
    runtime_checkable,
)

from docui.ui.keybindings.keys import KeyEvent, Modifier, parse_key
from docui.ui.position import Position
from docui.ui.view import View

if TYPE_CHECKING:
    from docui.ui.context import UIContext

logger = logging.getLogger(__name__)


class PanelKind(Enum):
    LIST = "list"
    DETAIL = "detail"
    INPUT = "input"
    CONFIRM = "confirm"

    @property
    def is_overlay(self) -> bool:
        return self in (PanelKind.INPUT, PanelKind.CONFIRM)


@runtime_checkable
class Panel(Protocol):
    """Structural type for anything the PanelManager can hold."""

    @property
    def panel_id(self) -> str: ...

    @property
    def kind(self) -> PanelKind: ...

    def initialize(self) -> None: ...

    def refresh(self) -> None: ...

    def handle_key(self, event: KeyEvent) -> bool: ...


# ---------------------------------------------------------------------------
# Shared handlers
# ---------------------------------------------------------------------------


def cursor_down(event: KeyEvent) -> None:
    view = event.ctx.screen.get(event.panel_id or "")
    if view is not None:
        view.cursor_down()


def cursor_up(event: KeyEvent) -> None:
    view = event.ctx.screen.get(event.panel_id or "")
    if view is not None:
        view.cursor_up()


SHARED_ACTIONS: Dict[str, Callable[[KeyEvent], None]] = {
    "cursor_down": cursor_down,
    "cursor_up": cursor_up,
}


def declared_bindings(owner: Any) -> Iterator[Tuple[str, Modifier, Callable[..., None], str, str]]:
    """Resolve a panel's (or panel class's) BINDINGS.

    Yields (key, modifier, handler, action, description). On a class the
    handlers are unbound, which is enough for listing keys.
    """
    name = owner.__name__ if isinstance(owner, type) else type(owner).__name__
    for spec, action, description in owner.BINDINGS:
        key, modifier = parse_key(spec)
        handler = getattr(owner, f"action_{action}", None) or SHARED_ACTIONS.get(action)
        if handler is None:
            raise AttributeError(f"{name} has no action '{action}'")
        yield key, modifier, handler, action, description


class PanelBase:
    """Default plumbing for persistent panels.

    Subclasses set KIND and BINDINGS and implement refresh().
    """

    KIND: ClassVar[PanelKind] = PanelKind.LIST
    TITLE: ClassVar[str] = ""
    BINDINGS: ClassVar[Sequence[Tuple[str, str, str]]] = ()

    def __init__(self, ctx: "UIContext", panel_id: str, position: Position) -> None:
        self.ctx = ctx
        self._panel_id = panel_id
        self.position = position
        self._view: Optional[View] = None

    @property
    def panel_id(self) -> str:
        return self._panel_id

    @property
    def kind(self) -> PanelKind:
        return self.KIND

    @property
    def view(self) -> View:
        if self._view is None:
            raise RuntimeError(f"Panel {self.panel_id} used before initialize()")
        return self._view

    def initialize(self) -> None:
        self._view = self.ctx.screen.create_view(self.panel_id, self.position, self.TITLE)
        if self.ctx.panels.current == self.panel_id:
            self.ctx.screen.set_focus(self.panel_id)
        self.bind_keys()

    def bind_keys(self) -> None:
        for key, modifier, handler, action, description in declared_bindings(self):
            self.ctx.keybindings.bind(
                self.panel_id, key, handler, modifier, action=action, description=description
            )

    def move(self, position: Position) -> None:
        """Place the panel at a new position (terminal resize)."""
        self.position = position
        self._view = self.ctx.screen.create_view(self.panel_id, position, self.TITLE)

    def refresh(self) -> None:
        raise NotImplementedError

    def handle_key(self, event: KeyEvent) -> bool:
        entry = self.ctx.keybindings.lookup_local(self.panel_id, event.key, event.modifier)
        if entry is None:
            return False
        entry.handler(event)
        return True

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.panel_id!r})"
