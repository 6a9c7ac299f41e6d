"""Yes/no confirmation overlay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from docui.ui.keybindings.keys import KeyEvent, Modifier
from docui.ui.position import Position

from .protocol import PanelKind

if TYPE_CHECKING:
    from docui.ui.context import UIContext

CONFIRM_PANEL = "confirm"


@dataclass(frozen=True)
class ConfirmModal:
    """What to ask and what to do with the answer.

    on_accept may raise ClientError; the overlay is already closed by then
    and the error is shown on the panel that got focus back.
    """

    prompt: str
    on_accept: Callable[[], None]
    on_reject: Optional[Callable[[], None]] = None


class ConfirmPanel:
    """Overlay panel showing a ConfirmModal.

    Only plain y, n and escape do anything; every other key, modified ones
    included, is swallowed.
    """

    ACCEPT_KEYS = ("y", "Y")
    REJECT_KEYS = ("n", "N", "escape")

    def __init__(self, ctx: "UIContext", modal: ConfirmModal) -> None:
        self.ctx = ctx
        self.modal = modal

    @property
    def panel_id(self) -> str:
        return CONFIRM_PANEL

    @property
    def kind(self) -> PanelKind:
        return PanelKind.CONFIRM

    def _position(self) -> Position:
        return self.ctx.screen.bounds.centered(len(self.modal.prompt) + 4, 3)

    def initialize(self) -> None:
        self.ctx.screen.create_view(self.panel_id, self._position(), "Confirm")
        self.refresh()

    def refresh(self) -> None:
        view = self.ctx.screen.view(self.panel_id)
        view.clear()
        view.write(self.modal.prompt)

    def handle_key(self, event: KeyEvent) -> bool:
        if event.modifier is not Modifier.NONE:
            return True
        if event.key in self.ACCEPT_KEYS:
            self.ctx.modal.accept()
        elif event.key in self.REJECT_KEYS:
            self.ctx.modal.reject()
        return True
