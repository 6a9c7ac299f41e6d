"""DetailPanel - structured dump of the last inspected object."""

from __future__ import annotations

from typing import Any, Optional

from docui.utils.formatting import render

from .protocol import PanelBase, PanelKind


class DetailPanel(PanelBase):
    KIND = PanelKind.DETAIL
    TITLE = "Detail"

    BINDINGS = [
        ("j", "cursor_down", "Scroll down"),
        ("down", "cursor_down", "Scroll down"),
        ("k", "cursor_up", "Scroll up"),
        ("up", "cursor_up", "Scroll up"),
        ("ctrl+r", "refresh", "Redraw"),
    ]

    last_shown: Optional[Any] = None

    def show(self, obj: Any) -> None:
        self.last_shown = obj
        self.refresh()

    def refresh(self) -> None:
        view = self.view
        view.clear()
        view.set_origin(0)
        view.set_cursor(0)
        view.write(render(self.last_shown))

    def action_refresh(self, event: Any) -> None:
        self.refresh()
