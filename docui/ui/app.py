"""
Textual front end for docui.

The app holds one focusable canvas and a one-line status bar. Every key the
canvas receives is handed to the panel engine's dispatcher; the canvas then
repaints from the engine's in-memory screen. Textual's own focus keys never
see those events, so tab and shift+tab cycle docui panels, not widgets.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widget import Widget
from textual.widgets import Static

from docui.config.constants import DEFAULT_LIST_WIDTH_PCT

from .context import UIContext
from .dashboard import build_dashboard
from .keybindings.keys import parse_key
from .layout import STATUS_ROWS, relayout
from .painter import MESSAGE_STYLES, paint, status_hints
from .runner import ThreadRunner

logger = logging.getLogger(__name__)


class PanelCanvas(Widget, can_focus=True):
    """Paints the engine's screen and feeds it keys."""

    DEFAULT_CSS = """
    PanelCanvas {
        height: 1fr;
        width: 100%;
    }
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.ctx: Optional[UIContext] = None

    def render(self) -> Text:
        if self.ctx is None:
            return Text("Loading...")
        return paint(self.ctx, self.size.width, self.size.height)

    def on_key(self, event: events.Key) -> None:
        if self.ctx is None:
            return
        event.stop()
        event.prevent_default()
        key, modifier = parse_key(event.key)
        self.ctx.dispatcher.dispatch_focused(key, modifier, event.character)
        app = self.app
        if isinstance(app, DocuiApp):
            app.redraw()


class StatusBar(Static):
    """Key hints, or the current transient message."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        dock: bottom;
        background: $panel;
        color: $text-muted;
    }
    """

    shown_text = ""

    def show(self, ctx: UIContext) -> None:
        message = ctx.message
        if message is not None:
            self.shown_text = message.text
            style = MESSAGE_STYLES.get(message.level, MESSAGE_STYLES["error"])
            self.update(Text(message.text, style=style))
        else:
            self.shown_text = status_hints(ctx)
            self.update(self.shown_text)


class DocuiApp(App):
    """Keyboard-driven container dashboard."""

    TITLE = "docui"

    # ctrl+c always quits, even while an overlay holds the keyboard
    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        client: Any,
        list_width_pct: int = DEFAULT_LIST_WIDTH_PCT,
        keybindings_path: Optional[Path] = None,
        load_user_keybindings: bool = True,
        background: bool = True,
    ) -> None:
        super().__init__()
        self.client = client
        self.list_width_pct = list_width_pct
        self.keybindings_path = keybindings_path
        self.load_user_keybindings = load_user_keybindings
        self.background = background
        self.ctx: Optional[UIContext] = None

    def compose(self) -> ComposeResult:
        yield PanelCanvas(id="canvas")
        yield StatusBar(id="status")

    def on_mount(self) -> None:
        width, height = self.size
        logger.info(f"Starting docui at {width}x{height}")
        runner = ThreadRunner(self, on_settled=self.redraw) if self.background else None
        self.ctx = build_dashboard(
            self.client,
            width=width,
            height=height,
            list_width_pct=self.list_width_pct,
            runner=runner,
            on_exit=self.exit,
            keybindings_path=self.keybindings_path,
            load_user_keybindings=self.load_user_keybindings,
        )
        canvas = self.query_one(PanelCanvas)
        canvas.ctx = self.ctx
        canvas.focus()
        self.redraw()

    def on_resize(self, event: events.Resize) -> None:
        if self.ctx is None:
            return
        width, height = event.size
        relayout(self.ctx, width, max(height, STATUS_ROWS + 1), self.list_width_pct)
        self.redraw()

    def redraw(self) -> None:
        if self.ctx is None:
            return
        self.query_one(PanelCanvas).refresh()
        self.query_one(StatusBar).show(self.ctx)


def run_app(client: Any, list_width_pct: int = DEFAULT_LIST_WIDTH_PCT) -> None:
    """Run the dashboard until the user quits."""
    app = DocuiApp(client, list_width_pct=list_width_pct)
    app.run()
    logger.info("docui exited")
