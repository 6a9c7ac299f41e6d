"""
Screen painting.

Turns the in-memory Screen into a Rich Text the Textual canvas widget can
render. Views are drawn in creation order, so an overlay created after the
persistent panels is drawn on top of them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from rich.text import Text

from docui.utils.formatting import truncate

from .keybindings.table import GLOBAL_SCOPE
from .modal_stack import InputActive
from .view import View

if TYPE_CHECKING:
    from .context import TransientMessage, UIContext

BORDER_STYLE = "grey50"
FOCUSED_BORDER_STYLE = "bold green"
OVERLAY_BORDER_STYLE = "bold yellow"
TITLE_STYLE = "bold"
CURSOR_STYLE = "reverse dim"
FOCUSED_CURSOR_STYLE = "black on green"
CARET_STYLE = "reverse"
MESSAGE_STYLES = {
    "error": "bold red",
    "info": "bold cyan",
}


class Grid:
    """Character cells with one Rich style each."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(0, width)
        self.height = max(0, height)
        self.chars = [[" "] * self.width for _ in range(self.height)]
        self.styles = [[""] * self.width for _ in range(self.height)]

    def put(self, x: int, y: int, text: str, style: str = "") -> None:
        if not 0 <= y < self.height:
            return
        for i, char in enumerate(text):
            col = x + i
            if 0 <= col < self.width:
                self.chars[y][col] = char
                self.styles[y][col] = style

    def restyle(self, x: int, y: int, style: str) -> None:
        if 0 <= y < self.height and 0 <= x < self.width:
            self.styles[y][x] = style

    def to_text(self) -> Text:
        text = Text(no_wrap=True, overflow="crop")
        for y in range(self.height):
            if y:
                text.append("\n")
            run = ""
            run_style = ""
            for char, style in zip(self.chars[y], self.styles[y]):
                if style != run_style and run:
                    text.append(run, style=run_style or None)
                    run = ""
                run_style = style
                run += char
            if run:
                text.append(run, style=run_style or None)
        return text


def draw_view(
    grid: Grid,
    view: View,
    focused: bool = False,
    overlay: bool = False,
    message: Optional["TransientMessage"] = None,
) -> None:
    """Draw one view: frame, title, visible lines and cursor row."""
    pos = view.position
    inner = pos.width - 2
    if overlay:
        border = OVERLAY_BORDER_STYLE
    else:
        border = FOCUSED_BORDER_STYLE if focused else BORDER_STYLE

    grid.put(pos.left, pos.top, "┌" + "─" * inner + "┐", border)
    for row in range(pos.top + 1, pos.bottom):
        grid.put(pos.left, row, "│", border)
        grid.put(pos.left + 1, row, " " * inner)
        grid.put(pos.right, row, "│", border)
    grid.put(pos.left, pos.bottom, "└" + "─" * inner + "┘", border)
    if inner > 2:
        grid.put(pos.left + 1, pos.top, truncate(f" {view.title} ", inner - 1), TITLE_STYLE)

    for i, line in enumerate(view.visible_lines()[: max(0, pos.height - 2)]):
        row = view.origin_row + i
        style = ""
        if view.highlight and row == view.cursor_row:
            style = FOCUSED_CURSOR_STYLE if focused else CURSOR_STYLE
            line = truncate(line, inner).ljust(inner)
        grid.put(pos.left + 1, pos.top + 1 + i, truncate(line, inner), style)

    if message is not None and inner > 2:
        style = MESSAGE_STYLES.get(message.level, MESSAGE_STYLES["error"])
        grid.put(pos.left + 1, pos.bottom, truncate(f" {message.text} ", inner - 1), style)


def paint(ctx: "UIContext", width: int, height: int) -> Text:
    """Render every view of the context's screen onto a width x height grid."""
    grid = Grid(width, height)
    overlay = ctx.modal.overlay
    overlay_id = overlay.panel_id if overlay is not None else None
    for view in ctx.screen.views():
        draw_view(
            grid,
            view,
            focused=view.name == ctx.screen.focused,
            overlay=view.name == overlay_id,
            message=ctx.message_for(view.name),
        )

    state = ctx.modal.state
    if isinstance(state, InputActive):
        view = ctx.screen.get(state.panel.panel_id)
        if view is not None:
            row = state.panel.index - view.origin_row
            if 0 <= row < view.position.height - 2:
                grid.restyle(
                    view.position.left + 1 + state.panel.caret_column,
                    view.position.top + 1 + row,
                    CARET_STYLE,
                )
    return grid.to_text()


def status_hints(ctx: "UIContext") -> str:
    """Key hints for the status bar: the focused panel's keys, then global ones."""
    if ctx.modal.overlay is not None:
        if isinstance(ctx.modal.state, InputActive):
            return "enter: submit  esc: cancel  tab: next field"
        return "y: yes  n: no"

    hints: List[str] = []
    seen = set()
    scope_entries = ctx.keybindings.entries(ctx.panels.current) if ctx.panels.current else []
    for entry in scope_entries + ctx.keybindings.entries(GLOBAL_SCOPE):
        if entry.action in seen or not entry.description:
            continue
        seen.add(entry.action)
        hints.append(f"{entry.label}: {entry.description}")
    return "  ".join(hints)
