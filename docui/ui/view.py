"""
In-memory views.

A View is the text buffer behind one panel: lines, a cursor row and a
scroll origin. The Screen owns all views and which one has input focus.
Panels only ever talk to this layer; the Textual front end reads it back
to paint the terminal, so the engine runs the same under tests.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from docui.exceptions import UnknownPanelError

from .position import Position

logger = logging.getLogger(__name__)


class View:
    """Text buffer for one panel."""

    def __init__(self, name: str, position: Position, title: str = "") -> None:
        self.name = name
        self.position = position
        self.title = title or name
        self.highlight = False  # Paint the cursor row
        self.min_row = 0  # Rows above this are headers the cursor skips
        self._text = ""
        self.cursor_row = 0
        self.origin_row = 0

    # -- content --------------------------------------------------------

    @property
    def lines(self) -> List[str]:
        if not self._text:
            return []
        lines = self._text.split("\n")
        if self._text.endswith("\n"):
            lines.pop()
        return lines

    @property
    def text(self) -> str:
        return self._text

    def write(self, text: str) -> None:
        self._text += text

    def clear(self) -> None:
        self._text = ""

    # -- cursor ---------------------------------------------------------

    @property
    def inner_height(self) -> int:
        """Rows available for content inside the frame."""
        return max(1, self.position.height - 2)

    def set_cursor(self, row: int) -> None:
        self.cursor_row = max(0, row)
        self._scroll_to_cursor()

    def set_origin(self, row: int) -> None:
        self.origin_row = max(0, row)

    def cursor_down(self) -> None:
        if self.cursor_row + 1 < len(self.lines):
            self.set_cursor(self.cursor_row + 1)

    def cursor_up(self) -> None:
        if self.cursor_row - 1 >= self.min_row:
            self.set_cursor(self.cursor_row - 1)

    def clamp_cursor(self) -> None:
        """Keep the cursor on an existing row at or below min_row."""
        last = len(self.lines) - 1
        row = min(self.cursor_row, last) if last >= 0 else 0
        self.set_cursor(max(row, self.min_row))

    def _scroll_to_cursor(self) -> None:
        if self.cursor_row < self.origin_row:
            self.origin_row = self.cursor_row
        elif self.cursor_row >= self.origin_row + self.inner_height:
            self.origin_row = self.cursor_row - self.inner_height + 1

    def read_line_at_cursor(self) -> str:
        lines = self.lines
        if 0 <= self.cursor_row < len(lines):
            return lines[self.cursor_row]
        return ""

    def visible_lines(self) -> List[str]:
        return self.lines[self.origin_row : self.origin_row + self.inner_height]

    def __repr__(self) -> str:
        return f"View({self.name!r}, {self.position!r}, cursor={self.cursor_row})"


class Screen:
    """All views, in creation order (later views draw on top)."""

    def __init__(self, width: int = 80, height: int = 24) -> None:
        self.size: Tuple[int, int] = (width, height)
        self._views: Dict[str, View] = {}
        self.focused: Optional[str] = None

    def resize(self, width: int, height: int) -> None:
        self.size = (width, height)

    @property
    def bounds(self) -> Position:
        width, height = self.size
        return Position(0, 0, max(1, width - 1), max(1, height - 1))

    def create_view(self, name: str, position: Position, title: str = "") -> View:
        """Create a view, or move an existing one to a new position."""
        view = self._views.get(name)
        if view is not None:
            view.position = position
            view.clamp_cursor()
            return view
        view = View(name, position, title)
        self._views[name] = view
        logger.debug(f"Created view {name} at {position}")
        return view

    def delete_view(self, name: str) -> None:
        self._views.pop(name, None)
        if self.focused == name:
            self.focused = None

    def get(self, name: str) -> Optional[View]:
        return self._views.get(name)

    def view(self, name: str) -> View:
        view = self._views.get(name)
        if view is None:
            raise UnknownPanelError(name)
        return view

    def views(self) -> List[View]:
        return list(self._views.values())

    def set_focus(self, name: str) -> View:
        view = self.view(name)
        self.focused = name
        return view
