"""
ListPanel - tabular listing of one kind of container-engine resource.

Rows are rendered as fixed-width columns under a header line. While
rendering, the panel records which resource each line shows; the current
selection is read from that record at the cursor row instead of being
parsed back out of the text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, List, Optional, Sequence

from docui.exceptions import ClientError
from docui.ui import panel_ids
from docui.utils.formatting import truncate

from .protocol import PanelBase, PanelKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Column:
    """One fixed-width column: header text, width, and how to get a cell."""

    title: str
    width: int
    value: Callable[[Any], str]


class ListPanel(PanelBase):
    """Base class for the resource lists.

    Subclasses provide COLUMNS, RESOURCE_KIND (for inspect) and fetch().
    """

    KIND = PanelKind.LIST
    COLUMNS: ClassVar[Sequence[Column]] = ()
    RESOURCE_KIND: ClassVar[str] = ""
    HEADER_ROWS = 1

    BINDINGS = [
        ("j", "cursor_down", "Down"),
        ("down", "cursor_down", "Down"),
        ("k", "cursor_up", "Up"),
        ("up", "cursor_up", "Up"),
        ("enter", "detail", "Inspect"),
        ("o", "detail", "Inspect"),
        ("ctrl+r", "refresh", "Refresh"),
    ]

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._rows: List[Optional[Any]] = []

    def initialize(self) -> None:
        super().initialize()
        self.view.highlight = True
        self.view.min_row = self.HEADER_ROWS
        self.view.set_cursor(self.HEADER_ROWS)
        self.register_commands()
        try:
            self.refresh()
        except ClientError as e:
            self.ctx.flash(e.message, panel_id=self.panel_id)

    def register_commands(self) -> None:
        """Hook for panels whose forms submit to commands."""

    def fetch(self) -> Sequence[Any]:
        raise NotImplementedError

    # -- rendering ------------------------------------------------------

    def format_row(self, cells: Sequence[str]) -> str:
        parts = [truncate(cell, col.width).ljust(col.width) for cell, col in zip(cells, self.COLUMNS)]
        return " ".join(parts)

    def refresh(self) -> None:
        """Re-fetch and redraw. Safe to call any number of times."""
        view = self.view
        view.clear()
        self._rows = [None] * self.HEADER_ROWS
        view.write(self.format_row([c.title for c in self.COLUMNS]) + "\n")
        try:
            items = self.fetch()
        finally:
            view.clamp_cursor()
        for item in items:
            view.write(self.format_row([c.value(item) for c in self.COLUMNS]) + "\n")
            self._rows.append(item)
        view.clamp_cursor()
        logger.debug(f"{self.panel_id}: {len(items)} rows")

    # -- selection ------------------------------------------------------

    def current_item(self) -> Optional[Any]:
        """The resource under the cursor, or None on the header/empty view."""
        if self._view is None:
            return None
        row = self.view.cursor_row
        if row < self.HEADER_ROWS or row >= len(self._rows):
            return None
        if not self.view.read_line_at_cursor().strip():
            return None
        return self._rows[row]

    def current_selection(self) -> Optional[str]:
        item = self.current_item()
        if item is None:
            return None
        return item.key

    @property
    def items(self) -> List[Any]:
        return [row for row in self._rows if row is not None]

    # -- shared actions -------------------------------------------------

    def action_refresh(self, event: Any) -> None:
        self.refresh()

    def action_detail(self, event: Any) -> None:
        ref = self.current_selection()
        if ref is None:
            return
        data = self.ctx.client.inspect(self.RESOURCE_KIND, ref)
        detail = self.ctx.panels.get(panel_ids.DETAIL)
        if detail is not None:
            detail.show(data)

    def confirm_remove(self, prompt: str, remove: Callable[[str], None], refresh: Sequence[str] = ()) -> None:
        """Ask before removing the selected resource."""
        ref = self.current_selection()
        if ref is None:
            return
        self.ctx.modal.open_confirm(
            prompt,
            lambda: self.ctx.execute(f"remove {ref}", lambda: remove(ref), refresh=(self.panel_id, *refresh)),
        )
