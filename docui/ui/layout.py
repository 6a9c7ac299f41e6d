"""
Panel placement.

The four resource lists are stacked in the left column, the detail panel
fills the right column, and the last terminal row is left for the status
bar. Positions are recomputed from scratch whenever the terminal resizes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict

from docui.config.constants import DEFAULT_LIST_WIDTH_PCT, MIN_TERMINAL_HEIGHT, MIN_TERMINAL_WIDTH

from .panel_ids import DETAIL, LIST_PANELS
from .position import Position

if TYPE_CHECKING:
    from .context import UIContext

logger = logging.getLogger(__name__)

STATUS_ROWS = 1


def compute_layout(
    width: int, height: int, list_width_pct: int = DEFAULT_LIST_WIDTH_PCT
) -> Dict[str, Position]:
    """Positions for every persistent panel on a width x height terminal.

    Terminals smaller than the minimum are laid out as if they were the
    minimum size; Textual clips what does not fit.
    """
    width = max(width, MIN_TERMINAL_WIDTH)
    height = max(height, MIN_TERMINAL_HEIGHT)
    bottom = height - STATUS_ROWS - 1

    split = width * list_width_pct // 100
    split = min(max(split, 4), width - 4)

    rows = bottom + 1
    count = len(LIST_PANELS)
    positions: Dict[str, Position] = {}
    top = 0
    for i, panel_id in enumerate(LIST_PANELS):
        panel_height = rows // count + (1 if i < rows % count else 0)
        positions[panel_id] = Position(0, top, split - 1, top + panel_height - 1)
        top += panel_height
    positions[DETAIL] = Position(split, 0, width - 1, bottom)
    return positions


def relayout(ctx: "UIContext", width: int, height: int, list_width_pct: int = DEFAULT_LIST_WIDTH_PCT) -> None:
    """Move every panel to its place for a new terminal size."""
    ctx.screen.resize(width, height)
    positions = compute_layout(width, height, list_width_pct)
    for panel in ctx.panels.persistent():
        position = positions.get(panel.panel_id)
        if position is not None:
            panel.move(position)
    # Overlays re-center themselves
    overlay = ctx.modal.overlay
    if overlay is not None:
        overlay.initialize()
    logger.debug(f"Layout for {width}x{height}: {positions}")
