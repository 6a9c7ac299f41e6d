"""
Dashboard assembly.

build_dashboard() wires a UIContext with the four resource lists and the
detail panel, the global keys and the user's keybinding overrides. It is
the single start-up path shared by the Textual app, the CLI's keybinding
listing and the tests.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Optional

from docui.config.constants import DEFAULT_LIST_WIDTH_PCT

from .context import UIContext
from .keybindings.config import load_overrides
from .keybindings.global_bindings import bind_global_keys
from .keybindings.table import KeybindingTable
from .layout import compute_layout
from .panel_ids import CONTAINER_LIST, DETAIL, IMAGE_LIST, NETWORK_LIST, VOLUME_LIST
from .panels import ContainerList, DetailPanel, ImageList, NetworkList, VolumeList, declared_bindings
from .runner import CommandRunner
from .view import Screen

logger = logging.getLogger(__name__)

# Registration order is also the tab order
PANEL_CLASSES = (
    (IMAGE_LIST, ImageList),
    (CONTAINER_LIST, ContainerList),
    (VOLUME_LIST, VolumeList),
    (NETWORK_LIST, NetworkList),
    (DETAIL, DetailPanel),
)


def build_dashboard(
    client: Any,
    width: int = 80,
    height: int = 24,
    list_width_pct: int = DEFAULT_LIST_WIDTH_PCT,
    runner: Optional[CommandRunner] = None,
    on_exit: Optional[Callable[[], None]] = None,
    keybindings_path: Optional[Path] = None,
    load_user_keybindings: bool = True,
) -> UIContext:
    """Create the context and initialize every persistent panel.

    Registration errors (DuplicateIdentifierError and friends) propagate;
    a client failure while a list loads is shown on that list instead.
    """
    ctx = UIContext(client, screen=Screen(width, height), runner=runner, on_exit=on_exit)
    positions = compute_layout(width, height, list_width_pct)

    panels = [cls(ctx, panel_id, positions[panel_id]) for panel_id, cls in PANEL_CLASSES]
    for panel in panels:
        ctx.panels.register(panel)
    for panel in panels:
        panel.initialize()

    bind_global_keys(ctx.keybindings)
    if load_user_keybindings:
        applied = load_overrides(ctx.keybindings, keybindings_path)
        if applied:
            logger.info(f"Applied {applied} keybinding override(s)")

    logger.info(f"Dashboard ready, focus on {ctx.panels.current}")
    return ctx


def keybinding_table(keybindings_path: Optional[Path] = None, load_user_keybindings: bool = True) -> KeybindingTable:
    """The effective keybindings, built from the panel classes alone.

    Used to list keys without a terminal or a container engine.
    """
    table = KeybindingTable()
    for panel_id, cls in PANEL_CLASSES:
        for key, modifier, handler, action, description in declared_bindings(cls):
            table.bind(panel_id, key, handler, modifier, action=action, description=description)
    bind_global_keys(table)
    if load_user_keybindings:
        load_overrides(table, keybindings_path)
    return table
