"""
Focus tracking.

The PanelManager is the only writer of FocusState. Every focus change goes
through set_current(), which remembers the panel focused before it so an
overlay can hand focus back when it closes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Dict, List, Optional

from docui.exceptions import DuplicateIdentifierError, UnknownPanelError

from .panels.protocol import Panel
from .view import Screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocusState:
    current: Optional[str] = None
    previous: Optional[str] = None


class PanelManager:
    """Registered panels plus the current/previous focus pair."""

    def __init__(self, screen: Screen) -> None:
        self._screen = screen
        self._panels: Dict[str, Panel] = {}
        self._focus = FocusState()

    @property
    def focus(self) -> FocusState:
        return self._focus

    @property
    def current(self) -> Optional[str]:
        return self._focus.current

    @property
    def previous(self) -> Optional[str]:
        return self._focus.previous

    def register(self, panel: Panel) -> None:
        if panel.panel_id in self._panels:
            raise DuplicateIdentifierError(panel.panel_id)
        self._panels[panel.panel_id] = panel
        logger.debug(f"Registered panel {panel.panel_id} ({panel.kind.value})")
        if self._focus.current is None and not panel.kind.is_overlay:
            self._focus = FocusState(current=panel.panel_id)

    def unregister(self, panel_id: str) -> None:
        """Drop a panel (overlays, when they close)."""
        if self._panels.pop(panel_id, None) is None:
            raise UnknownPanelError(panel_id)
        focus = self._focus
        if focus.previous == panel_id:
            focus = replace(focus, previous=None)
        if focus.current == panel_id:
            focus = FocusState(current=focus.previous)
        self._focus = focus

    def set_current(self, panel_id: str) -> Panel:
        panel = self._panels.get(panel_id)
        if panel is None:
            raise UnknownPanelError(panel_id)
        self._focus = FocusState(current=panel_id, previous=self._focus.current)
        if self._screen.get(panel_id) is not None:
            self._screen.set_focus(panel_id)
        logger.debug(f"Focus {self._focus.previous} -> {panel_id}")
        return panel

    def get(self, panel_id: Optional[str]) -> Optional[Panel]:
        if panel_id is None:
            return None
        return self._panels.get(panel_id)

    def __getitem__(self, panel_id: str) -> Panel:
        panel = self._panels.get(panel_id)
        if panel is None:
            raise UnknownPanelError(panel_id)
        return panel

    def __contains__(self, panel_id: object) -> bool:
        return panel_id in self._panels

    def panels(self) -> List[Panel]:
        return list(self._panels.values())

    def persistent(self) -> List[Panel]:
        return [p for p in self._panels.values() if not p.kind.is_overlay]

    def cycle(self, step: int = 1) -> Optional[Panel]:
        """Focus the next (or previous, step=-1) persistent panel."""
        order = [p.panel_id for p in self.persistent()]
        if not order:
            return None
        try:
            index = order.index(self._focus.current or "")
        except ValueError:
            index = -1 if step > 0 else 0
        return self.set_current(order[(index + step) % len(order)])
