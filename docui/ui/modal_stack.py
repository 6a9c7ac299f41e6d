"""
Overlay lifecycle.

There is exactly one overlay slot. Its state is a single value:

    Idle
    ConfirmActive(panel, restore)
    InputActive(panel, restore)

`restore` is the panel that had focus when the overlay opened. While an
overlay is active it receives every key; closing it hands focus back to
`restore` and removes the overlay's view.

Accepting a confirmation or submitting a form closes the overlay first and
only then runs the command, so a failing command is reported on the panel
that regained focus and never leaves a dead overlay on screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional, Union

from docui.exceptions import ClientError, OverlayBusyError

from .keybindings.keys import KeyEvent
from .panels.confirm import ConfirmModal, ConfirmPanel
from .panels.input_form import InputForm, InputPanel

if TYPE_CHECKING:
    from .context import UIContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Idle:
    name = "idle"


@dataclass(frozen=True)
class ConfirmActive:
    panel: ConfirmPanel
    restore: Optional[str]
    name = "confirm"


@dataclass(frozen=True)
class InputActive:
    panel: InputPanel
    restore: Optional[str]
    name = "input"


OverlayState = Union[Idle, ConfirmActive, InputActive]

IDLE = Idle()


class ModalStack:
    """Owner of the overlay slot."""

    def __init__(self, ctx: "UIContext") -> None:
        self.ctx = ctx
        self._state: OverlayState = IDLE

    @property
    def state(self) -> OverlayState:
        return self._state

    @property
    def active(self) -> bool:
        return not isinstance(self._state, Idle)

    @property
    def overlay(self) -> Optional[Union[ConfirmPanel, InputPanel]]:
        if isinstance(self._state, Idle):
            return None
        return self._state.panel

    # -- opening --------------------------------------------------------

    def _check_idle(self) -> None:
        if self.active:
            raise OverlayBusyError(self._state.name)

    def _show(self, panel: Union[ConfirmPanel, InputPanel]) -> Optional[str]:
        restore = self.ctx.panels.current
        self.ctx.panels.register(panel)
        try:
            panel.initialize()
        except Exception:
            # slot is still Idle, so nothing else would remove the panel
            self.ctx.panels.unregister(panel.panel_id)
            self.ctx.screen.delete_view(panel.panel_id)
            raise
        self.ctx.panels.set_current(panel.panel_id)
        return restore

    def open_confirm(
        self,
        prompt: str,
        on_accept: Callable[[], None],
        on_reject: Optional[Callable[[], None]] = None,
    ) -> ConfirmPanel:
        self._check_idle()
        panel = ConfirmPanel(self.ctx, ConfirmModal(prompt, on_accept, on_reject))
        restore = self._show(panel)
        self._state = ConfirmActive(panel, restore)
        logger.info(f"Confirm opened over {restore}: {prompt}")
        return panel

    def open_input(self, form: InputForm) -> InputPanel:
        self._check_idle()
        panel = InputPanel(self.ctx, form)
        restore = self._show(panel)
        self._state = InputActive(panel, restore)
        logger.info(f"Form '{form.title}' opened over {restore}")
        return panel

    # -- closing --------------------------------------------------------

    def close(self) -> None:
        state = self._state
        if isinstance(state, Idle):
            return
        self._state = IDLE
        if state.restore is not None and state.restore in self.ctx.panels:
            self.ctx.panels.set_current(state.restore)
        self.ctx.panels.unregister(state.panel.panel_id)
        self.ctx.screen.delete_view(state.panel.panel_id)
        logger.debug(f"Overlay {state.name} closed, focus back on {state.restore}")

    def accept(self) -> None:
        state = self._state
        if not isinstance(state, ConfirmActive):
            return
        self.close()
        try:
            state.panel.modal.on_accept()
        except ClientError as e:
            logger.warning(f"Confirmed action failed: {e}")
            self.ctx.flash(e.message)

    def reject(self) -> None:
        state = self._state
        if not isinstance(state, ConfirmActive):
            return
        self.close()
        if state.panel.modal.on_reject is not None:
            state.panel.modal.on_reject()

    def submit(self) -> None:
        state = self._state
        if not isinstance(state, InputActive):
            return
        if state.panel.validate() is not None:
            return
        form = state.panel.form
        self.close()
        self.ctx.run_command(form.command_id, form.values())

    def cancel(self) -> None:
        if isinstance(self._state, InputActive):
            self.close()

    # -- keys -----------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> bool:
        """Route a key to the active overlay. Always consumes it."""
        panel = self.overlay
        if panel is None:
            return False
        panel.handle_key(event)
        return True
