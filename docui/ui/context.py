"""
UI context.

One UIContext owns every piece of process-wide UI state: the screen, the
panels and focus, the overlay slot, the keybinding table, the command
table and the transient message. It is passed to the dispatcher and to
every panel instead of living in module globals, so the whole engine can
be driven from tests without a terminal.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional

from docui.exceptions import ClientError, DuplicateIdentifierError, UnknownCommandError

from .commands import Command
from .keybindings.dispatcher import KeybindingDispatcher
from .keybindings.table import KeybindingTable
from .modal_stack import ModalStack
from .panel_manager import PanelManager
from .runner import CommandRunner, SyncRunner
from .view import Screen

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransientMessage:
    """Text shown on a panel until the next key press."""

    panel_id: Optional[str]
    text: str
    level: str = "error"


class UIContext:
    def __init__(
        self,
        client: Any,
        screen: Optional[Screen] = None,
        runner: Optional[CommandRunner] = None,
        on_exit: Optional[Callable[[], None]] = None,
    ) -> None:
        self.client = client
        self.screen = screen or Screen()
        self.keybindings = KeybindingTable()
        self.panels = PanelManager(self.screen)
        self.modal = ModalStack(self)
        self.dispatcher = KeybindingDispatcher(self)
        self.runner: CommandRunner = runner or SyncRunner()
        self.commands: Dict[str, Command] = {}
        self.message: Optional[TransientMessage] = None
        self._on_exit = on_exit
        self._inline = SyncRunner()

    # -- messages -------------------------------------------------------

    def flash(self, text: str, level: str = "error", panel_id: Optional[str] = None) -> None:
        """Show a transient message on a panel (the focused one by default)."""
        target = panel_id or self.panels.current
        self.message = TransientMessage(target, text, level)
        log = logger.warning if level == "error" else logger.info
        log(f"[{target}] {text}")

    def clear_message(self) -> None:
        self.message = None

    def message_for(self, panel_id: str) -> Optional[TransientMessage]:
        if self.message is not None and self.message.panel_id == panel_id:
            return self.message
        return None

    # -- commands -------------------------------------------------------

    def register_command(self, command: Command) -> None:
        if command.command_id in self.commands:
            raise DuplicateIdentifierError(command.command_id)
        self.commands[command.command_id] = command

    def run_command(self, command_id: str, params: Dict[str, Any]) -> None:
        command = self.commands.get(command_id)
        if command is None:
            raise UnknownCommandError(command_id)
        values = defaultdict(str, params)
        success = command.success.format_map(values) if command.success else ""
        progress = command.progress.format_map(values) if command.progress else ""
        self.execute(
            command_id,
            lambda: command.func(params),
            refresh=command.refresh,
            success=success,
            background=command.background,
            progress=progress,
        )

    def execute(
        self,
        label: str,
        func: Callable[[], Any],
        refresh: Iterable[str] = (),
        success: str = "",
        background: bool = False,
        progress: str = "",
    ) -> None:
        """Run a client call and report the outcome on the panel it came from.

        Background calls show `progress` (or the label) until they finish.
        """
        origin = self.panels.current
        refresh = tuple(refresh)

        def on_done(error: Optional[Exception]) -> None:
            if error is not None:
                text = error.message if isinstance(error, ClientError) else f"Unexpected error: {error}"
                self.flash(text, panel_id=origin)
                return
            self.refresh_panels(refresh)
            if success:
                self.flash(success, level="info", panel_id=origin)

        runner = self.runner if background else self._inline
        if background:
            self.flash(progress or f"{label}...", level="info", panel_id=origin)
        runner.submit(label, func, on_done)

    def refresh_panels(self, panel_ids: Iterable[str]) -> None:
        for panel_id in panel_ids:
            panel = self.panels.get(panel_id)
            if panel is None:
                continue
            try:
                panel.refresh()
            except ClientError as e:
                self.flash(e.message, panel_id=panel_id)

    # -- lifecycle ------------------------------------------------------

    def request_exit(self) -> None:
        logger.info("Exit requested")
        if self._on_exit is not None:
            self._on_exit()
