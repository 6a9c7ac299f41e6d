"""
Command runners.

Client commands run through a runner so slow ones (image pull, load) can
leave the UI thread. Whatever the runner, `on_done` is called on the UI
thread with the error (or None), and only there may UI state change.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Protocol

from docui.exceptions import ClientError

logger = logging.getLogger(__name__)

Done = Callable[[Optional[Exception]], None]


class CommandRunner(Protocol):
    def submit(self, label: str, func: Callable[[], Any], on_done: Done) -> None: ...


class SyncRunner:
    """Run the command inline, blocking the dispatch loop until it returns."""

    def submit(self, label: str, func: Callable[[], Any], on_done: Done) -> None:
        try:
            func()
        except ClientError as e:
            on_done(e)
            return
        on_done(None)


class ThreadRunner:
    """Run the command in a Textual thread worker.

    The completion callback is marshalled back with App.call_from_thread,
    followed by `on_settled` (the app's redraw) so the result shows up
    without waiting for the next key.
    """

    def __init__(self, app: Any, on_settled: Optional[Callable[[], None]] = None) -> None:
        self.app = app
        self.on_settled = on_settled

    def _finish(self, on_done: Done, error: Optional[Exception]) -> None:
        on_done(error)
        if self.on_settled is not None:
            self.on_settled()

    def submit(self, label: str, func: Callable[[], Any], on_done: Done) -> None:
        def work() -> None:
            error: Optional[Exception] = None
            try:
                func()
            except ClientError as e:
                error = e
            except Exception as e:
                logger.exception(f"Background command '{label}' crashed")
                error = e
            self.app.call_from_thread(self._finish, on_done, error)

        logger.info(f"Running '{label}' in background")
        self.app.run_worker(work, name=label, group="commands", thread=True, exit_on_error=False)
