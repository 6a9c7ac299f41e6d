"""
Key dispatch.

Resolution order for one key:

1. an active overlay takes the key, whatever panel it was aimed at
2. the focused panel's own binding
3. the global binding
4. nothing: the key is ignored

Handler errors stop here. They are logged and shown as a transient
message on the focused panel, and the next key is dispatched as usual.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from docui.exceptions import ClientError, DocuiError

from .keys import KeyEvent, Modifier, format_key

if TYPE_CHECKING:
    from docui.ui.context import UIContext

logger = logging.getLogger(__name__)
key_logger = logging.getLogger("key_events")


class KeybindingDispatcher:
    def __init__(self, ctx: "UIContext") -> None:
        self.ctx = ctx

    def dispatch(
        self,
        panel_id: Optional[str],
        key: str,
        modifier: Modifier = Modifier.NONE,
        character: Optional[str] = None,
    ) -> bool:
        """Dispatch one key. Returns True when something handled it."""
        key_logger.debug(f"{panel_id}: {format_key(key, modifier)} ({character!r})")
        ctx = self.ctx
        ctx.clear_message()
        event = KeyEvent(key=key, modifier=modifier, panel_id=panel_id, ctx=ctx, character=character)

        try:
            return self._route(event)
        except ClientError as e:
            logger.warning(f"Command failed on {panel_id} ({event.key}): {e}")
            ctx.flash(e.message)
        except DocuiError as e:
            logger.error(f"Invariant violated handling {event.key} on {panel_id}: {e}", exc_info=True)
            ctx.flash(str(e))
        except Exception as e:
            logger.exception(f"Handler for {event.key} on {panel_id} crashed")
            ctx.flash(f"Unexpected error: {e}")
        return True

    def dispatch_focused(
        self, key: str, modifier: Modifier = Modifier.NONE, character: Optional[str] = None
    ) -> bool:
        return self.dispatch(self.ctx.panels.current, key, modifier, character)

    def _route(self, event: KeyEvent) -> bool:
        ctx = self.ctx
        if ctx.modal.active:
            return ctx.modal.handle_key(event)

        panel = ctx.panels.get(event.panel_id)
        if panel is not None and panel.handle_key(event):
            return True

        entry = ctx.keybindings.lookup_global(event.key, event.modifier)
        if entry is None:
            return False
        entry.handler(event)
        return True
