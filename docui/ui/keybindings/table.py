"""
Keybinding table.

Bindings are registered per panel id, plus one global table shared by all
persistent panels. A panel binding for a key shadows the global one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .keys import KeyEvent, Modifier, format_key

logger = logging.getLogger(__name__)

Handler = Callable[[KeyEvent], None]

GLOBAL_SCOPE = "global"


@dataclass(frozen=True)
class KeybindingEntry:
    """Represents a single keybinding in the table."""

    key: str
    modifier: Modifier
    handler: Handler
    action: str = ""  # Name used by user overrides and help output
    description: str = ""
    scope: str = GLOBAL_SCOPE

    @property
    def label(self) -> str:
        return format_key(self.key, self.modifier)

    def to_dict(self) -> dict:
        return {
            "key": self.label,
            "action": self.action,
            "scope": self.scope,
            "description": self.description,
        }


class KeybindingTable:
    """
    Per-panel and global key → handler mapping.

    Usage:
        table = KeybindingTable()
        table.bind("images", "d", remove_image, action="remove_image")
        table.bind_global("q", quit_app, action="quit")

        entry = table.lookup("images", "d")
    """

    def __init__(self) -> None:
        self._scopes: Dict[str, Dict[Tuple[str, Modifier], KeybindingEntry]] = {}

    def bind(
        self,
        scope: str,
        key: str,
        handler: Handler,
        modifier: Modifier = Modifier.NONE,
        action: str = "",
        description: str = "",
    ) -> KeybindingEntry:
        entry = KeybindingEntry(
            key=key,
            modifier=modifier,
            handler=handler,
            action=action or getattr(handler, "__name__", ""),
            description=description,
            scope=scope,
        )
        bindings = self._scopes.setdefault(scope, {})
        previous = bindings.get((key, modifier))
        if previous is not None and previous.action != entry.action:
            logger.info(
                f"Key '{entry.label}' in {scope}: {previous.action} replaced by {entry.action}"
            )
        bindings[(key, modifier)] = entry
        return entry

    def bind_global(
        self,
        key: str,
        handler: Handler,
        modifier: Modifier = Modifier.NONE,
        action: str = "",
        description: str = "",
    ) -> KeybindingEntry:
        return self.bind(GLOBAL_SCOPE, key, handler, modifier, action, description)

    def unbind_scope(self, scope: str) -> None:
        self._scopes.pop(scope, None)

    def lookup_local(
        self, scope: Optional[str], key: str, modifier: Modifier = Modifier.NONE
    ) -> Optional[KeybindingEntry]:
        if scope is None or scope == GLOBAL_SCOPE:
            return None
        return self._scopes.get(scope, {}).get((key, modifier))

    def lookup_global(self, key: str, modifier: Modifier = Modifier.NONE) -> Optional[KeybindingEntry]:
        return self._scopes.get(GLOBAL_SCOPE, {}).get((key, modifier))

    def lookup(
        self, scope: Optional[str], key: str, modifier: Modifier = Modifier.NONE
    ) -> Optional[KeybindingEntry]:
        """Panel binding first, then the global one."""
        return self.lookup_local(scope, key, modifier) or self.lookup_global(key, modifier)

    def rebind(
        self,
        scope: str,
        action: str,
        key: str,
        modifier: Modifier = Modifier.NONE,
        replace: Optional[Tuple[str, Modifier]] = None,
    ) -> bool:
        """Bind `action` in `scope` to one more key.

        The action's other keys stay bound, except `replace` when given
        (and bound to that action). Returns False when the scope has no
        binding for the action.
        """
        bindings = self._scopes.get(scope, {})
        matches = [e for e in bindings.values() if e.action == action]
        if not matches:
            return False

        taken = bindings.get((key, modifier))
        if taken is not None and taken.action != action:
            logger.warning(
                f"Key '{format_key(key, modifier)}' in {scope} was bound to {taken.action}, now {action}"
            )
        if replace is not None:
            old = bindings.get(replace)
            if old is not None and old.action == action:
                del bindings[replace]
            else:
                logger.warning(f"Key '{format_key(*replace)}' is not bound to {action} in {scope}, kept")

        template = matches[0]
        self.bind(scope, key, template.handler, modifier, action, template.description)
        return True

    def keys_for(self, scope: str, action: str) -> List[str]:
        """Labels of every key bound to `action` in `scope`."""
        return [e.label for e in self._scopes.get(scope, {}).values() if e.action == action]

    def scopes(self) -> List[str]:
        return list(self._scopes)

    def entries(self, scope: Optional[str] = None) -> List[KeybindingEntry]:
        if scope is not None:
            return list(self._scopes.get(scope, {}).values())
        return [e for bindings in self._scopes.values() for e in bindings.values()]
