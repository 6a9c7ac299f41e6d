"""
Keybinding table and dispatch for docui.

Panels declare their keys in BINDINGS; the table maps (panel, key) to a
handler and the dispatcher resolves each key press against the active
overlay, the focused panel and the global scope, in that order.
"""

from .keys import KeyEvent, Modifier, format_key, parse_key
from .table import GLOBAL_SCOPE, KeybindingEntry, KeybindingTable

__all__ = [
    "GLOBAL_SCOPE",
    "KeyEvent",
    "KeybindingEntry",
    "KeybindingTable",
    "Modifier",
    "format_key",
    "parse_key",
]
