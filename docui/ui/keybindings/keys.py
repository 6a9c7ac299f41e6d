"""
Key symbols and key events.

Keys use Textual's names ("j", "enter", "escape", "ctrl+l", "shift+tab").
The alt modifier is split out into a Modifier flag so a binding can be
declared as ("x", Modifier.ALT) or as the string "alt+x".
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from docui.ui.context import UIContext


class Modifier(Enum):
    """Modifier flags that are not part of the key name itself."""

    NONE = "none"
    ALT = "alt"


def parse_key(spec: str) -> Tuple[str, Modifier]:
    """Split "alt+x" into ("x", Modifier.ALT); other specs pass through."""
    if spec.startswith("alt+") and len(spec) > 4:
        return spec[4:], Modifier.ALT
    return spec, Modifier.NONE


def format_key(key: str, modifier: Modifier = Modifier.NONE) -> str:
    if modifier is Modifier.ALT:
        return f"alt+{key}"
    return key


@dataclass
class KeyEvent:
    """A key press being dispatched to a panel or overlay.

    Attributes:
        key: Key name as delivered by the terminal ("j", "ctrl+l")
        modifier: Modifier flag split off the key name
        panel_id: Panel that had focus when the key arrived
        ctx: The UI context the key is dispatched in
        character: Printable character for the key, if any
    """

    key: str
    modifier: Modifier
    panel_id: Optional[str]
    ctx: "UIContext"
    character: Optional[str] = None

    @property
    def is_printable(self) -> bool:
        return (
            self.modifier is Modifier.NONE
            and self.character is not None
            and len(self.character) == 1
            and self.character.isprintable()
        )
