"""
InputPanel - the multi-field form overlay.

An InputForm is a list of labelled fields plus the id of the command that
receives the values. Auxiliary data (for example the image a new container
is created from) is merged into the submitted parameters.

Keys while the form is open:
    tab / down          next field
    shift+tab / up      previous field
    left/right/home/end move the caret
    backspace / delete  edit the focused field
    any printable key   insert at the caret
    enter               submit
    escape              cancel
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional

from docui.ui.keybindings.keys import KeyEvent
from docui.ui.position import Position

from .protocol import PanelKind

if TYPE_CHECKING:
    from docui.ui.context import UIContext

logger = logging.getLogger(__name__)

INPUT_PANEL = "input"


@dataclass
class FormField:
    """One labelled, editable value."""

    label: str
    key: str = ""  # Parameter name; defaults to the label
    value: str = ""
    required: bool = False

    def __post_init__(self) -> None:
        if not self.key:
            self.key = self.label


@dataclass
class InputForm:
    title: str
    fields: List[FormField]
    command_id: str
    aux_data: Dict[str, Any] = field(default_factory=dict)

    def values(self) -> Dict[str, Any]:
        """Field values merged with the auxiliary data (aux wins)."""
        params: Dict[str, Any] = {f.key: f.value.strip() for f in self.fields}
        params.update(self.aux_data)
        return params

    def missing(self) -> List[str]:
        return [f.label for f in self.fields if f.required and not f.value.strip()]


class InputPanel:
    """Overlay panel editing an InputForm."""

    def __init__(self, ctx: "UIContext", form: InputForm) -> None:
        if not form.fields:
            raise ValueError(f"Form {form.title!r} has no fields")
        self.ctx = ctx
        self.form = form
        self.index = 0
        self.caret = len(form.fields[0].value)
        self.error = ""
        self._keys: Mapping[str, Callable[[], None]] = {
            "tab": self.next_field,
            "down": self.next_field,
            "shift+tab": self.previous_field,
            "up": self.previous_field,
            "left": self.caret_left,
            "right": self.caret_right,
            "home": self.caret_home,
            "end": self.caret_end,
            "backspace": self.delete_left,
            "delete": self.delete_right,
            "enter": ctx.modal.submit,
            "escape": ctx.modal.cancel,
        }

    @property
    def panel_id(self) -> str:
        return INPUT_PANEL

    @property
    def kind(self) -> PanelKind:
        return PanelKind.INPUT

    @property
    def current_field(self) -> FormField:
        return self.form.fields[self.index]

    @property
    def label_width(self) -> int:
        return max(len(f.label) for f in self.form.fields)

    @property
    def caret_column(self) -> int:
        """Column of the caret within the focused field's line."""
        return 2 + self.label_width + 3 + self.caret

    def _position(self) -> Position:
        width, _ = self.ctx.screen.size
        # fields + blank + error + hint, inside a frame
        return self.ctx.screen.bounds.centered(max(40, width * 2 // 3), len(self.form.fields) + 5)

    def initialize(self) -> None:
        self.ctx.screen.create_view(self.panel_id, self._position(), self.form.title)
        self.refresh()

    def refresh(self) -> None:
        view = self.ctx.screen.view(self.panel_id)
        view.clear()
        width = self.label_width
        for i, f in enumerate(self.form.fields):
            marker = ">" if i == self.index else " "
            required = "*" if f.required else " "
            view.write(f"{marker}{required}{f.label:<{width}} : {f.value}\n")
        view.write("\n")
        view.write(f"{self.error}\n")
        view.write("enter: submit  esc: cancel  tab: next field")
        view.set_cursor(self.index)

    def handle_key(self, event: KeyEvent) -> bool:
        action = self._keys.get(event.key)
        if action is not None:
            action()
        elif event.is_printable:
            self.insert(event.character or "")
        else:
            return True
        if self.ctx.modal.overlay is self:
            self.refresh()
        return True

    # -- editing --------------------------------------------------------

    def _focus_field(self, index: int) -> None:
        self.index = index % len(self.form.fields)
        self.caret = len(self.current_field.value)

    def next_field(self) -> None:
        self._focus_field(self.index + 1)

    def previous_field(self) -> None:
        self._focus_field(self.index - 1)

    def caret_left(self) -> None:
        self.caret = max(0, self.caret - 1)

    def caret_right(self) -> None:
        self.caret = min(len(self.current_field.value), self.caret + 1)

    def caret_home(self) -> None:
        self.caret = 0

    def caret_end(self) -> None:
        self.caret = len(self.current_field.value)

    def insert(self, text: str) -> None:
        f = self.current_field
        f.value = f.value[: self.caret] + text + f.value[self.caret :]
        self.caret += len(text)
        self.error = ""

    def delete_left(self) -> None:
        if self.caret == 0:
            return
        f = self.current_field
        f.value = f.value[: self.caret - 1] + f.value[self.caret :]
        self.caret -= 1

    def delete_right(self) -> None:
        f = self.current_field
        f.value = f.value[: self.caret] + f.value[self.caret + 1 :]

    def validate(self) -> Optional[str]:
        """Error text for missing required fields, or None."""
        missing = self.form.missing()
        if not missing:
            self.error = ""
            return None
        self.error = f"Required: {', '.join(missing)}"
        self._focus_field(next(i for i, f in enumerate(self.form.fields) if f.label == missing[0]))
        return self.error
