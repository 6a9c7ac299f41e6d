"""Volume list panel."""

from __future__ import annotations

from typing import Any, Dict, List

from docui.docker.client import split_csv
from docui.docker.models import Volume
from docui.ui.commands import Command
from docui.ui.panel_ids import VOLUME_LIST

from . import forms
from .list_panel import Column, ListPanel


class VolumeList(ListPanel):
    TITLE = "Volumes"
    RESOURCE_KIND = "volume"
    COLUMNS = (
        Column("NAME", 30, lambda v: v.Name),
        Column("DRIVER", 10, lambda v: v.Driver),
        Column("MOUNTPOINT", 40, lambda v: v.Mountpoint),
    )

    BINDINGS = ListPanel.BINDINGS + [
        ("c", "create_volume", "Create"),
        ("d", "remove_volume", "Remove"),
    ]

    def fetch(self) -> List[Volume]:
        return self.ctx.client.volumes()

    def _create(self, params: Dict[str, Any]) -> None:
        self.ctx.client.create_volume(
            params["Name"],
            params.get("Driver", ""),
            labels=split_csv(params.get("Labels")),
            options=split_csv(params.get("Options")),
        )

    def register_commands(self) -> None:
        self.ctx.register_command(
            Command(forms.CREATE_VOLUME, self._create, refresh=(VOLUME_LIST,), success="Created volume {Name}")
        )

    def action_create_volume(self, event: Any) -> None:
        self.ctx.modal.open_input(forms.create_volume_form())

    def action_remove_volume(self, event: Any) -> None:
        self.confirm_remove("Do you want delete this volume? (y/n)", self.ctx.client.remove_volume)
