"""Container list panel (running and stopped)."""

from __future__ import annotations

from typing import Any, List

from docui.docker.models import Container
from docui.ui.commands import Command
from docui.ui.panel_ids import CONTAINER_LIST, IMAGE_LIST

from . import forms
from .list_panel import Column, ListPanel


class ContainerList(ListPanel):
    TITLE = "Containers"
    RESOURCE_KIND = "container"
    COLUMNS = (
        Column("ID", 15, lambda c: c.key),
        Column("NAME", 20, lambda c: c.Names),
        Column("IMAGE", 25, lambda c: c.Image),
        Column("STATUS", 22, lambda c: c.Status),
    )

    BINDINGS = ListPanel.BINDINGS + [
        ("u", "start_container", "Start"),
        ("s", "stop_container", "Stop"),
        ("d", "remove_container", "Remove"),
        ("e", "export_container", "Export"),
        ("c", "commit_container", "Commit"),
    ]

    def fetch(self) -> List[Container]:
        return self.ctx.client.containers()

    def register_commands(self) -> None:
        client = self.ctx.client
        self.ctx.register_command(
            Command(
                forms.EXPORT_CONTAINER,
                lambda p: client.export_container(p["Container"], p["Path"]),
                success="Exported {Container} to {Path}",
                background=True,
                progress="Exporting {Container} to {Path}...",
            )
        )
        self.ctx.register_command(
            Command(
                forms.COMMIT_CONTAINER,
                lambda p: client.commit_container(p["Container"], p["Repository"], p.get("Tag", "")),
                refresh=(IMAGE_LIST,),
                success="Committed {Container} as {Repository}",
            )
        )

    def action_start_container(self, event: Any) -> None:
        ref = self.current_selection()
        if ref is None:
            return
        self.ctx.execute(
            f"start {ref}",
            lambda: self.ctx.client.start_container(ref),
            refresh=(CONTAINER_LIST,),
            success=f"Started {ref}",
        )

    def action_stop_container(self, event: Any) -> None:
        ref = self.current_selection()
        if ref is None:
            return
        self.ctx.execute(
            f"stop {ref}",
            lambda: self.ctx.client.stop_container(ref),
            refresh=(CONTAINER_LIST,),
            success=f"Stopped {ref}",
        )

    def action_remove_container(self, event: Any) -> None:
        self.confirm_remove("Do you want delete this container? (y/n)", self.ctx.client.remove_container)

    def action_export_container(self, event: Any) -> None:
        container = self.current_item()
        if container is None:
            return
        self.ctx.modal.open_input(forms.export_container_form(container.key))

    def action_commit_container(self, event: Any) -> None:
        container = self.current_item()
        if container is None:
            return
        self.ctx.modal.open_input(forms.commit_container_form(container.key))
