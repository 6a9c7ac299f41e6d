"""Image list panel."""

from __future__ import annotations

from typing import Any, List

from docui.docker.models import Image
from docui.ui.commands import Command
from docui.ui.panel_ids import CONTAINER_LIST, IMAGE_LIST

from . import forms
from .list_panel import Column, ListPanel


class ImageList(ListPanel):
    TITLE = "Images"
    RESOURCE_KIND = "image"
    COLUMNS = (
        Column("ID", 15, lambda i: i.short_id),
        Column("NAME", 40, lambda i: i.name),
        Column("SIZE", 10, lambda i: i.Size),
        Column("CREATED", 16, lambda i: i.CreatedSince),
    )

    BINDINGS = ListPanel.BINDINGS + [
        ("c", "create_container", "Create container"),
        ("p", "pull_image", "Pull"),
        ("d", "remove_image", "Remove"),
        ("e", "save_image", "Export"),
        ("i", "import_image", "Import"),
        ("ctrl+l", "load_image", "Load"),
    ]

    def fetch(self) -> List[Image]:
        return self.ctx.client.images()

    def register_commands(self) -> None:
        client = self.ctx.client
        register = self.ctx.register_command
        register(
            Command(
                forms.CREATE_CONTAINER,
                client.create_container,
                refresh=(CONTAINER_LIST,),
                success="Created container from {Image}",
            )
        )
        register(
            Command(
                forms.PULL_IMAGE,
                lambda p: client.pull_image(p["Name"]),
                refresh=(IMAGE_LIST,),
                success="Pulled {Name}",
                background=True,
                progress="Pulling {Name}...",
            )
        )
        register(
            Command(
                forms.SAVE_IMAGE,
                lambda p: client.save_image(p["ID"], p["Path"]),
                success="Exported {ID} to {Path}",
                background=True,
                progress="Exporting {ID} to {Path}...",
            )
        )
        register(
            Command(
                forms.IMPORT_IMAGE,
                lambda p: client.import_image(p["Path"], p["Repository"], p.get("Tag", "")),
                refresh=(IMAGE_LIST,),
                success="Imported {Repository}",
                background=True,
                progress="Importing {Path} as {Repository}...",
            )
        )
        register(
            Command(
                forms.LOAD_IMAGE,
                lambda p: client.load_image(p["Path"]),
                refresh=(IMAGE_LIST,),
                success="Loaded {Path}",
                background=True,
                progress="Loading {Path}...",
            )
        )

    # -- actions --------------------------------------------------------

    def action_create_container(self, event: Any) -> None:
        image = self.current_item()
        if image is None:
            return
        self.ctx.modal.open_input(forms.create_container_form(image.name))

    def action_pull_image(self, event: Any) -> None:
        self.ctx.modal.open_input(forms.pull_image_form())

    def action_remove_image(self, event: Any) -> None:
        self.confirm_remove("Do you want delete this image? (y/n)", self.ctx.client.remove_image)

    def action_save_image(self, event: Any) -> None:
        image = self.current_item()
        if image is None:
            return
        self.ctx.modal.open_input(forms.save_image_form(image.name))

    def action_import_image(self, event: Any) -> None:
        self.ctx.modal.open_input(forms.import_image_form())

    def action_load_image(self, event: Any) -> None:
        self.ctx.modal.open_input(forms.load_image_form())
