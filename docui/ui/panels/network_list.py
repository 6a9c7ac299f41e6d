"""Network list panel."""

from typing import Any, List

from docui.docker.models import Network

from .list_panel import Column, ListPanel


class NetworkList(ListPanel):
    TITLE = "Networks"
    RESOURCE_KIND = "network"
    COLUMNS = (
        Column("ID", 15, lambda n: n.key),
        Column("NAME", 25, lambda n: n.Name),
        Column("DRIVER", 10, lambda n: n.Driver),
        Column("SCOPE", 8, lambda n: n.Scope),
    )

    BINDINGS = ListPanel.BINDINGS + [
        ("d", "remove_network", "Remove"),
    ]

    def fetch(self) -> List[Network]:
        return self.ctx.client.networks()

    def action_remove_network(self, event: Any) -> None:
        self.confirm_remove("Do you want delete this network? (y/n)", self.ctx.client.remove_network)
