"""Shared pytest fixtures for docui tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple

import pytest

from docui.docker.models import Container, Image, Network, Volume
from docui.exceptions import ClientError
from docui.ui.context import UIContext
from docui.ui.dashboard import build_dashboard
from docui.ui.keybindings.keys import Modifier

# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


def make_image(
    id: str = "sha256:4e1b2c3d4e5f6a7b8c9d",
    repository: str = "nginx",
    tag: str = "latest",
    size: str = "187MB",
    created: str = "2 weeks ago",
) -> Image:
    return Image(ID=id, Repository=repository, Tag=tag, Size=size, CreatedSince=created)


def make_container(
    id: str = "c0ffee1234567890",
    names: str = "web",
    image: str = "nginx:latest",
    status: str = "Exited (0) 2 hours ago",
    state: str = "exited",
) -> Container:
    return Container(ID=id, Names=names, Image=image, Status=status, State=state)


def make_volume(name: str = "data", driver: str = "local") -> Volume:
    return Volume(Name=name, Driver=driver, Mountpoint=f"/var/lib/docker/volumes/{name}/_data", Scope="local")


def make_network(id: str = "abcdef0123456789", name: str = "bridge", driver: str = "bridge") -> Network:
    return Network(ID=id, Name=name, Driver=driver, Scope="local")


# ---------------------------------------------------------------------------
# Fake container engine client
# ---------------------------------------------------------------------------


class FakeClient:
    """In-memory stand-in for DockerClient.

    Every call is recorded in `calls`. Put a ClientError in `fail[name]` to
    make that operation raise it.
    """

    RECORDED = (
        "create_container",
        "pull_image",
        "save_image",
        "import_image",
        "load_image",
        "start_container",
        "stop_container",
        "export_container",
        "commit_container",
        "create_volume",
    )

    def __init__(
        self,
        images: Optional[List[Image]] = None,
        containers: Optional[List[Container]] = None,
        volumes: Optional[List[Volume]] = None,
        networks: Optional[List[Network]] = None,
    ) -> None:
        self.images_data = list(images or [])
        self.containers_data = list(containers or [])
        self.volumes_data = list(volumes or [])
        self.networks_data = list(networks or [])
        self.calls: List[Tuple[Any, ...]] = []
        self.fail: Dict[str, ClientError] = {}

    def _call(self, name: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((name, *args, *kwargs.values()))
        if name in self.fail:
            raise self.fail[name]

    def calls_to(self, name: str) -> List[Tuple[Any, ...]]:
        return [c for c in self.calls if c[0] == name]

    # -- queries --------------------------------------------------------

    def images(self) -> List[Image]:
        self._call("images")
        return list(self.images_data)

    def containers(self) -> List[Container]:
        self._call("containers")
        return list(self.containers_data)

    def volumes(self) -> List[Volume]:
        self._call("volumes")
        return list(self.volumes_data)

    def networks(self) -> List[Network]:
        self._call("networks")
        return list(self.networks_data)

    def inspect(self, kind: str, ref: str) -> Dict[str, Any]:
        self._call("inspect", kind, ref)
        return {"Id": ref, "Kind": kind}

    # -- removals actually remove, so refreshes show the effect ---------

    def remove_image(self, ref: str) -> None:
        self._call("remove_image", ref)
        self.images_data = [i for i in self.images_data if i.key != ref]

    def remove_container(self, ref: str) -> None:
        self._call("remove_container", ref)
        self.containers_data = [c for c in self.containers_data if c.key != ref]

    def remove_volume(self, ref: str) -> None:
        self._call("remove_volume", ref)
        self.volumes_data = [v for v in self.volumes_data if v.key != ref]

    def remove_network(self, ref: str) -> None:
        self._call("remove_network", ref)
        self.networks_data = [n for n in self.networks_data if n.key != ref]

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name not in self.RECORDED:
            raise AttributeError(name)

        def operation(*args: Any, **kwargs: Any) -> None:
            self._call(name, *args, **kwargs)

        return operation


# ---------------------------------------------------------------------------
# Key helpers
# ---------------------------------------------------------------------------


def press(ctx: UIContext, *keys: str) -> None:
    """Dispatch keys to the focused panel, the way the canvas does."""
    for key in keys:
        modifier = Modifier.NONE
        if key.startswith("alt+"):
            key, modifier = key[4:], Modifier.ALT
        character = key if len(key) == 1 else None
        ctx.dispatcher.dispatch_focused(key, modifier, character)


def type_text(ctx: UIContext, text: str) -> None:
    for char in text:
        ctx.dispatcher.dispatch_focused(char, Modifier.NONE, char)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def client() -> FakeClient:
    return FakeClient(
        images=[
            make_image(),
            make_image(id="sha256:9f8e7d6c5b4a39281706", repository="redis", tag="7"),
        ],
        containers=[make_container()],
        volumes=[make_volume()],
        networks=[make_network()],
    )


@pytest.fixture
def ctx(client: FakeClient) -> UIContext:
    """A fully assembled dashboard on a 100x30 screen, images focused."""
    return build_dashboard(client, width=100, height=30, load_user_keybindings=False)


@pytest.fixture
def bare_ctx(client: FakeClient) -> UIContext:
    """A context with no panels registered."""
    return UIContext(client)
