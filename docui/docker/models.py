"""Container engine domain objects.

Each model is built from one line of `docker <kind> ls --format '{{json .}}'`.
Unknown keys are dropped; a row missing a required key is skipped with a
warning rather than failing the whole listing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, ClassVar, Optional, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="Resource")


@dataclass
class Resource:
    """Common parsing for all listed resources."""

    KIND: ClassVar[str] = ""
    REQUIRED: ClassVar[tuple[str, ...]] = ()

    @classmethod
    def from_dict(cls: Type[T], data: dict[str, Any]) -> Optional[T]:
        missing = [f for f in cls.REQUIRED if f not in data]
        if missing:
            logger.warning(f"Skipping {cls.KIND} row, missing fields {missing}: {str(data)[:200]}")
            return None
        known = {f.name for f in fields(cls)}
        return cls(**{k: str(v) for k, v in data.items() if k in known})

    @property
    def key(self) -> str:
        """Identifier passed back to the engine for commands."""
        raise NotImplementedError


@dataclass
class Image(Resource):
    KIND: ClassVar[str] = "image"
    REQUIRED: ClassVar[tuple[str, ...]] = ("ID", "Repository", "Tag")

    ID: str
    Repository: str
    Tag: str
    Size: str = ""
    CreatedSince: str = ""

    @property
    def key(self) -> str:
        return self.short_id

    @property
    def short_id(self) -> str:
        # `docker images` prints short ids, `--no-trunc` prints sha256:<64 hex>
        return self.ID.split(":", 1)[-1][:12]

    @property
    def name(self) -> str:
        """repository:tag, or the id for dangling images."""
        if self.Repository in ("", "<none>"):
            return self.short_id
        if self.Tag in ("", "<none>"):
            return self.Repository
        return f"{self.Repository}:{self.Tag}"


@dataclass
class Container(Resource):
    KIND: ClassVar[str] = "container"
    REQUIRED: ClassVar[tuple[str, ...]] = ("ID", "Names", "Image", "Status")

    ID: str
    Names: str
    Image: str
    Status: str
    State: str = ""
    Ports: str = ""

    @property
    def key(self) -> str:
        return self.ID[:12]

    @property
    def running(self) -> bool:
        return self.State == "running" or self.Status.startswith("Up")


@dataclass
class Volume(Resource):
    KIND: ClassVar[str] = "volume"
    REQUIRED: ClassVar[tuple[str, ...]] = ("Name", "Driver")

    Name: str
    Driver: str
    Mountpoint: str = ""
    Scope: str = ""

    @property
    def key(self) -> str:
        return self.Name


@dataclass
class Network(Resource):
    KIND: ClassVar[str] = "network"
    REQUIRED: ClassVar[tuple[str, ...]] = ("ID", "Name", "Driver")

    ID: str
    Name: str
    Driver: str
    Scope: str = ""

    @property
    def key(self) -> str:
        return self.ID[:12]
