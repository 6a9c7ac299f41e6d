"""
Container engine client.

Drives the `docker` CLI (or any CLI-compatible engine such as podman)
through subprocess and parses its JSON output. Every method either returns
its result or raises ClientError with the engine's stderr; callers never
have to inspect return codes.
"""

from __future__ import annotations

import json
import logging
import re
import shlex
import subprocess
from typing import Any, Callable, Dict, List, Optional, Sequence, Type

from docui.config.constants import DEFAULT_DOCKER_BINARY
from docui.exceptions import ClientError, NotFoundError

from .models import Container, Image, Network, Resource, Volume

logger = logging.getLogger(__name__)

# Refuse anything that could be read as an option by the CLI
_SAFE_REF = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.:/@+-]*$")

Runner = Callable[..., subprocess.CompletedProcess]


def is_valid_ref(value: str) -> bool:
    """True for ids, names and image references safe to pass as arguments."""
    return bool(value) and bool(_SAFE_REF.match(value))


def _require_ref(value: str, what: str) -> str:
    value = (value or "").strip()
    if not is_valid_ref(value):
        raise ClientError(f"Invalid {what}: {value!r}")
    return value


def _require_text(value: Any, what: str) -> str:
    text = str(value or "").strip()
    if not text:
        raise ClientError(f"{what} is required")
    return text


def split_csv(value: Any) -> List[str]:
    """Split a comma separated form value, dropping blanks."""
    return [part.strip() for part in str(value or "").split(",") if part.strip()]


class DockerClient:
    """Thin wrapper around the container engine CLI."""

    def __init__(self, binary: str = DEFAULT_DOCKER_BINARY, runner: Optional[Runner] = None):
        self.binary = binary
        self._runner = runner or subprocess.run

    # ------------------------------------------------------------------
    # plumbing
    # ------------------------------------------------------------------

    def _run(self, args: Sequence[str]) -> str:
        """Run one engine command and return its stdout."""
        cmd = [self.binary, *args]
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            result = self._runner(cmd, capture_output=True, text=True)
        except FileNotFoundError as e:
            raise ClientError(f"{self.binary} not found", command=cmd) from e
        except OSError as e:
            raise ClientError(f"Failed to run {self.binary}: {e}", command=cmd) from e

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            logger.warning(f"{' '.join(cmd)} exited {result.returncode}: {stderr}")
            message = stderr or f"{self.binary} {args[0]} failed"
            raise ClientError(message, command=cmd, returncode=result.returncode)
        return result.stdout or ""

    def _run_json_lines(self, args: Sequence[str]) -> List[Dict[str, Any]]:
        items = []
        for line in self._run(args).splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                items.append(json.loads(line))
            except json.JSONDecodeError as e:
                logger.warning(f"Skipping unparseable line from {args[0]}: {e}: {line[:100]}")
        return items

    def _list(self, args: Sequence[str], model: Type[Resource]) -> List[Any]:
        raw = self._run_json_lines([*args, "--format", "{{json .}}"])
        return [item for item in (model.from_dict(r) for r in raw) if item is not None]

    # ------------------------------------------------------------------
    # queries
    # ------------------------------------------------------------------

    def images(self) -> List[Image]:
        return self._list(["images"], Image)

    def containers(self) -> List[Container]:
        return self._list(["ps", "-a"], Container)

    def volumes(self) -> List[Volume]:
        return self._list(["volume", "ls"], Volume)

    def networks(self) -> List[Network]:
        return self._list(["network", "ls"], Network)

    def inspect(self, kind: str, ref: str) -> Dict[str, Any]:
        """Inspect one object of the given kind (image, container, volume, network)."""
        ref = _require_ref(ref, kind)
        try:
            output = self._run(["inspect", "--type", kind, ref])
        except ClientError as e:
            if "No such" in e.message:
                raise NotFoundError(ref, command=e.command, returncode=e.returncode) from e
            raise
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise ClientError(f"Unreadable inspect output for {ref}") from e
        if not data:
            raise NotFoundError(ref)
        return data[0]

    # ------------------------------------------------------------------
    # images
    # ------------------------------------------------------------------

    def pull_image(self, name: str) -> None:
        self._run(["pull", _require_ref(name, "image name")])

    def remove_image(self, ref: str) -> None:
        self._run(["rmi", _require_ref(ref, "image")])

    def save_image(self, ref: str, path: str) -> None:
        """Write an image to a tar archive (docker save)."""
        self._run(["save", "-o", _require_text(path, "Path"), _require_ref(ref, "image")])

    def import_image(self, path: str, repository: str, tag: str = "") -> None:
        """Create an image from a filesystem tarball (docker import)."""
        target = _require_ref(repository, "repository")
        if tag:
            target = f"{target}:{_require_ref(tag, 'tag')}"
        self._run(["import", _require_text(path, "Path"), target])

    def load_image(self, path: str) -> None:
        """Load images from a tar archive (docker load)."""
        self._run(["load", "-i", _require_text(path, "Path")])

    # ------------------------------------------------------------------
    # containers
    # ------------------------------------------------------------------

    def create_container(self, params: Dict[str, Any]) -> str:
        """Create a container from form parameters and return its id.

        Recognised keys: Image (required), Name, HostPort, Port, HostVolume,
        Volume, Env (comma separated KEY=VALUE), Cmd (shell words).
        """
        args = ["create"]
        name = str(params.get("Name") or "").strip()
        if name:
            args += ["--name", _require_ref(name, "container name")]

        port = str(params.get("Port") or "").strip()
        host_port = str(params.get("HostPort") or "").strip()
        if port:
            args += ["-p", f"{host_port}:{port}" if host_port else port]

        volume = str(params.get("Volume") or "").strip()
        host_volume = str(params.get("HostVolume") or "").strip()
        if volume:
            args += ["-v", f"{host_volume}:{volume}" if host_volume else volume]

        for env in split_csv(params.get("Env")):
            args += ["-e", env]

        args.append(_require_ref(str(params.get("Image") or ""), "image"))
        cmd = str(params.get("Cmd") or "").strip()
        if cmd:
            args += shlex.split(cmd)

        return self._run(args).strip()

    def start_container(self, ref: str) -> None:
        self._run(["start", _require_ref(ref, "container")])

    def stop_container(self, ref: str) -> None:
        self._run(["stop", _require_ref(ref, "container")])

    def remove_container(self, ref: str) -> None:
        self._run(["rm", _require_ref(ref, "container")])

    def export_container(self, ref: str, path: str) -> None:
        self._run(["export", "-o", _require_text(path, "Path"), _require_ref(ref, "container")])

    def commit_container(self, ref: str, repository: str, tag: str = "") -> None:
        target = _require_ref(repository, "repository")
        if tag:
            target = f"{target}:{_require_ref(tag, 'tag')}"
        self._run(["commit", _require_ref(ref, "container"), target])

    # ------------------------------------------------------------------
    # volumes / networks
    # ------------------------------------------------------------------

    def create_volume(
        self,
        name: str,
        driver: str = "",
        labels: Sequence[str] = (),
        options: Sequence[str] = (),
    ) -> None:
        args = ["volume", "create"]
        if driver:
            args += ["--driver", _require_ref(driver, "driver")]
        for label in labels:
            args += ["--label", label]
        for opt in options:
            args += ["--opt", opt]
        args.append(_require_ref(name, "volume name"))
        self._run(args)

    def remove_volume(self, name: str) -> None:
        self._run(["volume", "rm", _require_ref(name, "volume")])

    def remove_network(self, ref: str) -> None:
        self._run(["network", "rm", _require_ref(ref, "network")])
