"""Resource containers described in TOML.

A container file lists its resources as an array of tables:

    [[resource]]
    type = "CSTR"
    name = "META:TYPE"
    data = "application/x-sen-note"

    [[resource]]
    type = "MSGG"
    name = "META:EXTENS"
    data = { extensions = ["note"] }

    [[resource]]
    type = "VICN"
    name = "META:ICON"
    file = "note.hvif"

Binary payloads are given either as `file` (relative to the container) or as
`data` with `encoding = "base64"`.
"""

import base64
import binascii
import logging
import tomllib
from pathlib import Path
from typing import Any

from sen_mime.core.errors import ContainerUnreadableError, MalformedContainerError
from sen_mime.core.resources.abc import (
    ResourceContainer,
    ResourceData,
    Resources,
    ResourceValue,
)

logger = logging.getLogger(__name__)


class TomlResourceContainer(ResourceContainer):
    """A parsed TOML container. All payloads are loaded eagerly on open."""

    def __init__(self, path: Path, resources: dict[tuple[str, str], ResourceValue]) -> None:
        self._path = path
        self._resources = resources

    @property
    def path(self) -> Path:
        return self._path

    def load(self, type_tag: str, name: str) -> ResourceValue | None:
        return self._resources.get((type_tag, name))

    def list_resources(self) -> list[tuple[str, str]]:
        return list(self._resources.keys())


class TomlResources(Resources):
    """Production reader for TOML resource containers."""

    def open_container(self, path: Path) -> TomlResourceContainer:
        if not path.exists():
            raise ContainerUnreadableError(f"{path}: no such file")
        if path.is_dir():
            raise ContainerUnreadableError(f"{path}: is a directory")

        try:
            raw = path.read_bytes()
        except OSError as e:
            raise ContainerUnreadableError(f"{path}: {e.strerror or e}") from e

        try:
            document = tomllib.loads(raw.decode("utf-8"))
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
            raise MalformedContainerError(f"{path}: {e}") from e

        entries = document.get("resource", [])
        if not isinstance(entries, list):
            raise MalformedContainerError(f"{path}: 'resource' must be an array of tables")

        resources: dict[tuple[str, str], ResourceValue] = {}
        for index, entry in enumerate(entries):
            key, value = self._parse_entry(path, index, entry)
            if key in resources:
                raise MalformedContainerError(
                    f"{path}: duplicate resource {key[0]} {key[1]!r} (entry {index})"
                )
            resources[key] = value

        logger.debug("Opened resource container %s with %d resources", path, len(resources))
        return TomlResourceContainer(path, resources)

    def _parse_entry(
        self, path: Path, index: int, entry: Any
    ) -> tuple[tuple[str, str], ResourceValue]:
        if not isinstance(entry, dict):
            raise MalformedContainerError(f"{path}: resource entry {index} is not a table")

        type_tag = entry.get("type")
        if not isinstance(type_tag, str) or len(type_tag) != 4:
            raise MalformedContainerError(
                f"{path}: resource entry {index} needs a four-character 'type'"
            )
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise MalformedContainerError(f"{path}: resource entry {index} needs a 'name'")
        resource_id = entry.get("id")
        if resource_id is not None and not isinstance(resource_id, int):
            raise MalformedContainerError(f"{path}: resource {name!r} has a non-numeric 'id'")

        has_data = "data" in entry
        has_file = "file" in entry
        if has_data == has_file:
            raise MalformedContainerError(
                f"{path}: resource {name!r} needs exactly one of 'data' or 'file'"
            )

        if has_file:
            payload: ResourceData = self._read_payload_file(path, name, entry["file"])
        else:
            payload = self._decode_data(path, name, entry["data"], entry.get("encoding"))

        return (type_tag, name), ResourceValue.of(payload)

    def _read_payload_file(self, path: Path, name: str, relative: Any) -> bytes:
        if not isinstance(relative, str):
            raise MalformedContainerError(f"{path}: resource {name!r} 'file' must be a string")
        payload_path = path.parent / relative
        try:
            return payload_path.read_bytes()
        except OSError as e:
            raise MalformedContainerError(
                f"{path}: resource {name!r} cannot read {payload_path}: {e.strerror or e}"
            ) from e

    def _decode_data(
        self, path: Path, name: str, data: Any, encoding: Any
    ) -> ResourceData:
        if encoding is None:
            if isinstance(data, (str, dict)):
                return data
            raise MalformedContainerError(
                f"{path}: resource {name!r} 'data' must be a string or a table"
            )
        if encoding != "base64":
            raise MalformedContainerError(
                f"{path}: resource {name!r} has unsupported encoding {encoding!r}"
            )
        if not isinstance(data, str):
            raise MalformedContainerError(f"{path}: resource {name!r} base64 data must be a string")
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise MalformedContainerError(f"{path}: resource {name!r} invalid base64: {e}") from e
