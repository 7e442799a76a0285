"""Resource container interface.

A resource container holds typed, named blobs embedded alongside an
application. Each resource is addressed by a four-char type tag and a name
(e.g. "CSTR" / "META:TYPE").
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any

# Resource type tags used for MIME metadata
STRING_TYPE = "CSTR"
SHORT_DESCRIPTION_TYPE = "MSDC"
LONG_DESCRIPTION_TYPE = "MLDC"
SIGNATURE_TYPE = "MSIG"
MESSAGE_TYPE = "MSGG"
VECTOR_ICON_TYPE = "VICN"

ResourceData = str | bytes | dict[str, Any]


@dataclass(frozen=True)
class ResourceValue:
    """Raw resource payload and its size in bytes."""

    data: ResourceData
    size: int

    @staticmethod
    def of(data: ResourceData) -> "ResourceValue":
        """Wrap data, computing its byte length.

        Strings are measured as UTF-8 plus the terminating NUL, matching how
        they are stored in a container. Message tables report their entry count.
        """
        if isinstance(data, str):
            return ResourceValue(data=data, size=len(data.encode("utf-8")) + 1)
        return ResourceValue(data=data, size=len(data))


class ResourceContainer(ABC):
    """An opened resource container. Read-only."""

    @property
    @abstractmethod
    def path(self) -> Path:
        """Location the container was opened from."""
        ...

    @abstractmethod
    def load(self, type_tag: str, name: str) -> ResourceValue | None:
        """Load one resource.

        Args:
            type_tag: Four-char resource type (e.g. "CSTR")
            name: Resource name (e.g. "META:TYPE")

        Returns:
            The resource, or None if the container has no such resource.
            Absence is not an error; callers decide whether it was required.
        """
        ...

    @abstractmethod
    def list_resources(self) -> list[tuple[str, str]]:
        """List (type_tag, name) pairs in container order."""
        ...


class Resources(ABC):
    """Abstract interface for opening resource containers.

    Implementations:
    - TomlResources: reads a TOML resource description from disk
    - FakeResources: in-memory containers for tests
    """

    @abstractmethod
    def open_container(self, path: Path) -> ResourceContainer:
        """Open the container at path.

        Raises:
            ContainerUnreadableError: If the path cannot be opened
            MalformedContainerError: If the container cannot be parsed
        """
        ...
