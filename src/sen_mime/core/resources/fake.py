"""In-memory fake resource containers for testing."""

from pathlib import Path

from sen_mime.core.errors import ContainerUnreadableError, MalformedContainerError
from sen_mime.core.resources.abc import (
    ResourceContainer,
    ResourceData,
    Resources,
    ResourceValue,
)


class FakeResourceContainer(ResourceContainer):
    def __init__(self, path: Path, resources: dict[tuple[str, str], ResourceData]) -> None:
        self._path = path
        self._resources = {key: ResourceValue.of(data) for key, data in resources.items()}
        self._load_calls: list[tuple[str, str]] = []

    @property
    def path(self) -> Path:
        return self._path

    @property
    def load_calls(self) -> list[tuple[str, str]]:
        """Resources requested so far, in order. For test assertions only."""
        return self._load_calls

    def load(self, type_tag: str, name: str) -> ResourceValue | None:
        self._load_calls.append((type_tag, name))
        return self._resources.get((type_tag, name))

    def list_resources(self) -> list[tuple[str, str]]:
        return list(self._resources.keys())


class FakeResources(Resources):
    """In-memory resource containers keyed by path.

    All state is provided via constructor. Paths listed in `malformed` raise
    MalformedContainerError on open; unknown paths raise
    ContainerUnreadableError, like a missing file.

    Example:
        resources = FakeResources(
            containers={
                Path("/apps/note.rsrc"): {
                    ("CSTR", "META:TYPE"): "application/x-sen-note",
                    ("MSDC", "META:S:DESC"): "SEN Note",
                }
            }
        )
    """

    def __init__(
        self,
        containers: dict[Path, dict[tuple[str, str], ResourceData]] | None = None,
        malformed: set[Path] | None = None,
    ) -> None:
        self._containers = {
            path: FakeResourceContainer(path, resources)
            for path, resources in (containers or {}).items()
        }
        self._malformed = malformed or set()
        self._opened: list[Path] = []

    @property
    def opened(self) -> list[Path]:
        """Paths passed to open_container(). For test assertions only."""
        return self._opened

    def container(self, path: Path) -> FakeResourceContainer:
        """Get the fake container registered at path. For test assertions only."""
        return self._containers[path]

    def open_container(self, path: Path) -> FakeResourceContainer:
        self._opened.append(path)
        if path in self._malformed:
            raise MalformedContainerError(f"{path}: malformed resource container")
        if path not in self._containers:
            raise ContainerUnreadableError(f"{path}: no such file")
        return self._containers[path]
