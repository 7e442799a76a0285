"""Volume search index interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from sen_mime.core.types import AttributeValueType


@dataclass(frozen=True)
class SearchIndex:
    """A volume-level index over one named file attribute."""

    name: str
    value_type: AttributeValueType


class IndexStore(ABC):
    """Abstract interface for a volume's attribute indices.

    Indices belong to the volume, not to any MIME type: they may exist before
    an import creates them and outlive the type that asked for them.

    Implementations:
    - FilesystemIndexStore: index table kept in a TOML file on the volume
    - FakeIndexStore: in-memory for tests
    """

    @abstractmethod
    def has_index(self, name: str) -> bool:
        """Check whether the volume has an index with this name."""
        ...

    @abstractmethod
    def create_index(self, name: str, value_type: AttributeValueType) -> None:
        """Create an index.

        Raises:
            IndexAlreadyExistsError: If an index with this name exists
            ValueError: If value_type cannot be indexed
            OSError: If the volume's index table cannot be written
        """
        ...

    @abstractmethod
    def remove_index(self, name: str) -> None:
        """Remove an index.

        Raises:
            IndexNotFoundError: If no index with this name exists
            OSError: If the volume's index table cannot be written
        """
        ...

    @abstractmethod
    def list_indices(self) -> list[SearchIndex]:
        """List the volume's indices, sorted by name."""
        ...
