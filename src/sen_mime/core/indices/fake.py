"""In-memory fake index store for testing."""

from sen_mime.core.errors import IndexAlreadyExistsError, IndexNotFoundError
from sen_mime.core.indices.abc import IndexStore, SearchIndex
from sen_mime.core.types import AttributeValueType


class FakeIndexStore(IndexStore):
    """In-memory index store that records create/remove calls.

    Same checks as the real store: duplicate creates and missing removes
    raise, and non-indexable types are rejected.

    Args:
        indices: Indices present on the volume at start
        write_error: Raised by create_index()/remove_index() if set
    """

    def __init__(
        self,
        indices: list[SearchIndex] | None = None,
        write_error: Exception | None = None,
    ) -> None:
        self._indices: dict[str, AttributeValueType] = {
            index.name: index.value_type for index in (indices or [])
        }
        self._write_error = write_error
        self._created: list[tuple[str, AttributeValueType]] = []
        self._removed: list[str] = []

    @property
    def created(self) -> list[tuple[str, AttributeValueType]]:
        return self._created

    @property
    def removed(self) -> list[str]:
        return self._removed

    def has_index(self, name: str) -> bool:
        return name in self._indices

    def create_index(self, name: str, value_type: AttributeValueType) -> None:
        if self._write_error is not None:
            raise self._write_error
        if not value_type.indexable:
            raise ValueError(f"attributes of type {value_type.type_name} cannot be indexed")
        if name in self._indices:
            raise IndexAlreadyExistsError(name)
        self._indices[name] = value_type
        self._created.append((name, value_type))

    def remove_index(self, name: str) -> None:
        if self._write_error is not None:
            raise self._write_error
        if name not in self._indices:
            raise IndexNotFoundError(name)
        del self._indices[name]
        self._removed.append(name)

    def list_indices(self) -> list[SearchIndex]:
        return [
            SearchIndex(name=name, value_type=value_type)
            for name, value_type in sorted(self._indices.items())
        ]
