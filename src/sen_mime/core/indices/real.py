"""Index table stored as a TOML file on the volume."""

import logging
import tomllib
from pathlib import Path

import tomlkit

from sen_mime.core.errors import IndexAlreadyExistsError, IndexNotFoundError
from sen_mime.core.indices.abc import IndexStore, SearchIndex
from sen_mime.core.types import AttributeValueType

logger = logging.getLogger(__name__)

INDEX_TABLE_NAME = "indices.toml"


class FilesystemIndexStore(IndexStore):
    """Production index store.

    The table lives at <volume_root>/indices.toml:

        [indices."attr:title"]
        type = "string"

    The table is re-read on every call; the last writer wins.
    """

    def __init__(self, volume_root: Path) -> None:
        self._volume_root = volume_root

    @property
    def table_path(self) -> Path:
        return self._volume_root / INDEX_TABLE_NAME

    def _load(self) -> dict[str, AttributeValueType]:
        path = self.table_path
        if not path.exists():
            return {}
        data = tomllib.loads(path.read_text(encoding="utf-8"))
        indices: dict[str, AttributeValueType] = {}
        table = data.get("indices", {})
        if not isinstance(table, dict):
            raise ValueError(f"{path}: 'indices' must be a table")
        for name, entry in table.items():
            if not isinstance(entry, dict) or not isinstance(entry.get("type"), str):
                raise ValueError(f"{path}: index {name!r} has no 'type'")
            indices[name] = AttributeValueType.parse(entry["type"])
        return indices

    def _save(self, indices: dict[str, AttributeValueType]) -> None:
        doc = tomlkit.document()
        doc.add(tomlkit.comment("Attribute indices on this volume"))
        table = tomlkit.table(is_super_table=True)
        for name in sorted(indices):
            entry = tomlkit.table()
            entry.add("type", indices[name].type_name)
            table.add(name, entry)
        doc.add("indices", table)
        self._volume_root.mkdir(parents=True, exist_ok=True)
        self.table_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def has_index(self, name: str) -> bool:
        return name in self._load()

    def create_index(self, name: str, value_type: AttributeValueType) -> None:
        if not value_type.indexable:
            raise ValueError(f"attributes of type {value_type.type_name} cannot be indexed")
        indices = self._load()
        if name in indices:
            raise IndexAlreadyExistsError(name)
        indices[name] = value_type
        self._save(indices)
        logger.debug("Created index %s (%s) in %s", name, value_type.type_name, self.table_path)

    def remove_index(self, name: str) -> None:
        indices = self._load()
        if name not in indices:
            raise IndexNotFoundError(name)
        del indices[name]
        self._save(indices)
        logger.debug("Removed index %s from %s", name, self.table_path)

    def list_indices(self) -> list[SearchIndex]:
        return [
            SearchIndex(name=name, value_type=value_type)
            for name, value_type in sorted(self._load().items())
        ]
