"""Filesystem-backed MIME type registry.

Layout under the registry root, mirroring a MIME database directory:

    <root>/entity.toml              supertype record
    <root>/entity/person.toml       subtype record

File and directory names are lower case; each record keeps the type string
as it was installed.
"""

import base64
import binascii
import logging
import tomllib
from pathlib import Path
from typing import Any

import tomlkit

from sen_mime.core.errors import MimeTypeNotInstalledError, RegistryError
from sen_mime.core.fields import FieldKind, FieldValue
from sen_mime.core.mime_types import is_supertype, is_valid_mime_type, supertype_of
from sen_mime.core.registry.abc import MimeRegistry
from sen_mime.core.registry.validation import apply_field, validate_field_value
from sen_mime.core.types import AttributeSpec, AttributeValueType, TypeRecord

logger = logging.getLogger(__name__)


def record_to_toml(record: TypeRecord) -> str:
    """Serialize a record to TOML, omitting unset fields."""
    doc = tomlkit.document()
    doc.add("type", record.mime_type)
    if record.short_description is not None:
        doc.add("short_description", record.short_description)
    if record.long_description is not None:
        doc.add("long_description", record.long_description)
    if record.preferred_app is not None:
        doc.add("preferred_app", record.preferred_app)
    if record.sniffer_rule is not None:
        doc.add("sniffer_rule", record.sniffer_rule)
    if record.extensions:
        doc.add("extensions", list(record.extensions))
    if record.icon is not None:
        doc.add("icon", base64.b64encode(record.icon).decode("ascii"))
    if record.attributes:
        attributes = tomlkit.aot()
        for spec in record.attributes:
            table = tomlkit.table()
            table.add("name", spec.name)
            table.add("display_name", spec.display_name)
            table.add("type", spec.value_type.type_name)
            if spec.searchable is not None:
                table.add("searchable", spec.searchable)
            table.add("viewable", spec.viewable)
            table.add("editable", spec.editable)
            attributes.append(table)
        doc.add("attributes", attributes)
    return tomlkit.dumps(doc)


def record_from_toml(text: str) -> TypeRecord:
    """Parse a record written by record_to_toml.

    Raises:
        ValueError: If the text is not a valid record
    """
    data: dict[str, Any] = tomllib.loads(text)
    mime_type = data.get("type")
    if not isinstance(mime_type, str):
        raise ValueError("record has no 'type'")

    icon: bytes | None = None
    if "icon" in data:
        try:
            icon = base64.b64decode(data["icon"], validate=True)
        except (binascii.Error, TypeError) as e:
            raise ValueError(f"record icon is not valid base64: {e}") from e

    attributes = tuple(
        AttributeSpec(
            name=entry["name"],
            display_name=entry.get("display_name", entry["name"]),
            value_type=AttributeValueType.parse(entry.get("type", "string")),
            searchable=entry.get("searchable"),
            viewable=entry.get("viewable", True),
            editable=entry.get("editable", False),
        )
        for entry in data.get("attributes", [])
    )

    return TypeRecord(
        mime_type=mime_type,
        short_description=data.get("short_description"),
        long_description=data.get("long_description"),
        preferred_app=data.get("preferred_app"),
        sniffer_rule=data.get("sniffer_rule"),
        extensions=tuple(data.get("extensions", [])),
        attributes=attributes,
        icon=icon,
    )


class FilesystemMimeRegistry(MimeRegistry):
    """Production registry storing one TOML file per installed type."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def _record_path(self, mime_type: str) -> Path:
        key = mime_type.lower()
        if is_supertype(key):
            return self._root / f"{key}.toml"
        supertype, subtype = key.split("/", 1)
        path = self._root / supertype / f"{subtype}.toml"
        if not path.resolve().is_relative_to(self._root.resolve()):
            raise RegistryError(f"{mime_type} does not map to a path under {self._root}")
        return path

    def _read(self, mime_type: str) -> TypeRecord | None:
        path = self._record_path(mime_type)
        if not path.exists():
            return None
        try:
            return record_from_toml(path.read_text(encoding="utf-8"))
        except (OSError, ValueError, KeyError) as e:
            raise RegistryError(f"cannot read record {path}: {e}") from e

    def _write(self, record: TypeRecord) -> None:
        path = self._record_path(record.mime_type)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(record_to_toml(record), encoding="utf-8")
        except OSError as e:
            raise RegistryError(f"cannot write record {path}: {e.strerror or e}") from e

    def is_installed(self, mime_type: str) -> bool:
        return self._record_path(mime_type).exists()

    def install(self, mime_type: str) -> None:
        if not is_valid_mime_type(mime_type):
            raise RegistryError(f"{mime_type} is not a valid MIME type")
        if self.is_installed(mime_type):
            logger.debug("MIME type %s already installed", mime_type)
            return
        if not is_supertype(mime_type):
            supertype = supertype_of(mime_type)
            if not self.is_installed(supertype):
                logger.debug("Installing supertype %s", supertype)
                self._write(TypeRecord(mime_type=supertype))
        self._write(TypeRecord(mime_type=mime_type))
        logger.debug("Installed MIME type %s at %s", mime_type, self._record_path(mime_type))

    def set_field(self, mime_type: str, field: FieldKind, value: FieldValue) -> None:
        record = self._read(mime_type)
        if record is None:
            raise MimeTypeNotInstalledError(mime_type)
        normalized = validate_field_value(field, value)
        self._write(apply_field(record, field, normalized))

    def delete(self, mime_type: str) -> None:
        path = self._record_path(mime_type)
        if not path.exists():
            raise MimeTypeNotInstalledError(mime_type)

        if is_supertype(mime_type):
            subtypes = self.installed_types(mime_type)
            if subtypes:
                raise RegistryError(
                    f"supertype {mime_type} still has {len(subtypes)} installed subtype(s)"
                )
        try:
            subtype_dir = self._root / mime_type.lower()
            if is_supertype(mime_type) and subtype_dir.is_dir():
                subtype_dir.rmdir()
            path.unlink()
        except OSError as e:
            raise RegistryError(f"cannot remove record {path}: {e.strerror or e}") from e
        logger.debug("Deleted MIME type %s", mime_type)

    def get_record(self, mime_type: str) -> TypeRecord | None:
        return self._read(mime_type)

    def installed_types(self, supertype: str) -> list[str]:
        key = supertype.lower()
        subtype_dir = self._root / key
        if not subtype_dir.is_dir():
            return []
        return sorted(f"{key}/{path.stem}" for path in subtype_dir.glob("*.toml"))

    def installed_supertypes(self) -> list[str]:
        if not self._root.is_dir():
            return []
        return sorted(path.stem for path in self._root.glob("*.toml"))
