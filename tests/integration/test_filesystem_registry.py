"""Tests for the filesystem-backed MIME registry."""

from pathlib import Path

import pytest

from sen_mime.core.errors import InvalidFieldValueError, MimeTypeNotInstalledError, RegistryError
from sen_mime.core.fields import FieldKind
from sen_mime.core.registry.real import FilesystemMimeRegistry, record_from_toml, record_to_toml
from sen_mime.core.types import AttributeSpec, AttributeValueType, TypeRecord


def test_install_writes_supertype_and_subtype(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)

    registry.install("Entity/Person")

    assert (tmp_path / "entity.toml").is_file()
    assert (tmp_path / "entity" / "person.toml").is_file()
    assert registry.is_installed("entity/person")
    record = registry.get_record("entity/person")
    assert record == TypeRecord(mime_type="Entity/Person")


def test_install_keeps_existing_record(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)
    registry.install("entity/person")
    registry.set_field("entity/person", FieldKind.SHORT_DESCRIPTION, "Person")

    registry.install("entity/person")

    record = registry.get_record("entity/person")
    assert record is not None
    assert record.short_description == "Person"


def test_install_invalid_type(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)

    with pytest.raises(RegistryError, match="not a valid MIME type"):
        registry.install("entity/")


def test_set_field_persists(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)
    registry.install("application/x-sen-note")
    attributes = (
        AttributeSpec("attr:title", "Title", AttributeValueType.STRING, searchable=True),
        AttributeSpec("attr:words", "Words", AttributeValueType.INT32, editable=True),
    )

    registry.set_field("application/x-sen-note", FieldKind.SHORT_DESCRIPTION, "SEN Note")
    registry.set_field("application/x-sen-note", FieldKind.EXTENSIONS, (".note",))
    registry.set_field("application/x-sen-note", FieldKind.ATTR_INFO, attributes)
    registry.set_field("application/x-sen-note", FieldKind.ICON, b"\x00icon")

    reopened = FilesystemMimeRegistry(tmp_path).get_record("application/x-sen-note")
    assert reopened == TypeRecord(
        mime_type="application/x-sen-note",
        short_description="SEN Note",
        extensions=("note",),
        attributes=attributes,
        icon=b"\x00icon",
    )


def test_set_field_not_installed(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)

    with pytest.raises(MimeTypeNotInstalledError):
        registry.set_field("entity/person", FieldKind.SHORT_DESCRIPTION, "Person")


def test_set_field_invalid_value_leaves_record(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)
    registry.install("entity/person")

    with pytest.raises(InvalidFieldValueError):
        registry.set_field("entity/person", FieldKind.PREFERRED_APP, "no app")

    assert registry.get_record("entity/person") == TypeRecord(mime_type="entity/person")


def test_listing(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)
    registry.install("entity/place")
    registry.install("entity/person")
    registry.install("relation/knows")

    assert registry.installed_types("entity") == ["entity/person", "entity/place"]
    assert registry.installed_types("relation") == ["relation/knows"]
    assert registry.installed_types("application") == []
    assert registry.installed_supertypes() == ["entity", "relation"]


def test_listing_missing_root(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path / "absent")

    assert registry.installed_supertypes() == []
    assert registry.installed_types("entity") == []


def test_delete_subtype(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)
    registry.install("entity/person")

    registry.delete("entity/person")

    assert not registry.is_installed("entity/person")
    assert registry.is_installed("entity")


def test_delete_supertype(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)
    registry.install("entity/person")
    registry.delete("entity/person")

    registry.delete("entity")

    assert not registry.is_installed("entity")
    assert not (tmp_path / "entity").exists()


def test_delete_supertype_with_subtypes(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)
    registry.install("entity/person")

    with pytest.raises(RegistryError, match="installed subtype"):
        registry.delete("entity")

    assert registry.is_installed("entity/person")


def test_delete_missing(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path)

    with pytest.raises(MimeTypeNotInstalledError):
        registry.delete("entity/person")


def test_corrupt_record(tmp_path: Path) -> None:
    (tmp_path / "entity").mkdir()
    (tmp_path / "entity" / "person.toml").write_text("type = ", encoding="utf-8")
    registry = FilesystemMimeRegistry(tmp_path)

    with pytest.raises(RegistryError, match="cannot read record"):
        registry.get_record("entity/person")


def test_record_toml_omits_unset_fields() -> None:
    text = record_to_toml(TypeRecord(mime_type="entity"))

    assert text.strip() == 'type = "entity"'
    assert record_from_toml(text) == TypeRecord(mime_type="entity")


def test_dot_segments_cannot_escape_root(tmp_path: Path) -> None:
    registry = FilesystemMimeRegistry(tmp_path / "db")

    with pytest.raises(RegistryError, match="not a valid MIME type"):
        registry.install("../escaped")

    assert not (tmp_path / "escaped.toml").exists()


def test_delete_never_touches_files_outside_root(tmp_path: Path) -> None:
    outside = tmp_path / "escaped.toml"
    outside.write_text('type = "escaped"\n', encoding="utf-8")
    registry = FilesystemMimeRegistry(tmp_path / "db")

    with pytest.raises(RegistryError, match="does not map to a path under"):
        registry.delete("../escaped")

    assert outside.exists()
