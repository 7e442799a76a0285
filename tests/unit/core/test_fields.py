"""Tests for reading and decoding metadata fields from resource containers."""

from pathlib import Path

import pytest

from sen_mime.core.errors import MalformedFieldError
from sen_mime.core.fields import FIELD_SPECS, OPTIONAL_FIELDS, FieldKind, read_field
from sen_mime.core.resources.abc import ResourceData
from sen_mime.core.resources.fake import FakeResourceContainer
from sen_mime.core.types import AttributeSpec, AttributeValueType


def _container(resources: dict[tuple[str, str], ResourceData]) -> FakeResourceContainer:
    return FakeResourceContainer(Path("/apps/test.rsrc"), resources)


def test_required_flags() -> None:
    required = {kind for kind, spec in FIELD_SPECS.items() if spec.required}

    assert required == {FieldKind.TYPE, FieldKind.SHORT_DESCRIPTION}
    assert set(OPTIONAL_FIELDS) == set(FieldKind) - required


def test_resource_names() -> None:
    names = {kind: (spec.type_tag, spec.resource_name) for kind, spec in FIELD_SPECS.items()}

    assert names == {
        FieldKind.TYPE: ("CSTR", "META:TYPE"),
        FieldKind.SHORT_DESCRIPTION: ("MSDC", "META:S:DESC"),
        FieldKind.LONG_DESCRIPTION: ("MLDC", "META:L:DESC"),
        FieldKind.PREFERRED_APP: ("MSIG", "META:PREF_APP"),
        FieldKind.SNIFFER_RULE: ("CSTR", "META:SNIFF_RULE"),
        FieldKind.EXTENSIONS: ("MSGG", "META:EXTENS"),
        FieldKind.ATTR_INFO: ("MSGG", "META:ATTR_INFO"),
        FieldKind.ICON: ("VICN", "META:ICON"),
    }


def test_absent_field_reads_as_none() -> None:
    container = _container({})

    assert read_field(container, FieldKind.LONG_DESCRIPTION) is None
    assert container.load_calls == [("MLDC", "META:L:DESC")]


def test_string_field_from_text() -> None:
    container = _container({("CSTR", "META:TYPE"): "application/x-sen-note"})

    assert read_field(container, FieldKind.TYPE) == "application/x-sen-note"


def test_string_field_from_nul_terminated_bytes() -> None:
    container = _container({("MSDC", "META:S:DESC"): b"SEN Note\0"})

    assert read_field(container, FieldKind.SHORT_DESCRIPTION) == "SEN Note"


def test_string_field_rejects_invalid_utf8() -> None:
    container = _container({("MSDC", "META:S:DESC"): b"\xff\xfe"})

    with pytest.raises(MalformedFieldError, match="UTF-8"):
        read_field(container, FieldKind.SHORT_DESCRIPTION)


def test_string_field_rejects_message_payload() -> None:
    container = _container({("CSTR", "META:TYPE"): {"type": "x"}})

    with pytest.raises(MalformedFieldError, match="expected a string"):
        read_field(container, FieldKind.TYPE)


def test_extensions() -> None:
    container = _container({("MSGG", "META:EXTENS"): {"extensions": ["note", ".snote"]}})

    assert read_field(container, FieldKind.EXTENSIONS) == ("note", ".snote")


def test_extensions_must_be_strings() -> None:
    container = _container({("MSGG", "META:EXTENS"): {"extensions": ["note", 3]}})

    with pytest.raises(MalformedFieldError, match="extensions"):
        read_field(container, FieldKind.EXTENSIONS)


def test_attr_info_from_tables() -> None:
    container = _container(
        {
            ("MSGG", "META:ATTR_INFO"): {
                "attributes": [
                    {"name": "attr:title", "display_name": "Title", "searchable": True},
                    {"name": "attr:size", "type": "int64", "editable": True},
                ]
            }
        }
    )

    result = read_field(container, FieldKind.ATTR_INFO)

    assert result == (
        AttributeSpec(
            name="attr:title",
            display_name="Title",
            value_type=AttributeValueType.STRING,
            searchable=True,
        ),
        AttributeSpec(
            name="attr:size",
            display_name="attr:size",
            value_type=AttributeValueType.INT64,
            searchable=None,
            editable=True,
        ),
    )


def test_attr_info_from_parallel_arrays() -> None:
    container = _container(
        {
            ("MSGG", "META:ATTR_INFO"): {
                "attr:name": ["attr:title", "attr:rating"],
                "attr:public_name": ["Title", "Rating"],
                "attr:type": ["CSTR", "LONG"],
                "attr:searchable": [True, False],
            }
        }
    )

    result = read_field(container, FieldKind.ATTR_INFO)

    assert isinstance(result, tuple)
    assert [spec.name for spec in result] == ["attr:title", "attr:rating"]
    assert [spec.display_name for spec in result] == ["Title", "Rating"]
    assert [spec.value_type for spec in result] == [
        AttributeValueType.STRING,
        AttributeValueType.INT32,
    ]
    assert [spec.searchable for spec in result] == [True, False]


def test_attr_info_rejects_ragged_arrays() -> None:
    container = _container(
        {
            ("MSGG", "META:ATTR_INFO"): {
                "attr:name": ["attr:title", "attr:rating"],
                "attr:type": ["CSTR"],
            }
        }
    )

    with pytest.raises(MalformedFieldError, match="attr:type"):
        read_field(container, FieldKind.ATTR_INFO)


def test_attr_info_rejects_unknown_type() -> None:
    container = _container(
        {("MSGG", "META:ATTR_INFO"): {"attributes": [{"name": "attr:x", "type": "blob"}]}}
    )

    with pytest.raises(MalformedFieldError, match="attribute 0"):
        read_field(container, FieldKind.ATTR_INFO)


def test_attr_info_rejects_non_boolean_flag() -> None:
    container = _container(
        {("MSGG", "META:ATTR_INFO"): {"attributes": [{"name": "attr:x", "searchable": "yes"}]}}
    )

    with pytest.raises(MalformedFieldError, match="searchable"):
        read_field(container, FieldKind.ATTR_INFO)


def test_icon_bytes() -> None:
    container = _container({("VICN", "META:ICON"): b"ncif\x01"})

    assert read_field(container, FieldKind.ICON) == b"ncif\x01"


def test_empty_icon_counts_as_absent() -> None:
    container = _container({("VICN", "META:ICON"): b""})

    assert read_field(container, FieldKind.ICON) is None


def test_icon_must_be_binary() -> None:
    container = _container({("VICN", "META:ICON"): "not binary"})

    with pytest.raises(MalformedFieldError, match="binary"):
        read_field(container, FieldKind.ICON)
