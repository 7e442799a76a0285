"""Typed access to MIME metadata stored in resource containers.

Each FieldKind maps to a FieldSpec naming the resource that holds it, whether
an import requires it, and a decoder that turns the raw resource payload into
the value the registry stores.
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sen_mime.core.errors import MalformedFieldError
from sen_mime.core.resources.abc import (
    LONG_DESCRIPTION_TYPE,
    MESSAGE_TYPE,
    SHORT_DESCRIPTION_TYPE,
    SIGNATURE_TYPE,
    STRING_TYPE,
    VECTOR_ICON_TYPE,
    ResourceContainer,
    ResourceValue,
)
from sen_mime.core.types import AttributeSpec, AttributeValueType

FieldValue = str | bytes | tuple[str, ...] | tuple[AttributeSpec, ...]


class FieldKind(Enum):
    TYPE = "type"
    SHORT_DESCRIPTION = "short_description"
    LONG_DESCRIPTION = "long_description"
    PREFERRED_APP = "preferred_app"
    SNIFFER_RULE = "sniffer_rule"
    EXTENSIONS = "extensions"
    ATTR_INFO = "attr_info"
    ICON = "icon"


@dataclass(frozen=True)
class FieldSpec:
    kind: FieldKind
    type_tag: str
    resource_name: str
    required: bool
    label: str
    decode: Callable[[ResourceValue], FieldValue]


def _decode_string(value: ResourceValue) -> str:
    data = value.data
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedFieldError(f"not valid UTF-8: {e}") from e
    if not isinstance(data, str):
        raise MalformedFieldError("expected a string")
    return data.rstrip("\0")


def _message(value: ResourceValue) -> dict[str, Any]:
    if not isinstance(value.data, dict):
        raise MalformedFieldError("expected a message table")
    return value.data


def _decode_extensions(value: ResourceValue) -> tuple[str, ...]:
    message = _message(value)
    extensions = message.get("extensions")
    if not isinstance(extensions, list) or not all(isinstance(e, str) for e in extensions):
        raise MalformedFieldError("message needs an 'extensions' array of strings")
    return tuple(extensions)


def _optional_bool(entry: dict[str, Any], key: str, index: int) -> bool | None:
    flag = entry.get(key)
    if flag is not None and not isinstance(flag, bool):
        raise MalformedFieldError(f"attribute {index}: '{key}' must be a boolean")
    return flag


def _attribute_from_table(entry: Any, index: int) -> AttributeSpec:
    if not isinstance(entry, dict):
        raise MalformedFieldError(f"attribute {index} is not a table")
    name = entry.get("name")
    if not isinstance(name, str):
        raise MalformedFieldError(f"attribute {index}: 'name' must be a string")
    display_name = entry.get("display_name", name)
    if not isinstance(display_name, str):
        raise MalformedFieldError(f"attribute {index}: 'display_name' must be a string")
    type_name = entry.get("type", "string")
    if not isinstance(type_name, str):
        raise MalformedFieldError(f"attribute {index}: 'type' must be a string")
    try:
        value_type = AttributeValueType.parse(type_name)
    except ValueError as e:
        raise MalformedFieldError(f"attribute {index}: {e}") from e

    viewable = _optional_bool(entry, "viewable", index)
    editable = _optional_bool(entry, "editable", index)
    return AttributeSpec(
        name=name,
        display_name=display_name,
        value_type=value_type,
        searchable=_optional_bool(entry, "searchable", index),
        viewable=True if viewable is None else viewable,
        editable=False if editable is None else editable,
    )


def _attributes_from_arrays(message: dict[str, Any]) -> tuple[AttributeSpec, ...]:
    # Parallel-array layout: attr:name[i], attr:public_name[i], attr:type[i], ...
    names = message["attr:name"]
    if not isinstance(names, list):
        raise MalformedFieldError("'attr:name' must be an array")
    entries: list[dict[str, Any]] = []
    for index, name in enumerate(names):
        entry: dict[str, Any] = {"name": name}
        for key, target in (
            ("attr:public_name", "display_name"),
            ("attr:type", "type"),
            ("attr:searchable", "searchable"),
            ("attr:viewable", "viewable"),
            ("attr:editable", "editable"),
        ):
            column = message.get(key)
            if column is None:
                continue
            if not isinstance(column, list) or len(column) != len(names):
                raise MalformedFieldError(f"'{key}' must be an array as long as 'attr:name'")
            entry[target] = column[index]
        entries.append(entry)
    return tuple(_attribute_from_table(entry, i) for i, entry in enumerate(entries))


def _decode_attr_info(value: ResourceValue) -> tuple[AttributeSpec, ...]:
    message = _message(value)
    if "attributes" in message:
        attributes = message["attributes"]
        if not isinstance(attributes, list):
            raise MalformedFieldError("'attributes' must be an array of tables")
        return tuple(_attribute_from_table(entry, i) for i, entry in enumerate(attributes))
    if "attr:name" in message:
        return _attributes_from_arrays(message)
    raise MalformedFieldError("message needs 'attributes' or 'attr:name'")


def _decode_icon(value: ResourceValue) -> bytes:
    if not isinstance(value.data, bytes):
        raise MalformedFieldError("icon must be binary data")
    return value.data


FIELD_SPECS: dict[FieldKind, FieldSpec] = {
    spec.kind: spec
    for spec in (
        FieldSpec(FieldKind.TYPE, STRING_TYPE, "META:TYPE", True, "type", _decode_string),
        FieldSpec(
            FieldKind.SHORT_DESCRIPTION,
            SHORT_DESCRIPTION_TYPE,
            "META:S:DESC",
            True,
            "short description",
            _decode_string,
        ),
        FieldSpec(
            FieldKind.LONG_DESCRIPTION,
            LONG_DESCRIPTION_TYPE,
            "META:L:DESC",
            False,
            "long description",
            _decode_string,
        ),
        FieldSpec(
            FieldKind.PREFERRED_APP,
            SIGNATURE_TYPE,
            "META:PREF_APP",
            False,
            "preferred app",
            _decode_string,
        ),
        FieldSpec(
            FieldKind.SNIFFER_RULE,
            STRING_TYPE,
            "META:SNIFF_RULE",
            False,
            "sniffer rule",
            _decode_string,
        ),
        FieldSpec(
            FieldKind.EXTENSIONS,
            MESSAGE_TYPE,
            "META:EXTENS",
            False,
            "file extensions",
            _decode_extensions,
        ),
        FieldSpec(
            FieldKind.ATTR_INFO,
            MESSAGE_TYPE,
            "META:ATTR_INFO",
            False,
            "attribute info",
            _decode_attr_info,
        ),
        FieldSpec(FieldKind.ICON, VECTOR_ICON_TYPE, "META:ICON", False, "icon", _decode_icon),
    )
}

# Optional fields in the order an import applies them
OPTIONAL_FIELDS: tuple[FieldKind, ...] = (
    FieldKind.LONG_DESCRIPTION,
    FieldKind.PREFERRED_APP,
    FieldKind.SNIFFER_RULE,
    FieldKind.EXTENSIONS,
    FieldKind.ATTR_INFO,
    FieldKind.ICON,
)


def read_field(container: ResourceContainer, kind: FieldKind) -> FieldValue | None:
    """Load and decode one field from a container.

    Returns:
        The decoded value, or None if the resource is absent. An empty icon
        counts as absent.

    Raises:
        MalformedFieldError: If the resource is present but cannot be decoded
    """
    spec = FIELD_SPECS[kind]
    value = container.load(spec.type_tag, spec.resource_name)
    if value is None:
        return None
    if kind is FieldKind.ICON and value.size == 0:
        return None
    return spec.decode(value)
