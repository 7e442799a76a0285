"""Field validation shared by every registry implementation.

The fake and filesystem registries both run values through here, so tests
against the fake see the same InvalidFieldValueError the real registry raises.
"""

import dataclasses

from sen_mime.core.errors import InvalidFieldValueError
from sen_mime.core.fields import FieldKind, FieldValue
from sen_mime.core.mime_types import MIME_TYPE_LENGTH, check_sniffer_rule, is_valid_mime_type
from sen_mime.core.types import AttributeSpec, TypeRecord

_RECORD_ATTRIBUTES: dict[FieldKind, str] = {
    FieldKind.SHORT_DESCRIPTION: "short_description",
    FieldKind.LONG_DESCRIPTION: "long_description",
    FieldKind.PREFERRED_APP: "preferred_app",
    FieldKind.SNIFFER_RULE: "sniffer_rule",
    FieldKind.EXTENSIONS: "extensions",
    FieldKind.ATTR_INFO: "attributes",
    FieldKind.ICON: "icon",
}


def _validate_description(value: FieldValue) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidFieldValueError("description must be a non-empty string")
    if len(value.encode("utf-8")) >= MIME_TYPE_LENGTH:
        raise InvalidFieldValueError(
            f"description is longer than {MIME_TYPE_LENGTH - 1} bytes"
        )
    return value


def _validate_extensions(value: FieldValue) -> tuple[str, ...]:
    if not isinstance(value, tuple) or not all(isinstance(e, str) for e in value):
        raise InvalidFieldValueError("extensions must be a list of strings")
    normalized: list[str] = []
    for raw in value:
        extension = raw.removeprefix(".")
        if not extension:
            raise InvalidFieldValueError(f"empty file extension {raw!r}")
        if "/" in extension or any(char.isspace() for char in extension):
            raise InvalidFieldValueError(f"malformed file extension {raw!r}")
        if extension not in normalized:
            normalized.append(extension)
    return tuple(normalized)


def _validate_attributes(value: FieldValue) -> tuple[AttributeSpec, ...]:
    if not isinstance(value, tuple) or not all(isinstance(a, AttributeSpec) for a in value):
        raise InvalidFieldValueError("attribute info must be a list of attribute specs")
    seen: set[str] = set()
    for spec in value:
        if not spec.name:
            raise InvalidFieldValueError("attribute name cannot be empty")
        if spec.name in seen:
            raise InvalidFieldValueError(f"duplicate attribute {spec.name!r}")
        seen.add(spec.name)
    return value


def validate_field_value(field: FieldKind, value: FieldValue) -> FieldValue:
    """Validate a value for a field, returning the form the registry stores.

    Raises:
        InvalidFieldValueError: If the value is not acceptable for the field
    """
    if field is FieldKind.TYPE:
        raise InvalidFieldValueError("the type of an installed record cannot be changed")

    if field in (FieldKind.SHORT_DESCRIPTION, FieldKind.LONG_DESCRIPTION):
        return _validate_description(value)

    if field is FieldKind.PREFERRED_APP:
        if not isinstance(value, str) or not is_valid_mime_type(value):
            raise InvalidFieldValueError(f"preferred app {value!r} is not a valid signature")
        return value

    if field is FieldKind.SNIFFER_RULE:
        if not isinstance(value, str):
            raise InvalidFieldValueError("sniffer rule must be a string")
        problem = check_sniffer_rule(value)
        if problem is not None:
            raise InvalidFieldValueError(f"bad sniffer rule: {problem}")
        return value

    if field is FieldKind.EXTENSIONS:
        return _validate_extensions(value)

    if field is FieldKind.ATTR_INFO:
        return _validate_attributes(value)

    if not isinstance(value, bytes) or not value:
        raise InvalidFieldValueError("icon data cannot be empty")
    return value


def apply_field(record: TypeRecord, field: FieldKind, value: FieldValue) -> TypeRecord:
    """Return a copy of record with one validated field replaced."""
    return dataclasses.replace(record, **{_RECORD_ATTRIBUTES[field]: value})
