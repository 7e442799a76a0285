"""Type definitions for MIME registry records."""

from dataclasses import dataclass, field
from enum import Enum


class AttributeValueType(Enum):
    """Value types an attribute may declare, with their four-char type codes."""

    STRING = ("string", "CSTR")
    INT32 = ("int32", "LONG")
    INT64 = ("int64", "LLNG")
    UINT32 = ("uint32", "ULNG")
    UINT64 = ("uint64", "ULLG")
    FLOAT = ("float", "FLOT")
    DOUBLE = ("double", "DBLE")
    BOOL = ("bool", "BOOL")
    TIME = ("time", "TIME")
    MIME = ("mime", "MIMS")

    def __init__(self, type_name: str, type_code: str) -> None:
        self.type_name = type_name
        self.type_code = type_code

    @property
    def indexable(self) -> bool:
        """Whether a volume search index can be built over this type."""
        return self not in (AttributeValueType.BOOL, AttributeValueType.MIME)

    @staticmethod
    def parse(value: str) -> "AttributeValueType":
        """Look up a value type by name ("string") or type code ("CSTR").

        Raises:
            ValueError: If the value names no known type
        """
        for member in AttributeValueType:
            if value.lower() == member.type_name or value == member.type_code:
                return member
        raise ValueError(f"unknown attribute type: {value!r}")


@dataclass(frozen=True)
class AttributeSpec:
    """One named, typed attribute in a MIME type's attribute schema.

    `searchable` is None when the schema does not declare it; only declared
    flags drive index maintenance.
    """

    name: str
    display_name: str
    value_type: AttributeValueType
    searchable: bool | None = None
    viewable: bool = True
    editable: bool = False


@dataclass(frozen=True)
class TypeRecord:
    """A MIME type's registry entry. The mime_type key never changes."""

    mime_type: str
    short_description: str | None = None
    long_description: str | None = None
    preferred_app: str | None = None
    sniffer_rule: str | None = None
    extensions: tuple[str, ...] = ()
    attributes: tuple[AttributeSpec, ...] = field(default_factory=tuple)
    icon: bytes | None = None

    @property
    def supertype(self) -> str:
        return self.mime_type.split("/", 1)[0]
