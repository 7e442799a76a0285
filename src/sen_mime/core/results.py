"""Result types for MIME operations.

Every operation returns either a success dataclass or an OperationFailure.
Callers distinguish them with isinstance(); failures carry an error_type
tag and a human-readable message.
"""

from dataclasses import dataclass, field
from typing import Literal

from sen_mime.core.fields import FieldKind
from sen_mime.core.types import AttributeValueType, TypeRecord

ErrorType = Literal[
    "container_unreadable",
    "malformed_container",
    "invalid_type",
    "missing_required_field",
    "install_error",
    "not_installed",
    "invalid_value",
    "index_already_exists",
    "index_not_found",
    "registry_error",
]

FieldStatus = Literal["set", "absent", "failed"]

IndexStatus = Literal["created", "removed", "skipped_exists", "skipped_missing", "failed"]


@dataclass(frozen=True)
class FieldOutcome:
    """What happened to one optional field during an import."""

    field: FieldKind
    status: FieldStatus
    error_type: ErrorType | None = None
    message: str | None = None


@dataclass(frozen=True)
class IndexOutcome:
    """What happened to one attribute's search index during an import."""

    attribute: str
    value_type: AttributeValueType
    want_present: bool
    status: IndexStatus
    message: str | None = None


@dataclass(frozen=True)
class InstallSuccess:
    """Success result from installing a MIME type."""

    success: bool
    mime_type: str
    updated: bool
    fields: list[FieldOutcome] = field(default_factory=list)
    indices: list[IndexOutcome] = field(default_factory=list)

    @property
    def failed_fields(self) -> list[FieldOutcome]:
        return [outcome for outcome in self.fields if outcome.status == "failed"]


@dataclass(frozen=True)
class DeleteSuccess:
    """Success result from deleting a MIME type.

    was_installed is False when the type was absent and nothing was removed.
    """

    success: bool
    mime_type: str
    was_installed: bool


@dataclass(frozen=True)
class TypeListing:
    """Installed subtypes of one supertype."""

    success: bool
    supertype: str
    types: list[str]


@dataclass(frozen=True)
class RecordLookup:
    success: bool
    record: TypeRecord


@dataclass(frozen=True)
class OperationFailure:
    """Error result from any MIME operation."""

    success: bool
    error_type: ErrorType
    message: str
    target: str | None = None
