"""MIME type registry interface."""

from abc import ABC, abstractmethod

from sen_mime.core.fields import FieldKind, FieldValue
from sen_mime.core.types import TypeRecord


class MimeRegistry(ABC):
    """Abstract interface for the MIME type registry.

    The registry is the single source of truth for installed types. Every
    write is visible immediately; there is no buffering or transaction.

    Implementations:
    - FilesystemMimeRegistry: one TOML record per type under a root directory
    - FakeMimeRegistry: in-memory for tests
    """

    @abstractmethod
    def is_installed(self, mime_type: str) -> bool:
        """Check whether a type is installed. Lookup is case-insensitive."""
        ...

    @abstractmethod
    def install(self, mime_type: str) -> None:
        """Install a type with no metadata set.

        Installing an already-installed type is a no-op. Installing
        "super/sub" installs "super" first if it is missing.

        Raises:
            RegistryError: If the type string is invalid or the record cannot be written
        """
        ...

    @abstractmethod
    def set_field(self, mime_type: str, field: FieldKind, value: FieldValue) -> None:
        """Write one metadata field of an installed type.

        Raises:
            MimeTypeNotInstalledError: If the type is not installed
            InvalidFieldValueError: If the value fails validation for the field
            RegistryError: If the record cannot be written
        """
        ...

    @abstractmethod
    def delete(self, mime_type: str) -> None:
        """Remove a type and all of its metadata.

        Raises:
            MimeTypeNotInstalledError: If the type is not installed
            RegistryError: If the type is a supertype that still has subtypes
        """
        ...

    @abstractmethod
    def get_record(self, mime_type: str) -> TypeRecord | None:
        """Get a type's record, or None if it is not installed."""
        ...

    @abstractmethod
    def installed_types(self, supertype: str) -> list[str]:
        """List installed subtypes of a supertype, sorted.

        Returns an empty list if the supertype is not installed.
        """
        ...

    @abstractmethod
    def installed_supertypes(self) -> list[str]:
        """List installed supertypes, sorted."""
        ...
