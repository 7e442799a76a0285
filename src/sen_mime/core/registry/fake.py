"""In-memory fake MIME registry for testing."""

from sen_mime.core.errors import MimeTypeNotInstalledError, RegistryError
from sen_mime.core.fields import FieldKind, FieldValue
from sen_mime.core.mime_types import is_supertype, is_valid_mime_type, supertype_of
from sen_mime.core.registry.abc import MimeRegistry
from sen_mime.core.registry.validation import apply_field, validate_field_value
from sen_mime.core.types import TypeRecord


class FakeMimeRegistry(MimeRegistry):
    """In-memory registry that records every write.

    This class has NO public setup methods. Initial records and injected
    failures are provided via constructor; writes are captured for assertions.
    Field values go through the same validation as the filesystem registry.

    Args:
        records: Pre-installed records
        install_error: Raised by install() instead of installing, if set
        query_error: Raised by installed_types() instead of listing, if set
    """

    def __init__(
        self,
        records: list[TypeRecord] | None = None,
        install_error: Exception | None = None,
        query_error: Exception | None = None,
    ) -> None:
        self._records: dict[str, TypeRecord] = {
            record.mime_type.lower(): record for record in (records or [])
        }
        self._install_error = install_error
        self._query_error = query_error
        self._installed: list[str] = []
        self._set_field_calls: list[tuple[str, FieldKind, FieldValue]] = []
        self._deleted: list[str] = []

    @property
    def installed(self) -> list[str]:
        """Types passed to install() that were newly created."""
        return self._installed

    @property
    def set_field_calls(self) -> list[tuple[str, FieldKind, FieldValue]]:
        """Successful set_field() calls, in order."""
        return self._set_field_calls

    @property
    def deleted(self) -> list[str]:
        return self._deleted

    def is_installed(self, mime_type: str) -> bool:
        return mime_type.lower() in self._records

    def install(self, mime_type: str) -> None:
        if self._install_error is not None:
            raise self._install_error
        if not is_valid_mime_type(mime_type):
            raise RegistryError(f"{mime_type} is not a valid MIME type")
        if self.is_installed(mime_type):
            return
        if not is_supertype(mime_type):
            supertype = supertype_of(mime_type)
            if not self.is_installed(supertype):
                self._records[supertype.lower()] = TypeRecord(mime_type=supertype)
        self._records[mime_type.lower()] = TypeRecord(mime_type=mime_type)
        self._installed.append(mime_type)

    def set_field(self, mime_type: str, field: FieldKind, value: FieldValue) -> None:
        record = self._records.get(mime_type.lower())
        if record is None:
            raise MimeTypeNotInstalledError(mime_type)
        normalized = validate_field_value(field, value)
        self._records[mime_type.lower()] = apply_field(record, field, normalized)
        self._set_field_calls.append((mime_type, field, normalized))

    def delete(self, mime_type: str) -> None:
        if not self.is_installed(mime_type):
            raise MimeTypeNotInstalledError(mime_type)
        prefix = mime_type.lower() + "/"
        if is_supertype(mime_type) and any(key.startswith(prefix) for key in self._records):
            raise RegistryError(f"supertype {mime_type} still has installed subtypes")
        del self._records[mime_type.lower()]
        self._deleted.append(mime_type)

    def get_record(self, mime_type: str) -> TypeRecord | None:
        return self._records.get(mime_type.lower())

    def installed_types(self, supertype: str) -> list[str]:
        if self._query_error is not None:
            raise self._query_error
        prefix = supertype.lower() + "/"
        return sorted(key for key in self._records if key.startswith(prefix))

    def installed_supertypes(self) -> list[str]:
        return sorted(key for key in self._records if is_supertype(key))
