"""Exceptions raised by the resource, registry and index integrations.

Integrations raise these; the importer and operations modules translate them
into OperationFailure results.
"""


class ContainerUnreadableError(OSError):
    """The resource container path cannot be opened."""


class MalformedContainerError(ValueError):
    """The resource container was opened but could not be parsed."""


class MalformedFieldError(ValueError):
    """A resource is present but its value has the wrong shape for its field."""


class MimeTypeNotInstalledError(LookupError):
    """The MIME type is not present in the registry."""

    def __init__(self, mime_type: str) -> None:
        super().__init__(f"MIME type {mime_type} is not installed")
        self.mime_type = mime_type


class InvalidFieldValueError(ValueError):
    """A field value failed the registry's validation."""


class RegistryError(RuntimeError):
    """The registry refused or failed an operation."""


class IndexAlreadyExistsError(RuntimeError):
    """The volume already has an index with this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"index {name} already exists")
        self.name = name


class IndexNotFoundError(LookupError):
    """The volume has no index with this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"index {name} not found")
        self.name = name
