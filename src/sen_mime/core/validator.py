"""Type string validation against the registry."""

from dataclasses import dataclass

from sen_mime.core.mime_types import is_valid_mime_type
from sen_mime.core.registry.abc import MimeRegistry


@dataclass(frozen=True)
class TypeStatus:
    valid: bool
    installed: bool


def validate_type(registry: MimeRegistry, mime_type: str) -> TypeStatus:
    """Report whether a type string is valid and, if so, whether it is installed.

    Invalid strings are never looked up in the registry.
    """
    if not is_valid_mime_type(mime_type):
        return TypeStatus(valid=False, installed=False)
    return TypeStatus(valid=True, installed=registry.is_installed(mime_type))
