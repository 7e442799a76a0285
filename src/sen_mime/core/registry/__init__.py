from sen_mime.core.registry.abc import MimeRegistry
from sen_mime.core.registry.fake import FakeMimeRegistry
from sen_mime.core.registry.real import FilesystemMimeRegistry

__all__ = ["FakeMimeRegistry", "FilesystemMimeRegistry", "MimeRegistry"]
