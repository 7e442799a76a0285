from sen_mime.core.indices.abc import IndexStore, SearchIndex
from sen_mime.core.indices.fake import FakeIndexStore
from sen_mime.core.indices.real import FilesystemIndexStore

__all__ = ["FakeIndexStore", "FilesystemIndexStore", "IndexStore", "SearchIndex"]
