"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from sen_mime.core.global_config import (
    FilesystemGlobalConfigOps,
    GlobalConfig,
    GlobalConfigOps,
    load_global_config,
)
from sen_mime.core.indices.abc import IndexStore
from sen_mime.core.indices.real import FilesystemIndexStore
from sen_mime.core.registry.abc import MimeRegistry
from sen_mime.core.registry.real import FilesystemMimeRegistry
from sen_mime.core.resources.abc import Resources
from sen_mime.core.resources.real import TomlResources


@dataclass(frozen=True)
class MimeContext:
    """Immutable context holding all dependencies for MIME operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    resources: Resources
    registry: MimeRegistry
    indices: IndexStore
    config_ops: GlobalConfigOps
    global_config: GlobalConfig
    cwd: Path

    @staticmethod
    def for_test(
        resources: Resources | None = None,
        registry: MimeRegistry | None = None,
        indices: IndexStore | None = None,
        config_ops: GlobalConfigOps | None = None,
        global_config: GlobalConfig | None = None,
        cwd: Path | None = None,
    ) -> "MimeContext":
        """Create test context with optional pre-configured integrations.

        Any integration left as None gets an empty fake.

        Example:
            >>> registry = FakeMimeRegistry(records=[TypeRecord("entity/person")])
            >>> ctx = MimeContext.for_test(registry=registry)
        """
        from sen_mime.core.global_config import InMemoryGlobalConfigOps
        from sen_mime.core.indices.fake import FakeIndexStore
        from sen_mime.core.registry.fake import FakeMimeRegistry
        from sen_mime.core.resources.fake import FakeResources

        if resources is None:
            resources = FakeResources()

        if registry is None:
            registry = FakeMimeRegistry()

        if indices is None:
            indices = FakeIndexStore()

        if global_config is None:
            global_config = GlobalConfig(
                mime_db_root=Path("/test/mime_db"),
                index_root=Path("/test/index"),
                optional_field_policy="continue",
            )

        if config_ops is None:
            config_ops = InMemoryGlobalConfigOps(config=global_config)

        if cwd is None:
            cwd = Path("/test/default/cwd")

        return MimeContext(
            resources=resources,
            registry=registry,
            indices=indices,
            config_ops=config_ops,
            global_config=global_config,
            cwd=cwd,
        )


def create_context(config_ops: GlobalConfigOps | None = None) -> MimeContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Raises:
        ValueError: If the config file or an environment override is malformed
    """
    if config_ops is None:
        config_ops = FilesystemGlobalConfigOps()
    global_config = load_global_config(config_ops, os.environ)

    return MimeContext(
        resources=TomlResources(),
        registry=FilesystemMimeRegistry(global_config.mime_db_root),
        indices=FilesystemIndexStore(global_config.index_root),
        config_ops=config_ops,
        global_config=global_config,
        cwd=Path.cwd(),
    )
