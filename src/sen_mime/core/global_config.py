"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.sen-mime/config.toml,
with environment variable overrides applied at the CLI entry point.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Literal, cast

import tomlkit

OptionalFieldPolicy = Literal["continue", "abort"]
OPTIONAL_FIELD_POLICIES: tuple[OptionalFieldPolicy, ...] = ("continue", "abort")

ENV_MIME_DB = "SEN_MIME_DB"
ENV_INDEX_ROOT = "SEN_MIME_INDEX_ROOT"
ENV_OPTIONAL_FIELDS = "SEN_MIME_OPTIONAL_FIELDS"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in MimeContext.

    Attributes:
        mime_db_root: Directory holding the MIME type registry
        index_root: Volume directory holding the attribute index table
        optional_field_policy: "continue" to keep importing after an optional
            field fails, "abort" to stop at the first failure
    """

    mime_db_root: Path
    index_root: Path
    optional_field_policy: OptionalFieldPolicy

    @staticmethod
    def defaults() -> "GlobalConfig":
        home = Path.home()
        return GlobalConfig(
            mime_db_root=home / "config" / "settings" / "mime_db",
            index_root=home / ".sen-mime" / "index",
            optional_field_policy="continue",
        )


def parse_policy(value: str, source: str) -> OptionalFieldPolicy:
    """Validate an optional field policy value.

    Raises:
        ValueError: If value is not a known policy
    """
    if value not in OPTIONAL_FIELD_POLICIES:
        raise ValueError(
            f"Invalid optional_field_policy {value!r} in {source} "
            f"(expected one of: {', '.join(OPTIONAL_FIELD_POLICIES)})"
        )
    return cast(OptionalFieldPolicy, value)


class GlobalConfigOps(ABC):
    """Abstract interface for global config operations.

    Provides dependency injection for global config access, enabling
    in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if global config exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load global config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Save global config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the global config file (for messages)."""
        ...


class FilesystemGlobalConfigOps(GlobalConfigOps):
    """Production implementation that reads/writes ~/.sen-mime/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GlobalConfig:
        """Load global config, filling unset keys from defaults.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is malformed
        """
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Global config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Malformed config {config_path}: {e}") from e

        defaults = GlobalConfig.defaults()
        policy = data.get("optional_field_policy", defaults.optional_field_policy)
        return GlobalConfig(
            mime_db_root=_path_setting(data, "mime_db_root", defaults.mime_db_root),
            index_root=_path_setting(data, "index_root", defaults.index_root),
            optional_field_policy=parse_policy(str(policy), str(config_path)),
        )

    def save(self, config: GlobalConfig) -> None:
        """Save global config to disk.

        Raises:
            PermissionError: If directory or file cannot be written
        """
        config_path = self.path()
        parent = config_path.parent

        if parent.exists() and not os.access(parent, os.W_OK):
            raise PermissionError(
                f"Cannot write to directory: {parent}\n"
                f"The directory exists but is not writable."
            )
        parent.mkdir(parents=True, exist_ok=True)

        doc = tomlkit.document()
        doc.add(tomlkit.comment("Global sen-mime configuration"))
        doc.add("mime_db_root", str(config.mime_db_root))
        doc.add("index_root", str(config.index_root))
        doc.add("optional_field_policy", config.optional_field_policy)
        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

    def path(self) -> Path:
        if self._config_path is not None:
            return self._config_path
        return Path.home() / ".sen-mime" / "config.toml"


class InMemoryGlobalConfigOps(GlobalConfigOps):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory config ops.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            raise FileNotFoundError(f"Global config not found at {self.path()}")
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/sen-mime/config.toml")


def _path_setting(data: dict[str, object], key: str, default: Path) -> Path:
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' must be a non-empty path string")
    return Path(value).expanduser()


def apply_env_overrides(config: GlobalConfig, environ: Mapping[str, str]) -> GlobalConfig:
    """Apply SEN_MIME_* environment overrides on top of a loaded config."""
    if environ.get(ENV_MIME_DB):
        config = replace(config, mime_db_root=Path(environ[ENV_MIME_DB]).expanduser())
    if environ.get(ENV_INDEX_ROOT):
        config = replace(config, index_root=Path(environ[ENV_INDEX_ROOT]).expanduser())
    if environ.get(ENV_OPTIONAL_FIELDS):
        config = replace(
            config,
            optional_field_policy=parse_policy(environ[ENV_OPTIONAL_FIELDS], ENV_OPTIONAL_FIELDS),
        )
    return config


def load_global_config(ops: GlobalConfigOps, environ: Mapping[str, str]) -> GlobalConfig:
    """Load config from ops (defaults when absent), then apply environment overrides.

    Raises:
        ValueError: If the config file or an override is malformed
    """
    config = ops.load() if ops.exists() else GlobalConfig.defaults()
    return apply_env_overrides(config, environ)
