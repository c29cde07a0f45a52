"""Global configuration data structures and loading.

Provides immutable config data loaded from ~/.gitwrap/config.toml. The file is
optional; every key has a default.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import tomlkit

from gitwrap.client import DEFAULT_GIT_EXECUTABLE

# Environment variable that forces debug logging regardless of config.
DEBUG_ENV_VAR = "GITWRAP_DEBUG"

CONFIG_KEYS = ("git_executable", "remote", "debug")


@dataclass(frozen=True)
class GitwrapConfig:
    """Immutable configuration data.

    Loaded once at CLI entry point and stored in GitwrapContext.
    """

    git_executable: str = DEFAULT_GIT_EXECUTABLE
    remote: str | None = None
    debug: bool = False


def _require_bool(data: dict[str, Any], key: str, default: bool, config_path: Path) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be true or false in {config_path}")
    return value


def _optional_str(data: dict[str, Any], key: str, config_path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string in {config_path}")
    return value or None


def parse_config(data: dict[str, Any], config_path: Path) -> GitwrapConfig:
    """Build a GitwrapConfig from parsed TOML data.

    Args:
        data: Parsed TOML document
        config_path: Source path, used in error messages

    Raises:
        ValueError: If a key has the wrong type
    """
    git_executable = _optional_str(data, "git_executable", config_path)
    return GitwrapConfig(
        git_executable=git_executable or DEFAULT_GIT_EXECUTABLE,
        remote=_optional_str(data, "remote", config_path),
        debug=_require_bool(data, "debug", False, config_path),
    )


def apply_config_value(config: GitwrapConfig, key: str, raw: str) -> GitwrapConfig | None:
    """Return a copy of config with a single string-valued setting applied.

    Used by `gitwrap config set`, where values arrive as strings.

    Returns:
        None if the key is unknown

    Raises:
        ValueError: If a boolean key gets something other than true/false
    """
    if key not in CONFIG_KEYS:
        return None
    if key == "debug":
        lowered = raw.strip().lower()
        if lowered not in ("true", "false"):
            raise ValueError(f"'{key}' must be true or false, got {raw!r}")
        return replace(config, debug=lowered == "true")
    if key == "git_executable":
        return replace(config, git_executable=raw or DEFAULT_GIT_EXECUTABLE)
    return replace(config, remote=raw or None)


def debug_enabled(config: GitwrapConfig) -> bool:
    """Check whether debug logging is on via config or environment."""
    return config.debug or bool(os.getenv(DEBUG_ENV_VAR))


class ConfigStore(ABC):
    """Abstract interface for config operations.

    Enables in-memory implementations for tests without touching filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if config exists."""
        ...

    @abstractmethod
    def load(self) -> GitwrapConfig:
        """Load config.

        Raises:
            FileNotFoundError: If config doesn't exist
            ValueError: If config is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GitwrapConfig) -> None:
        """Save config."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the config file (for error messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes ~/.gitwrap/config.toml."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._path = config_path

    def exists(self) -> bool:
        return self.path().exists()

    def load(self) -> GitwrapConfig:
        """Load config from disk.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If the file is not valid TOML or a key has the wrong type
        """
        config_path = self.path()

        if not config_path.exists():
            raise FileNotFoundError(f"Config not found at {config_path}")

        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

        return parse_config(data, config_path)

    def save(self, config: GitwrapConfig) -> None:
        """Save config, preserving existing formatting and comments using tomlkit."""
        config_path = self.path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        if config_path.exists():
            with config_path.open("r", encoding="utf-8") as f:
                doc = tomlkit.load(f)
        else:
            doc = tomlkit.document()
            doc.add(tomlkit.comment("Global gitwrap configuration"))

        doc["git_executable"] = config.git_executable
        if config.remote is not None:
            doc["remote"] = config.remote
        elif "remote" in doc:
            del doc["remote"]
        doc["debug"] = config.debug

        with config_path.open("w", encoding="utf-8") as f:
            tomlkit.dump(doc, f)

    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return Path.home() / ".gitwrap" / "config.toml"


class FakeConfigStore(ConfigStore):
    """Test implementation that stores config in memory without touching filesystem."""

    def __init__(self, config: GitwrapConfig | None = None) -> None:
        """Initialize in-memory config store.

        Args:
            config: Initial config state (None = config doesn't exist)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GitwrapConfig:
        if self._config is None:
            raise FileNotFoundError(f"Config not found at {self.path()}")
        return self._config

    def save(self, config: GitwrapConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/gitwrap/config.toml")
