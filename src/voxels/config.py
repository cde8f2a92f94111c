"""Configuration utilities for VOXELS.

Voxels projects keep a ``voxels.toml`` at their root. Its contents are mostly
opaque to this package; only the ``[bus]`` table is read here:

```toml
[bus]
kind = "system"   # or "session"
```
"""

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "voxels.toml"
CONFIG_ENV_VAR = "VOXELS_CONFIG"  # pragma: no mutate
ROOT_MARKER = "pyproject.toml"  # pragma: no mutate

DEFAULT_BUS_KIND = "system"
BUS_KINDS = ("system", "session")


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when no ``voxels.toml`` can be located."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"{CONFIG_FILENAME} not found: {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when ``voxels.toml`` cannot be parsed or holds invalid values."""

    def __init__(self, path: Path | None, reason: str) -> None:
        where = str(path) if path is not None else CONFIG_FILENAME
        super().__init__(f"Invalid configuration in {where}: {reason}")
        self.path = path
        self.reason = reason


def find_project_root(start: Path | None = None) -> Path:
    """Find the nearest directory at or above `start` holding ``pyproject.toml``.

    Args:
        start: Directory to start from; defaults to the current directory.

    Returns:
        The project root, or `start` itself when no marker is found.
    """
    start = (start or Path.cwd()).resolve()
    for directory in (start, *start.parents):
        if (directory / ROOT_MARKER).exists():
            return directory
    return start


def get_config_path(start: Path | None = None) -> Path:
    """Locate ``voxels.toml``.

    Returns:
        The path named by `VOXELS_CONFIG` if set, otherwise
        ``<project root>/voxels.toml``. The file may not exist.
    """
    if override := os.environ.get(CONFIG_ENV_VAR):
        return Path(override)
    return find_project_root(start) / CONFIG_FILENAME


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Read and parse ``voxels.toml``.

    Args:
        path: Explicit file to load; defaults to `get_config_path()`.

    Returns:
        The parsed TOML document.

    Raises:
        ConfigNotFoundError: If the file does not exist.
        InvalidConfigError: If the file is not valid TOML.
    """
    path = path or get_config_path()
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(path) from e
    except tomllib.TOMLDecodeError as e:
        raise InvalidConfigError(path, str(e)) from e


def get_bus_kind(config: dict[str, Any]) -> str:
    """Return which bus to talk to, from the ``[bus] kind`` key.

    Raises:
        InvalidConfigError: If the value is not one of `BUS_KINDS`.
    """
    if not isinstance(bus := config.get("bus", {}), dict):
        raise InvalidConfigError(None, f"[bus] must be a table, got {bus!r}")
    if (kind := bus.get("kind", DEFAULT_BUS_KIND)) not in BUS_KINDS:
        raise InvalidConfigError(
            None, f"bus.kind must be one of {', '.join(BUS_KINDS)}, got {kind!r}"
        )
    return kind
