"""Parsing of ``-L NAME=LEVEL`` logger-level overrides.

Values come either from repeated ``-L`` options or from the
``VOXELS_LOGGER_LEVELS`` environment variable as one comma/space separated
string. Both forms are merged over `DEFAULT_LIB_LEVELS`, later entries
winning.
"""

import logging
import re
from collections.abc import Iterable

import click

DEFAULT_LIB_LEVELS = {"dbus_fast": logging.WARNING, "asyncio": logging.WARNING}

_SPLIT = re.compile(r"[,\s]+")


def _split_items(value: str | Iterable[str]) -> list[str]:
    """Flatten `value` into non-empty ``NAME=LEVEL`` items."""
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SPLIT.split(chunk) if item]


def _parse_item(item: str) -> tuple[str, int]:
    name, sep, level_name = item.partition("=")
    if not sep or not name.strip():
        raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {level_name}")
    return name.strip(), level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str],
) -> dict[str, int]:
    """Click callback turning ``NAME=LEVEL`` items into a name->level mapping.

    Raises:
        click.BadParameter: If an item is not ``NAME=LEVEL`` or LEVEL is not a
            standard logging level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    levels.update(_parse_item(item) for item in _split_items(value))
    return levels
