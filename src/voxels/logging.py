"""Logging helpers used by the Voxels CLI.

Console output goes through Rich on stderr. Alongside it, an in-memory
"flight recorder" keeps recent records at DEBUG granularity and writes them to
a file once something at WARNING or above is logged, so a failed fetch leaves
a full trace behind without cluttering the console.
"""

from __future__ import annotations

import logging
import os
import platform
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "voxels"
FLIGHT_RECORDER_CAPACITY = 2000  # records

CONSOLE_FORMAT = "%(origin)s%(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(taskName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
)

# distributions whose versions matter when reading a bus trace
REPORTED_DISTRIBUTIONS = ("dbus-fast", "pydantic", "click-extra")


def tag_origin(record: logging.LogRecord) -> bool:
    """Set ``record.origin`` to ``"[lib] "`` for records from other libraries.

    Used as a handler filter; never drops a record.
    """
    root = record.name.partition(".")[0]
    record.origin = "" if root == PROJECT_PREFIX else f"[{root}] "
    return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the Rich handler writing to stderr.

    In debug mode everything down to DEBUG is shown, with timestamps, logger
    names and source links.
    """
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(stderr=True, color_system="auto" if color else None),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(tag_origin)
    return handler


def config_flight_recorder(path: Path) -> MemoryHandler:
    """Buffer records in memory and dump them to `path` on the first WARNING."""
    path.parent.mkdir(parents=True, exist_ok=True)
    dump = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    dump.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        FLIGHT_RECORDER_CAPACITY,
        flushLevel=logging.WARNING,
        target=dump,
        flushOnClose=False,
    )


def _dist_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "<not installed>"


def log_startup(
    logger: logging.Logger,
    *,
    app_version: str,
    level: int,
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log the effective setup at INFO and environment diagnostics at DEBUG.

    `log_path` is the flight recorder dump file, or None when it is off.
    """
    logger.info(
        "VOXELS %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        log_path or "OFF",
    )
    logger.debug(
        "Python %s on %s %s",
        platform.python_version(),
        platform.system(),
        platform.release(),
    )
    for name in REPORTED_DISTRIBUTIONS:
        logger.debug("%s: %s", name, _dist_version(name))
    logger.debug(
        "DBUS_SESSION_BUS_ADDRESS=%s", os.getenv("DBUS_SESSION_BUS_ADDRESS", "<unset>")
    )
    if logger_levels:
        logger.debug(
            "Logger levels: %s",
            ", ".join(f"{n}={logging.getLevelName(lvl)}" for n, lvl in logger_levels.items()),
        )
