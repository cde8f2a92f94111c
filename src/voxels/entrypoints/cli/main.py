"""Voxels CLI entry point.

Defines the top-level ``voxels`` command (via Click-Extra), configures
logging, and registers the subcommand groups:

- ``voxels rdn``: validate reverse-domain names and show their path projection.
- ``voxels app``: query the ``voxels.applications`` registry over D-Bus.

Examples
    $ voxels rdn check com.example.app --prefix /var/lib/voxels
    $ voxels -v app fetch 6f1c2d0e-8a5b-4c8e-9a43-0d2f5b7e1c11
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from platformdirs import user_log_dir

from voxels import __version__
from voxels.logging import config_console_handler, config_flight_recorder, log_startup

from .app import app as app_group
from .helpers import hyperlink
from .helpers.log_level_parser import parse_log_level
from .rdn import rdn as rdn_group

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """VOXELS command-line interface.

    Inspect Voxels application identities: check reverse-domain names against
    the naming rules and fetch application records from the system registry.
    """


EPILOG = "\b\n" + "\n".join(
    [
        f"{click.style('See Also:', fg='blue', bold=True, underline=True)}",
        "  D-Bus : " + hyperlink("https://www.freedesktop.org/wiki/Software/dbus/"),
    ]
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help="Increase the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help="Decrease the default WARNING verbosity by one level per repetition.",
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (timestamps, logger names and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="File the flight recorder is dumped to.",
    default=Path(user_log_dir("voxels", appauthor=False)) / "latest.log",
    envvar="VOXELS_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Keep recent log records at DEBUG granularity in memory and write them "
        "to --log-path when a WARNING or ERROR occurs."
    ),
    default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum level of specific loggers (NAME=LEVEL). Repeatable, "
        "e.g. -L dbus_fast=DEBUG, or via VOXELS_LOGGER_LEVELS."
    ),
    envvar="VOXELS_LOGGER_LEVELS",
    default=("dbus_fast=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def voxels(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """VOXELS command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    handlers: list[Handler] = [
        config_console_handler(
            level=level, debug_mode=debug, color=ctx.color is not False
        )
    ]
    if flight_recorder:
        handlers.append(config_flight_recorder(path=log_path))

    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )
    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        log_path=log_path if flight_recorder else None,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


voxels.add_command(rdn_group)
voxels.add_command(app_group)
