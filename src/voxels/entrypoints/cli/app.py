"""VOXELS app CLI: query the applications registry.

``voxels app fetch INSTANCE_ID`` retrieves the record of one registered
application instance from the ``voxels.applications`` service and prints it.

Failure modes
- Unparseable INSTANCE_ID → usage error.
- Bus unreachable, a call failing or timing out, or invalid data from the
  registry → ``ClickException`` (exit status 1).
- Connection lost mid-fetch → an additional warning line on stderr.
"""

from __future__ import annotations

import asyncio
import uuid
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from voxels import config
from voxels.bootstrap import bootstrap
from voxels.service_layer.errors import ApplicationRetrievalError

from .helpers import hyperlink, warn

if TYPE_CHECKING:
    from voxels.domain.application import Application


def _not_declared() -> str:
    return click.style("<not declared>", dim=True)


def format_application(application: Application) -> str:
    """Render an application record as aligned ``key: value`` lines."""
    homepage = (
        hyperlink(str(application.homepage))
        if application.homepage is not None
        else _not_declared()
    )
    rows = [
        ("rdn", str(application.identity)),
        ("instance", str(application.instance_id)),
        ("homepage", homepage),
        ("description", application.description or _not_declared()),
        ("role", str(application.role) if application.role else _not_declared()),
    ]
    width = max(len(key) for key, _ in rows)
    return "\n".join(f"{key:<{width}} : {value}" for key, value in rows)


@click.group(cls=clickx.ExtraGroup)
def app() -> None:
    """Applications registry commands."""


@app.command()
@click.argument("instance_id", type=click.UUID)
@click.option(
    "--bus",
    "bus_kind",
    type=click.Choice(config.BUS_KINDS, case_sensitive=False),
    default=None,
    help="Bus to query. Defaults to [bus] kind in voxels.toml, else 'system'.",
)
def fetch(instance_id: uuid.UUID, bus_kind: str | None) -> None:
    """Fetch and print the record of application INSTANCE_ID."""
    try:
        container = bootstrap(bus_kind.lower() if bus_kind else None)
    except config.ConfigError as e:
        raise click.ClickException(str(e)) from e

    def on_connection_loss(exc: BaseException) -> None:
        warn(f"Lost connection to the {container.bus_kind} bus: {exc!r}")

    try:
        application = asyncio.run(
            container.applications.fetch(instance_id, on_connection_loss)
        )
    except ApplicationRetrievalError as e:
        cause = f" ({e.__cause__})" if e.__cause__ is not None else ""
        raise click.ClickException(f"{e}{cause}") from e

    click.echo(format_application(application))
