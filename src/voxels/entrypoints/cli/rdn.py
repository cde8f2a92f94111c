"""VOXELS RDN CLI: check reverse-domain names.

``voxels rdn check NAME`` applies the naming rules and, on success, prints the
name's path projection to stdout (one directory level per label). On failure
the broken rule is reported on stderr and the command exits with status 1.
"""

from __future__ import annotations

from pathlib import Path

import click
import click_extra as clickx

from voxels.domain.rdn import ApplicationRDN, find_rdn_error

from .helpers import error, success


@click.group(cls=clickx.ExtraGroup)
def rdn() -> None:
    """Reverse-domain name commands."""


@rdn.command()
@click.argument("name")
@click.option(
    "--prefix",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Base directory to join the path projection onto.",
)
def check(name: str, prefix: Path | None) -> None:
    """Validate NAME and print its path projection."""
    if (reason := find_rdn_error(name)) is not None:
        error(f"{name!r} is not a valid application RDN: {reason}")
        raise click.exceptions.Exit(1)

    identity = ApplicationRDN(name)
    path = identity.as_path() if prefix is None else identity.as_path_with_prefix(prefix)
    success(f"{identity} is a valid application RDN")
    click.echo(str(path))
