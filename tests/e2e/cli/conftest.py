"""Fixtures for end-to-end CLI tests.

The `app fetch` command is pointed at an in-memory registry instead of the
real system bus by replacing the bootstrap it uses.
"""

import pytest
from click.testing import CliRunner

from voxels.bootstrap import AppContainer
from voxels.entrypoints.cli import app as app_cli
from voxels.service_layer.applications import RemoteApplicationClient

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def wired_registry(registry, monkeypatch: pytest.MonkeyPatch):
    """Make `voxels app fetch` talk to the in-memory `registry`."""
    requested: list[str | None] = []

    def fake_bootstrap(bus_kind=None):
        requested.append(bus_kind)
        return AppContainer(
            applications=RemoteApplicationClient(registry.connect),
            bus_kind=bus_kind or "system",
        )

    monkeypatch.setattr(app_cli, "bootstrap", fake_bootstrap)
    registry.requested_bus_kinds = requested
    return registry
