"""Bootstrap the applications client with a bus connector."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from voxels import config
from voxels.adapters import dbus_connection
from voxels.service_layer.applications import RemoteApplicationClient

if TYPE_CHECKING:
    from voxels.interfaces.bus import BusConnector


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    applications: RemoteApplicationClient
    bus_kind: str


def build_connector(bus_kind: str) -> BusConnector:
    """Build a connector opening a fresh dbus-fast connection per call."""
    if bus_kind not in config.BUS_KINDS:
        raise ValueError(f"unknown bus kind: {bus_kind!r}")
    return partial(dbus_connection.connect, bus_kind)


def bootstrap(bus_kind: str | None = None) -> AppContainer:
    """Wire the applications client.

    Args:
        bus_kind: ``"system"`` or ``"session"``. When None, read from
            ``voxels.toml`` (falling back to the system bus if there is no
            config file).
    """
    if bus_kind is None:
        try:
            bus_kind = config.get_bus_kind(config.load_config())
        except config.ConfigNotFoundError:
            bus_kind = config.DEFAULT_BUS_KIND

    return AppContainer(
        applications=RemoteApplicationClient(build_connector(bus_kind)),
        bus_kind=bus_kind,
    )
