"""Fixtures for BusConnection contract tests."""

from collections.abc import AsyncIterator
from functools import partial

import pytest
import pytest_asyncio
from dbus_fast import DBusError
from dbus_fast.service import ServiceInterface, method

from tests.fixtures.dbus_daemon import exported
from voxels.adapters import dbus_connection
from voxels.adapters.memory_bus import InMemoryBus
from voxels.interfaces.bus import BusCallError

# pylint: disable=too-few-public-methods

ECHO_SERVICE = ("org.example.Echo", "/echo", "org.example.Echo")
FAILED = "org.example.Error.Failed"


class DaemonBus:
    """Connects to a private dbus-daemon through the dbus-fast adapter."""

    def __init__(self, address: str) -> None:
        self.connect = partial(dbus_connection.connect, address=address)


class EchoInterface(ServiceInterface):
    """``org.example.Echo`` served on a real bus."""

    def __init__(self) -> None:
        super().__init__(ECHO_SERVICE[2])

    @method()
    def echo(self, text: "s") -> "s":
        return text

    @method()
    def fail(self, text: "s") -> "s":
        raise DBusError(FAILED, text)


@pytest_asyncio.fixture(params=["memory", "dbus"])
async def echo_bus(request: pytest.FixtureRequest) -> AsyncIterator[object]:
    """Return a bus serving ``org.example.Echo`` for the requested backend.

    Supported params:
      - `"memory"` → InMemoryBus
      - `"dbus"` → DBusFastConnection against a private ``dbus-daemon``

    The service exposes ``echo(s) -> s`` and ``fail(s)``, which always answers
    with an ``org.example.Error.Failed`` error reply.
    """

    match request.param:
        case "memory":
            bus = InMemoryBus()
            bus.register(*ECHO_SERVICE, "echo", lambda text: text)
            bus.register(*ECHO_SERVICE, "fail", _fail)
            yield bus
        case "dbus":
            daemon = request.getfixturevalue("dbus_daemon")
            name, path, _ = ECHO_SERVICE
            async with exported(daemon.address, name, path, EchoInterface()):
                yield DaemonBus(daemon.address)
        case _:
            raise ValueError(f"unknown bus type: {request.param}")


def _fail(text: str) -> str:
    raise BusCallError(FAILED, text)
