"""D-Bus connection adapter backed by dbus-fast."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from dbus_fast import BusType, Message, MessageType
from dbus_fast.aio import MessageBus
from dbus_fast.errors import DBusFastError

from voxels.interfaces.bus import (
    BusCallError,
    BusConnectError,
    BusConnection,
    BusDisconnectedError,
    BusMessageError,
)

logger = logging.getLogger(__name__)

BUS_TYPES = {"system": BusType.SYSTEM, "session": BusType.SESSION}


class DBusFastConnection(BusConnection):
    """`BusConnection` over an asyncio dbus-fast `MessageBus`."""

    def __init__(self, bus: MessageBus) -> None:
        self._bus = bus

    async def call(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        destination: str,
        path: str,
        interface: str,
        member: str,
        signature: str,
        body: Sequence[Any],
    ) -> list[Any]:
        if not self._bus.connected:
            raise BusDisconnectedError(f"{member} called on a closed connection")
        try:
            message = Message(
                destination=destination,
                path=path,
                interface=interface,
                member=member,
                signature=signature,
                body=list(body),
            )
            reply = await self._bus.call(message)
        except DBusFastError as e:  # invalid names, signature or body
            raise BusMessageError(member, str(e)) from e
        except (EOFError, OSError) as e:  # dbus-fast fails pending calls with the I/O error
            raise BusDisconnectedError(f"{member} failed: {e!r}") from e

        if reply is None:
            raise BusDisconnectedError(f"{member} got no reply")
        if reply.message_type == MessageType.ERROR:
            text = reply.body[0] if reply.body and isinstance(reply.body[0], str) else ""
            raise BusCallError(reply.error_name or "<unnamed error>", text)
        return list(reply.body)

    async def wait_closed(self) -> None:
        # shield: cancelling the waiter must not cancel the bus' own future
        await asyncio.shield(self._bus.wait_for_disconnect())

    def close(self) -> None:
        if self._bus.connected:
            self._bus.disconnect()


async def connect(kind: str = "system", address: str | None = None) -> BusConnection:
    """Open a connection to the system or session bus, or to `address`.

    Args:
        kind: ``"system"`` or ``"session"``. Ignored when `address` is given.
        address: A D-Bus address such as ``unix:path=/run/voxels/bus``.

    Raises:
        ValueError: If `kind` is not a known bus.
        BusConnectError: If the bus cannot be reached or authentication fails.
    """
    if kind not in BUS_TYPES:
        raise ValueError(f"unknown bus kind: {kind!r}")
    target = address or kind
    logger.debug("Connecting to the %s bus", target)
    try:
        if address is not None:
            bus = await MessageBus(bus_address=address).connect()
        else:
            bus = await MessageBus(bus_type=BUS_TYPES[kind]).connect()
    except Exception as e:  # socket, auth and address errors alike
        raise BusConnectError(target, repr(e)) from e
    return DBusFastConnection(bus)


async def connect_system_bus() -> BusConnection:
    """Open a connection to the system bus."""
    return await connect("system")


async def connect_session_bus() -> BusConnection:
    """Open a connection to the session bus."""
    return await connect("session")
