"""In-memory message bus adapter.

Serves method calls from handlers registered in the same process, so the
service layer can be exercised without a running D-Bus daemon. Handlers are
plain or async callables taking the call arguments and returning a single
reply value; raising `BusCallError` from a handler produces an error reply.

Connections can be severed with `InMemoryBus.sever` to simulate the I/O loop
terminating abnormally.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Sequence
from typing import Any

from voxels.interfaces.bus import (
    BusCallError,
    BusConnection,
    BusDisconnectedError,
)

UNKNOWN_METHOD = "org.freedesktop.DBus.Error.UnknownMethod"
SERVICE_UNKNOWN = "org.freedesktop.DBus.Error.ServiceUnknown"

Handler = Callable[..., Any]
MethodKey = tuple[str, str, str, str]  # (destination, path, interface, member)


class InMemoryBus:
    """A process-local bus that routes calls to registered handlers."""

    def __init__(self) -> None:
        self._handlers: dict[MethodKey, Handler] = {}
        self.connections: list[InMemoryBusConnection] = []
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def register(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        destination: str,
        path: str,
        interface: str,
        member: str,
        handler: Handler,
    ) -> None:
        """Serve `member` on `destination` at `path` with `handler`."""
        self._handlers[(destination, path, interface, member)] = handler

    def lookup(self, key: MethodKey) -> Handler:
        if (handler := self._handlers.get(key)) is not None:
            return handler
        destination, path, interface, member = key
        if not any(k[0] == destination for k in self._handlers):
            raise BusCallError(
                SERVICE_UNKNOWN, f"The name {destination} was not provided"
            )
        raise BusCallError(
            UNKNOWN_METHOD, f"No method {interface}.{member} at {path}"
        )

    async def connect(self) -> InMemoryBusConnection:
        """Open a new connection; usable as a `BusConnector`."""
        connection = InMemoryBusConnection(self)
        self.connections.append(connection)
        return connection

    def sever(self, error: BaseException) -> None:
        """Terminate every open connection abnormally with `error`."""
        for connection in self.connections:
            connection.sever(error)


class InMemoryBusConnection(BusConnection):
    """A connection to an `InMemoryBus`."""

    def __init__(self, bus: InMemoryBus) -> None:
        self._bus = bus
        self._closed: asyncio.Future[None] = asyncio.get_running_loop().create_future()

    @property
    def closed(self) -> bool:
        return self._closed.done()

    async def call(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        destination: str,
        path: str,
        interface: str,
        member: str,
        signature: str,
        body: Sequence[Any],
    ) -> list[Any]:
        if self._closed.done():
            raise BusDisconnectedError(f"{member} called on a closed connection")
        self._bus.calls.append((member, tuple(body)))
        handler = self._bus.lookup((destination, path, interface, member))
        result = handler(*body)
        if inspect.isawaitable(result):
            result = await self._race(member, result)
        return [result]

    async def _race(self, member: str, awaitable: Any) -> Any:
        """Await `awaitable` unless the connection terminates first."""
        reply = asyncio.ensure_future(awaitable)
        closed = asyncio.ensure_future(asyncio.shield(self._closed))
        try:
            done, _ = await asyncio.wait(
                {reply, closed}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            closed.cancel()
            if not reply.done():
                reply.cancel()
        if reply in done:
            return reply.result()
        raise BusDisconnectedError(
            f"connection lost during {member}"
        ) from closed.exception()

    async def wait_closed(self) -> None:
        await asyncio.shield(self._closed)

    def close(self) -> None:
        if not self._closed.done():
            self._closed.set_result(None)

    def sever(self, error: BaseException) -> None:
        """Terminate this connection abnormally with `error`."""
        if not self._closed.done():
            self._closed.set_exception(error)
