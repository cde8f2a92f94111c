"""Interface for message bus connections."""

import abc
from collections.abc import Awaitable, Callable, Sequence
from typing import Any


class BusConnection(abc.ABC):
    """Contract for one open connection to a message bus.

    A connection is owned by whoever opened it and must be closed by them.
    """

    @abc.abstractmethod
    async def call(  # pylint: disable=too-many-arguments, too-many-positional-arguments
        self,
        destination: str,
        path: str,
        interface: str,
        member: str,
        signature: str,
        body: Sequence[Any],
    ) -> list[Any]:
        """Invoke a remote method and return the reply body.

        Args:
            destination: Well-known name of the remote service.
            path: Object path the method is mounted on.
            interface: Interface the method belongs to.
            member: Method name.
            signature: Type signature of `body`.
            body: Call arguments.

        Returns:
            The reply's arguments, in order.

        Raises:
            BusCallError: If the remote side replied with an error.
            BusDisconnectedError: If the connection dropped during the call.
        """

    @abc.abstractmethod
    async def wait_closed(self) -> None:
        """Wait until the connection's I/O loop terminates.

        Returns normally if the connection was closed cleanly and raises the
        underlying failure if it terminated abnormally. Cancelling the waiter
        does not affect the connection.
        """

    @abc.abstractmethod
    def close(self) -> None:
        """Close the connection. Closing twice is a no-op."""


BusConnector = Callable[[], Awaitable[BusConnection]]
"""Opens a new `BusConnection`; raises `BusConnectError` on failure."""
