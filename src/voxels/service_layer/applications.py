"""Retrieval of application records from the ``voxels.applications`` service.

A fetch opens its own bus connection and issues four method calls on the
``/get`` object, strictly one after the other:

    rdn -> description -> homepage -> type

Each call passes the instance id as its only argument, returns one string and
is bounded by `CALL_TIMEOUT` seconds. While the calls run, a watcher task
monitors the connection; if it dies, the caller's ``on_connection_loss``
callback is invoked exactly once; an exception it raises is logged and does
not change the outcome of the fetch. The watcher is stopped and the connection
closed when the fetch ends, whatever the outcome.

There are no retries: the first failure aborts the fetch with an
`ApplicationRetrievalError` and no partial record is returned.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from voxels.domain.application import Application
from voxels.domain.errors import InvalidURLError, RDNError
from voxels.domain.rdn import ApplicationRDN
from voxels.domain.value_objects import parse_url
from voxels.interfaces.bus import BusDisconnectedError, BusError

from .errors import ApplicationRetrievalError

if TYPE_CHECKING:
    from uuid import UUID

    from voxels.interfaces.bus import BusConnection, BusConnector

logger = logging.getLogger(__name__)

SERVICE_NAME = "voxels.applications"
INTERFACE_NAME = "voxels.applications"
GET_PATH = "/get"

RDN_METHOD = "rdn"
DESCRIPTION_METHOD = "description"
HOMEPAGE_METHOD = "homepage"
TYPE_METHOD = "type"

FETCH_ORDER = (RDN_METHOD, DESCRIPTION_METHOD, HOMEPAGE_METHOD, TYPE_METHOD)

CALL_TIMEOUT = 2.0  # seconds, per call

ConnectionLossCallback = Callable[[BaseException], None]


async def watch_connection(
    connection: BusConnection,
    cancelled: asyncio.Event,
    on_connection_loss: ConnectionLossCallback,
) -> None:
    """Report the loss of `connection` unless `cancelled` is set first.

    Args:
        connection: The connection to monitor.
        cancelled: Set by the owner once it is done with the connection.
        on_connection_loss: Called once with the failure if the connection
            terminates while it is still in use.
    """
    closed = asyncio.create_task(connection.wait_closed())
    stop = asyncio.create_task(cancelled.wait())
    try:
        await asyncio.wait({closed, stop}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        for task in (closed, stop):
            task.cancel()

    # a loss that raced the cancellation is still reported
    if not closed.done() or closed.cancelled():
        return
    error = closed.exception() or BusDisconnectedError("bus connection closed")
    logger.warning("Lost connection to the bus: %r", error)
    try:
        on_connection_loss(error)
    except Exception:  # pylint: disable=broad-exception-caught
        # the fetch outcome is decided by the calls, not by the callback
        logger.exception("on_connection_loss callback failed")


class RemoteApplicationClient:
    """Fetches `Application` records from the applications registry.

    Args:
        connector: Opens the bus connection used by each fetch.
    """

    def __init__(self, connector: BusConnector) -> None:
        self._connect = connector

    async def fetch(
        self, instance_id: UUID, on_connection_loss: ConnectionLossCallback
    ) -> Application:
        """Fetch the application registered as `instance_id`.

        The returned record has `role` unset; the registry's ``type`` reply is
        read but not mapped.

        Args:
            instance_id: The application instance to look up.
            on_connection_loss: Invoked once if the bus connection dies
                before the fetch completes.

        Returns:
            The assembled application record.

        Raises:
            ApplicationRetrievalError: If connecting, any call, or validating
                the replies fails.
        """
        logger.debug("Fetching application %s from %s", instance_id, SERVICE_NAME)
        try:
            connection = await self._connect()
        except BusError as e:
            raise ApplicationRetrievalError(
                instance_id, "could not connect to the bus"
            ) from e

        cancelled = asyncio.Event()
        watcher = asyncio.create_task(
            watch_connection(connection, cancelled, on_connection_loss),
            name=f"voxels-bus-watcher-{instance_id}",
        )
        try:
            replies: dict[str, str] = {}
            for member in FETCH_ORDER:
                replies[member] = await self._call(connection, instance_id, member)
            return _assemble(instance_id, replies)
        except ApplicationRetrievalError as e:
            logger.warning("%s", e)
            raise
        finally:
            cancelled.set()
            try:
                await watcher
            finally:
                connection.close()

    @staticmethod
    async def _call(connection: BusConnection, instance_id: UUID, member: str) -> str:
        logger.debug("Calling %s.%s(%s)", INTERFACE_NAME, member, instance_id)
        try:
            body = await asyncio.wait_for(
                connection.call(
                    SERVICE_NAME,
                    GET_PATH,
                    INTERFACE_NAME,
                    member,
                    "s",
                    [str(instance_id)],
                ),
                timeout=CALL_TIMEOUT,
            )
        except TimeoutError as e:
            raise ApplicationRetrievalError(
                instance_id, f"'{member}' timed out after {CALL_TIMEOUT:g}s"
            ) from e
        except BusError as e:
            raise ApplicationRetrievalError(
                instance_id, f"'{member}' failed: {e}"
            ) from e

        if len(body) != 1 or not isinstance(body[0], str):
            raise ApplicationRetrievalError(
                instance_id, f"'{member}' returned {body!r}, expected a single string"
            )
        return body[0]


def _assemble(instance_id: UUID, replies: dict[str, str]) -> Application:
    try:
        identity = ApplicationRDN(replies[RDN_METHOD])
        homepage = parse_url(replies[HOMEPAGE_METHOD])
    except (RDNError, InvalidURLError) as e:
        raise ApplicationRetrievalError(
            instance_id, f"registry returned invalid data: {e}"
        ) from e

    # TODO: map the type reply onto Role once the registry's tags are settled
    logger.debug("Registry declares %s as %r", identity, replies[TYPE_METHOD])
    return Application(
        identity=identity,
        instance_id=instance_id,
        homepage=homepage,
        description=replies[DESCRIPTION_METHOD],
        role=None,
    )
