"""VOXELS Message Bus Interface Package"""

from .bus import BusConnection, BusConnector
from .errors import (
    BusCallError,
    BusConnectError,
    BusDisconnectedError,
    BusError,
    BusMessageError,
)

__all__ = [
    "BusCallError",
    "BusConnectError",
    "BusConnection",
    "BusConnector",
    "BusDisconnectedError",
    "BusError",
    "BusMessageError",
]
