"""Exceptions for message bus operations."""


class BusError(Exception):
    """Base class for message bus errors."""


class BusConnectError(BusError):
    """Raised when a connection to the bus cannot be established.

    Attributes:
        address (str): Which bus was being connected to (e.g. "system").
    """

    def __init__(self, address: str, reason: str) -> None:
        super().__init__(f"Could not connect to the {address} bus: {reason}")
        self.address = address
        self.reason = reason


class BusCallError(BusError):
    """The remote side answered a method call with an error reply.

    Attributes:
        error_name (str): The D-Bus error name (e.g.
            "org.freedesktop.DBus.Error.UnknownMethod").
        text (str): The human-readable error text, possibly empty.
    """

    def __init__(self, error_name: str, text: str = "") -> None:
        super().__init__(f"{error_name}: {text}" if text else error_name)
        self.error_name = error_name
        self.text = text


class BusDisconnectedError(BusError):
    """Raised when the connection is lost while a call is in flight."""


class BusMessageError(BusError):
    """Raised when a call cannot be encoded as a bus message.

    The connection is unaffected; the arguments (names, signature or body)
    were rejected before anything was sent.

    Attributes:
        member (str): The method whose call was rejected.
    """

    def __init__(self, member: str, reason: str) -> None:
        super().__init__(f"Cannot encode a call to {member}: {reason}")
        self.member = member
        self.reason = reason
