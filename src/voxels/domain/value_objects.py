"""Module including value objects used across the domain layer."""

from dataclasses import dataclass
from enum import Enum

from pydantic import AnyUrl, TypeAdapter, ValidationError

from .errors import InvalidURLError

_URL_ADAPTER = TypeAdapter(AnyUrl)


def parse_url(url: str) -> AnyUrl:
    """Parse an absolute URL.

    Raises:
        InvalidURLError: If `url` is not an absolute URL.
    """
    try:
        return _URL_ADAPTER.validate_python(url)
    except ValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors())
        raise InvalidURLError(url, reason) from e


class RoleKind(Enum):
    """Enumeration of the roles an application can declare"""

    CLIENT = "Client"
    SERVER = "Server"
    OTHER = "Other"


@dataclass(frozen=True)
class Role:
    """Value object representing the role an application plays.

    A role is identified by its tag. ``"Client"`` and ``"Server"`` are the
    known roles; any other tag is kept verbatim as an "other" role so that
    role names introduced later survive a round trip.
    """

    tag: str

    @classmethod
    def client(cls) -> "Role":
        return cls(RoleKind.CLIENT.value)

    @classmethod
    def server(cls) -> "Role":
        return cls(RoleKind.SERVER.value)

    @classmethod
    def other(cls, name: str) -> "Role":
        """An "other" role tagged `name`.

        Raises:
            ValueError: If `name` is one of the known tags; use `client` or
                `server` for those, as the wire cannot tell them apart.
        """
        if name in (RoleKind.CLIENT.value, RoleKind.SERVER.value):
            raise ValueError(f"{name!r} is a known role, not an other role")
        return cls(name)

    @property
    def kind(self) -> RoleKind:
        if self.tag == RoleKind.CLIENT.value:
            return RoleKind.CLIENT
        if self.tag == RoleKind.SERVER.value:
            return RoleKind.SERVER
        return RoleKind.OTHER

    def __str__(self) -> str:
        return self.tag
