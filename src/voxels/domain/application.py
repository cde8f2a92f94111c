"""The application aggregate."""

from dataclasses import dataclass
from uuid import UUID

from pydantic import AnyUrl

from .rdn import ApplicationRDN
from .value_objects import Role


@dataclass(frozen=True)
class Application:
    """Declared metadata of one registered application instance.

    `identity` and `instance_id` are always present. The other fields are
    independently optional.

    Attributes:
        identity: The application's reverse-domain name.
        instance_id: Identifier of the registered instance.
        homepage: Project homepage, if declared.
        description: Free-text description, if declared.
        role: Role the application plays, if declared.
    """

    identity: ApplicationRDN
    instance_id: UUID
    homepage: AnyUrl | None = None
    description: str | None = None
    role: Role | None = None
