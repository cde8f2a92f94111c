"""Exceptions raised by the service layer."""

from uuid import UUID


class ApplicationRetrievalError(Exception):
    """Retrieving an application from the registry failed.

    Connection failures, call timeouts, error replies and invalid data all
    collapse into this error. The underlying failure is kept as
    ``__cause__``.

    Attributes:
        instance_id (UUID): The instance that was being fetched.
        reason (str): Short description of what went wrong.
    """

    def __init__(self, instance_id: UUID, reason: str) -> None:
        super().__init__(f"Failed to retrieve application {instance_id}: {reason}")
        self.instance_id = instance_id
        self.reason = reason
