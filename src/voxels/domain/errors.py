"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidURLError(DomainError):
    """Raised when a string cannot be parsed as an absolute URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid URL '{url}': {reason}")
        self.url = url
        self.reason = reason


# ============================================================================
#                   Application RDN related errors
# ============================================================================


class RDNError(DomainError):
    """Base class for reverse-domain name validation errors.

    Attributes:
        rdn (str): The rejected candidate name, verbatim.
    """

    MESSAGE = "Invalid application RDN"

    def __init__(self, rdn: str) -> None:
        super().__init__(self.MESSAGE)
        self.rdn = rdn


class RDNTooLongError(RDNError):
    """Raised when a candidate RDN exceeds 255 characters."""

    MESSAGE = "An application RDN should be less than 255 characters in length"


class RDNEmptyError(RDNError):
    """Raised when a candidate RDN is the empty string."""

    MESSAGE = "An application RDN should not be an empty string"


class RDNMissingSeparatorsError(RDNError):
    """Raised when a candidate RDN contains no '.' separator."""

    MESSAGE = "An application RDN must have at least one separating character: '.'"


class RDNDoubleSeparatorError(RDNError):
    """Raised when a candidate RDN contains an empty segment."""

    MESSAGE = (
        "An application RDN must not have two separating characters adjacent "
        "together e.g: 'test..com'"
    )


class RDNStartsWithNumericError(RDNError):
    """Raised when a segment of a candidate RDN begins with a digit."""

    MESSAGE = (
        "An application RDN must not have a segment that begins with a numeric "
        "character e.g: 'test.9hello.com'"
    )


class RDNInvalidCharacterError(RDNError):
    """Raised when a candidate RDN holds characters outside [alnum_.]."""

    MESSAGE = (
        "An application RDN must not have segments composed of anything other "
        "than alphanumerics and underscores"
    )


# ============================================================================
#                   Application related errors
# ============================================================================


class ApplicationError(DomainError):
    """Base class for application aggregate errors."""


class InvalidRDNError(ApplicationError):
    """Raised when an application is described by an invalid RDN.

    Attributes:
        rdn (str): The rejected name.
        reason (RDNError): The validation rule that failed.
    """

    def __init__(self, rdn: str, reason: RDNError) -> None:
        super().__init__(f"Invalid RDN provided for application: '{rdn}' ({reason})")
        self.rdn = rdn
        self.reason = reason
