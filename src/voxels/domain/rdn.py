"""Reverse-domain names (RDNs) identifying Voxels applications.

An RDN is a dotted identifier such as ``com.example.app``. Besides naming an
application it doubles as a filesystem-safe path fragment: every label maps
to one directory level (see `ApplicationRDN.as_path`).

Validation applies the rules below in order and reports the first one that
fails:

1. at most 255 characters (`RDNTooLongError`)
2. not empty (`RDNEmptyError`)
3. at least one ``.`` (`RDNMissingSeparatorsError`)
4. no empty label (`RDNDoubleSeparatorError`)
5. no label starting with a numeric character (`RDNStartsWithNumericError`)
6. only alphanumerics, ``_`` and ``.`` (`RDNInvalidCharacterError`)
"""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .errors import (
    RDNDoubleSeparatorError,
    RDNEmptyError,
    RDNError,
    RDNInvalidCharacterError,
    RDNMissingSeparatorsError,
    RDNStartsWithNumericError,
    RDNTooLongError,
)

MAX_RDN_LENGTH = 255
SEPARATOR = "."


def _is_allowed(character: str) -> bool:
    return character.isalnum() or character in ("_", SEPARATOR)


def find_rdn_error(name: str) -> RDNError | None:
    """Return the first validation rule `name` breaks, or None if it is valid.

    Args:
        name: Candidate reverse-domain name.

    Returns:
        An `RDNError` instance describing the failed rule, or None.
    """
    if len(name) > MAX_RDN_LENGTH:
        return RDNTooLongError(name)
    if not name:
        return RDNEmptyError(name)
    if SEPARATOR not in name:
        return RDNMissingSeparatorsError(name)
    for segment in name.split(SEPARATOR):
        if not segment:
            return RDNDoubleSeparatorError(name)
        if segment[0].isnumeric():
            return RDNStartsWithNumericError(name)
    if not all(_is_allowed(c) for c in name):
        return RDNInvalidCharacterError(name)
    return None


def validate_rdn(name: str) -> ApplicationRDN:
    """Validate `name` and wrap it in an `ApplicationRDN`.

    Raises:
        RDNError: The specific subclass for the first rule that failed.
    """
    return ApplicationRDN(name)


@dataclass(frozen=True, order=True)
class ApplicationRDN:
    """A validated reverse-domain name.

    The wrapped string is stored verbatim. Instances compare and sort by it.

    Raises:
        RDNError: On construction, if `name` breaks a validation rule.
    """

    name: str

    def __post_init__(self) -> None:
        if (error := find_rdn_error(self.name)) is not None:
            raise error

    def __str__(self) -> str:
        return self.name

    @property
    def segments(self) -> tuple[str, ...]:
        """The dot-separated labels, left to right."""
        return tuple(self.name.split(SEPARATOR))

    def as_path(self) -> Path:
        """Project the RDN onto a relative path, one part per label.

        Example:
            ``ApplicationRDN("com.test").as_path()`` is ``Path("com/test")``.
        """
        return Path(*self.segments)

    def as_path_with_prefix(self, prefix: str | PathLike[str]) -> Path:
        """Join the path projection onto `prefix`."""
        return Path(prefix) / self.as_path()
