"""Variant codec for carrying applications over D-Bus.

D-Bus has no null value, so every optional field travels in a variant slot
whose inner signature says what it holds:

* a present text or URL value is a string variant (``s``);
* a present role is a string variant holding the role tag;
* an absent value of any of these fields is the byte sentinel ``0`` (``y``).

A whole application is the struct ``((s)svvv)``:
``(rdn-struct, instance-id, homepage, description, role)``.

Decoders look at the variant signature first, so an absent field decodes to
``None`` and never to an empty string.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from uuid import UUID

from dbus_fast import Variant
from pydantic import AnyUrl

from voxels.domain.application import Application
from voxels.domain.errors import InvalidRDNError, InvalidURLError, RDNError
from voxels.domain.rdn import ApplicationRDN
from voxels.domain.value_objects import Role, parse_url

ABSENT_SIGNATURE = "y"
ABSENT_VALUE = 0
TEXT_SIGNATURE = "s"

RDN_SIGNATURE = "(s)"
APPLICATION_SIGNATURE = "((s)svvv)"


class VariantDecodeError(Exception):
    """Raised when a wire value does not have the expected shape.

    Attributes:
        field (str): Name of the field being decoded.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Cannot decode {field}: {reason}")
        self.field = field
        self.reason = reason


def absent() -> Variant:
    """The sentinel variant standing in for "no value"."""
    return Variant(ABSENT_SIGNATURE, ABSENT_VALUE)


def is_absent(variant: Variant) -> bool:
    return variant.signature == ABSENT_SIGNATURE


# --- Optional text ---


def encode_optional_text(value: str | None) -> Variant:
    if value is None:
        return absent()
    return Variant(TEXT_SIGNATURE, value)


def decode_optional_text(variant: Variant, field: str = "text") -> str | None:
    if is_absent(variant):
        return None
    if variant.signature != TEXT_SIGNATURE:
        raise VariantDecodeError(
            field, f"expected '{TEXT_SIGNATURE}' variant, got '{variant.signature}'"
        )
    return variant.value


# --- Homepage ---


def encode_homepage(homepage: AnyUrl | None) -> Variant:
    return encode_optional_text(None if homepage is None else str(homepage))


def decode_homepage(variant: Variant) -> AnyUrl | None:
    if (text := decode_optional_text(variant, "homepage")) is None:
        return None
    try:
        return parse_url(text)
    except InvalidURLError as e:
        raise VariantDecodeError("homepage", str(e)) from e


# --- Role ---


def encode_role(role: Role | None) -> Variant:
    return encode_optional_text(None if role is None else role.tag)


def decode_role(variant: Variant) -> Role | None:
    if (tag := decode_optional_text(variant, "role")) is None:
        return None
    return Role(tag)


# --- RDN ---


def encode_rdn(rdn: ApplicationRDN) -> list[str]:
    return [rdn.name]


def decode_rdn(struct: Sequence[Any]) -> ApplicationRDN:
    """Decode an ``(s)`` struct into a validated RDN.

    Raises:
        VariantDecodeError: If `struct` is not a one-string struct.
        InvalidRDNError: If the carried name fails validation.
    """
    if len(struct) != 1 or not isinstance(struct[0], str):
        raise VariantDecodeError("rdn", f"expected '{RDN_SIGNATURE}', got {struct!r}")
    name = struct[0]
    try:
        return ApplicationRDN(name)
    except RDNError as e:
        raise InvalidRDNError(name, e) from e


# --- Application ---


def encode_application(application: Application) -> list[Any]:
    """Encode `application` as the body of an ``((s)svvv)`` struct."""
    return [
        encode_rdn(application.identity),
        str(application.instance_id),
        encode_homepage(application.homepage),
        encode_optional_text(application.description),
        encode_role(application.role),
    ]


def decode_application(struct: Sequence[Any]) -> Application:
    """Decode an ``((s)svvv)`` struct body into an `Application`.

    Raises:
        VariantDecodeError: If the struct is malformed.
        InvalidRDNError: If the carried RDN fails validation.
    """
    if len(struct) != 5:
        raise VariantDecodeError(
            "application", f"expected 5 members, got {len(struct)}"
        )
    rdn, instance_id, homepage, description, role = struct
    try:
        uuid = UUID(instance_id)
    except (TypeError, ValueError, AttributeError) as e:
        raise VariantDecodeError("instance_id", repr(instance_id)) from e
    return Application(
        identity=decode_rdn(rdn),
        instance_id=uuid,
        homepage=decode_homepage(homepage),
        description=decode_optional_text(description, "description"),
        role=decode_role(role),
    )
