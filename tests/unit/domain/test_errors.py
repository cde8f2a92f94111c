"""Unit tests for domain errors."""

import pytest

from voxels.domain import errors

RDN_ERRORS = [
    errors.RDNTooLongError,
    errors.RDNEmptyError,
    errors.RDNMissingSeparatorsError,
    errors.RDNDoubleSeparatorError,
    errors.RDNStartsWithNumericError,
    errors.RDNInvalidCharacterError,
]


@pytest.mark.parametrize("error_type", RDN_ERRORS)
def test_rdn_errors_share_a_base(error_type: type[errors.RDNError]) -> None:
    """Every rule error is an RDNError and a DomainError."""
    error = error_type("bad..name")
    assert isinstance(error, errors.RDNError)
    assert isinstance(error, errors.DomainError)
    assert error.rdn == "bad..name"
    assert str(error) == error_type.MESSAGE


def test_rdn_error_messages_are_distinct() -> None:
    """Each rule has its own message."""
    assert len({error_type.MESSAGE for error_type in RDN_ERRORS}) == len(RDN_ERRORS)


class TestInvalidRDNError:
    """Tests for the InvalidRDNError application error."""

    @staticmethod
    def test_attributes() -> None:
        """The rejected name and the failed rule are kept."""
        reason = errors.RDNEmptyError("")
        error = errors.InvalidRDNError("", reason)
        assert error.rdn == ""
        assert error.reason is reason
        assert isinstance(error, errors.ApplicationError)

    @staticmethod
    def test_error_message() -> None:
        """The message names the rejected value and the rule."""
        reason = errors.RDNMissingSeparatorsError("abc")
        error = errors.InvalidRDNError("abc", reason)
        assert str(error) == (
            f"Invalid RDN provided for application: 'abc' ({reason.MESSAGE})"
        )


class TestInvalidURLError:
    """Tests for the InvalidURLError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        error = errors.InvalidURLError("nope", "relative URL without a base")
        assert error.url == "nope"
        assert error.reason == "relative URL without a base"
        assert str(error) == "Invalid URL 'nope': relative URL without a base"
