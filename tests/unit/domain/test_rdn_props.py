"""Hypothesis property tests for reverse-domain name validation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from voxels.domain.errors import RDNInvalidCharacterError, RDNTooLongError
from voxels.domain.rdn import ApplicationRDN, find_rdn_error

pytestmark = [pytest.mark.property]

labels = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,15}", fullmatch=True)
valid_names = st.lists(labels, min_size=2, max_size=6).map(".".join)


@given(st.text(min_size=256, max_size=600))
def test_anything_longer_than_255_is_too_long(name: str) -> None:
    """Length is checked before anything else, whatever the content."""
    assert isinstance(find_rdn_error(name), RDNTooLongError)


@given(valid_names)
def test_valid_names_project_one_part_per_label(name: str) -> None:
    """The path projection preserves every label in order."""
    rdn = ApplicationRDN(name)
    assert rdn.name == name
    assert rdn.as_path().parts == tuple(name.split("."))


@given(valid_names, st.sampled_from("-+!@#$%^&*/\\ :"))
def test_punctuation_is_rejected(name: str, bad: str) -> None:
    """Characters outside [alnum_.] are rejected once the structure is valid."""
    assert isinstance(find_rdn_error(name + bad), RDNInvalidCharacterError)
