"""Unit tests for voxels.entrypoints.cli.helpers.hyperlinks."""

import io

import pytest

from voxels.entrypoints.cli.helpers.hyperlinks import hyperlink, supports_osc8

URL = "https://example.com"


class TTY(io.StringIO):
    def isatty(self) -> bool:
        return True


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from a terminal with no OSC-8 markers."""
    for var in ("TERM_PROGRAM", "WT_SESSION", "VTE_VERSION", "TERM"):
        monkeypatch.delenv(var, raising=False)


def test_non_tty_falls_back_to_plain_url():
    assert not supports_osc8(io.StringIO())
    assert hyperlink(URL, stream=io.StringIO()) == URL


def test_unknown_terminal_falls_back():
    assert not supports_osc8(TTY())


@pytest.mark.parametrize(
    ("var", "value"),
    [
        ("TERM_PROGRAM", "WezTerm"),
        ("WT_SESSION", "1"),
        ("VTE_VERSION", "7600"),
        ("TERM", "alacritty"),
    ],
)
def test_known_terminals_get_links(monkeypatch, var, value):
    monkeypatch.setenv(var, value)
    assert supports_osc8(TTY())
    assert hyperlink(URL, "home", TTY()) == f"\x1b]8;;{URL}\x07home\x1b]8;;\x07"
