"""Status lines for the Voxels CLI.

Each line starts with a glyph: an emoji when stderr can encode it, an ASCII
marker otherwise. Lines go to stderr so stdout stays clean for records
printed by ``voxels app fetch``.
"""

from typing import NamedTuple

import click


class _Style(NamedTuple):
    emoji: str
    fallback: str
    color: str


_STYLES = {
    "warn": _Style("⚠️", "[!]", "yellow"),
    "success": _Style("✅", "[OK]", "green"),
    "error": _Style("❌", "[X]", "red"),
}


def _can_encode(character: str) -> bool:
    """Return True if `character` can be encoded by the current stderr."""
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(kind: str) -> str:
    """Return the marker for a `kind` of message ("warn", "success", "error")."""
    style = _STYLES[kind]
    return style.emoji if _can_encode(style.emoji) else style.fallback


def _emit(kind: str, msg: str) -> None:
    click.secho(f"{glyph(kind)}  {msg}", fg=_STYLES[kind].color, bold=True, err=True)


def warn(msg: str) -> None:
    """Write a bold yellow warning line to stderr."""
    _emit("warn", msg)


def success(msg: str) -> None:
    """Write a bold green success line to stderr."""
    _emit("success", msg)


def error(msg: str) -> None:
    """Write a bold red error line to stderr."""
    _emit("error", msg)
