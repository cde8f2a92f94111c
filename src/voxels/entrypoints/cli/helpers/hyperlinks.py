"""OSC-8 hyperlink rendering for the Voxels CLI.

Application homepages and the help epilog are printed as clickable links on
terminals known to understand OSC-8, and as plain text everywhere else.
"""

import os
import sys
from typing import TextIO

OSC8_TERM_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
OSC8_TERM_PREFIXES = ("alacritty", "konsole")
OSC8_ENV_MARKERS = ("WT_SESSION", "VTE_VERSION")  # Windows Terminal, VTE-based


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort check that `stream` is a terminal rendering OSC-8 links.

    Args:
        stream: Stream the link will be written to; defaults to ``sys.stdout``.

    Returns:
        bool: False for anything that is not a TTY, or for an unknown terminal.
    """
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in OSC8_TERM_PROGRAMS:
        return True
    if any(os.getenv(marker) for marker in OSC8_ENV_MARKERS):
        return True
    return os.getenv("TERM", "").startswith(OSC8_TERM_PREFIXES)


def hyperlink(url: str, label: str | None = None, stream: TextIO | None = None) -> str:
    """Render `url` as an OSC-8 link, or as plain text when unsupported.

    Args:
        url: Link target.
        label: Visible text; defaults to the URL itself. Ignored in the
            plain-text fallback, which always shows the URL.
        stream: Stream the result is destined for (see `supports_osc8`).
    """
    if not supports_osc8(stream):
        return url
    return f"\x1b]8;;{url}\x07{label or url}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
