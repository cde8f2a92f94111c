"""CLI helpers for VOXELS.

Utilities used by the command-line interface: OSC-8 terminal hyperlinks when
supported, and message emitters that write to stderr with emoji→ASCII
fallbacks.
"""

from .hyperlinks import hyperlink
from .messages import error, success, warn

__all__ = ["error", "hyperlink", "success", "warn"]
