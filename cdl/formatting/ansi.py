"""
Escape sequence helpers for measuring colored text.
"""

import re

# CSI sequences as emitted by `ls --color`: ESC [ params final-letter
_ESCAPE_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")


def strip_escapes(text: str) -> str:
    """Return ``text`` with every CSI escape sequence removed."""
    return _ESCAPE_RE.sub("", text)


def visible_length(text: str) -> int:
    """
    Get the printed length of text, ignoring escape sequences.

    Args:
        text: Text that may contain color codes

    Returns:
        Number of visible characters
    """
    return len(strip_escapes(text))
