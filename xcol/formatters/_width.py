"""Visual width measurement (ANSI-aware, East-Asian-width aware)."""

import re

from wcwidth import wcwidth

# CSI (colors, cursor moves), OSC (titles, hyperlinks) and two-byte ESC forms
_ANSI_RE = re.compile(
    r"\x1b\[[0-?]*[ -/]*[@-~]"
    r"|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"
    r"|\x1b[@-Z\\-_]"
)


def strip_ansi_codes(text):
    """Remove ANSI escape sequences from *text*."""
    if not text:
        return text
    return _ANSI_RE.sub("", text)


def measure_text_width(text):
    """Return the number of terminal columns *text* occupies.

    Escape sequences count as zero. Wide characters count as two,
    combining marks as zero. Non-printable characters also count as zero,
    so the result is always a non-negative integer.
    """
    if not text:
        return 0
    return sum(max(wcwidth(ch), 0) for ch in strip_ansi_codes(text))
