"""
Shared pure-utility functions for xcol.

These helpers have no business logic. Apart from the stderr loggers
they have no side effects.
"""

import json
import re
import sys

_COMMA_RUN_RE = re.compile(r",{2,}")


def parse_list(raw):
    """Parse a loose comma-separated list into trimmed items.

    Runs of commas collapse into one and leading/trailing commas are
    dropped, so ",,a,,b,," yields ["a", "b"].
    """
    if not raw:
        return []
    collapsed = _COMMA_RUN_RE.sub(",", raw).strip(",")
    if not collapsed:
        return []
    return [item.strip() for item in collapsed.split(",")]


def split_lines(text):
    """Split *text* into lines on "\\n", dropping a trailing "\\r" per line.

    A final line terminator does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def log_event(enabled, event, **fields):
    """Emit a structured diagnostic line to stderr when enabled."""
    if not enabled:
        return
    payload = {"event": event, **fields}
    print("[XCOL] " + json.dumps(payload, ensure_ascii=False, sort_keys=True), file=sys.stderr)


def warn(message):
    print(f"[WARN] {message}", file=sys.stderr)
