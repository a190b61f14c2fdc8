"""
xcol shared configuration, constants, and environment helpers.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# Environment helpers
# ---------------------------------------------------------------------------


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def term_is_xterm(term=None):
    """True when TERM names an xterm-compatible terminal."""
    if term is None:
        term = os.environ.get("TERM", "")
    return "xterm" in term


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

DEFAULT_SEPARATOR = " "
DEFAULT_OUTPUT_SEPARATOR = " "
DEFAULT_ALIGNMENT = "l"

# --columns-hide value meaning "hide every column without a title"
HIDE_UNNAMED_PLACEHOLDER = "-"

COLOR_RESET = "\x1b[0m"

# Mouse tracking can be left enabled by colored input; xterm needs it off.
XTERM_MOUSE_DISABLE = (
    "\x1b[?9l",
    "\x1b[?1000l",
    "\x1b[?1001l",
    "\x1b[?1002l",
    "\x1b[?1003l",
)

DEBUG_ENV_KEY = "XCOL_DEBUG"


def debug_enabled():
    return _env_bool(DEBUG_ENV_KEY, False)
