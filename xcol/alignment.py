"""Alignment registry — single source of truth for column alignment modes.

Standalone module (no project imports). Each mode is reachable through
three identifier characters: a lowercase letter, an uppercase letter and
a symbol.
"""

from enum import Enum


class Alignment(Enum):
    """Horizontal placement of a cell within its column."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"

    @classmethod
    def from_char(cls, char):
        try:
            return _BY_IDENTIFIER[char]
        except KeyError:
            raise ValueError(f"Unknown alignment identifier {char!r}") from None


LEFT_IDENTIFIERS: tuple[str, ...] = ("l", "L", "<")
RIGHT_IDENTIFIERS: tuple[str, ...] = ("r", "R", ">")
CENTER_IDENTIFIERS: tuple[str, ...] = ("c", "C", "^")

IDENTIFIERS: tuple[str, ...] = LEFT_IDENTIFIERS + RIGHT_IDENTIFIERS + CENTER_IDENTIFIERS

_BY_IDENTIFIER: dict[str, Alignment] = {
    **{c: Alignment.LEFT for c in LEFT_IDENTIFIERS},
    **{c: Alignment.RIGHT for c in RIGHT_IDENTIFIERS},
    **{c: Alignment.CENTER for c in CENTER_IDENTIFIERS},
}


def is_valid_alignment(spec):
    """True when every character of *spec* is a known identifier."""
    return all(c in _BY_IDENTIFIER for c in spec)


def alignment_assignment(spec, column_count):
    """Map *spec* onto *column_count* columns.

    Modes are taken positionally; the last one repeats for every column
    past the end of *spec*. An empty *spec* means left everywhere.
    """
    modes = [Alignment.from_char(c) for c in spec] or [Alignment.LEFT]
    if len(modes) < column_count:
        modes.extend([modes[-1]] * (column_count - len(modes)))
    return modes
