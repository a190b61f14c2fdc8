"""Cell padding for the three alignment modes."""

from xcol.alignment import Alignment


def center_split(pad_width):
    """Split *pad_width* into (left, right) shares; an odd extra space goes right."""
    left = pad_width // 2
    return left, pad_width - left


def render_cell(cell, alignment, pad_width, output_separator):
    """Pad *cell* by *pad_width* spaces per *alignment*, then append the separator.

    Never truncates. The caller passes an empty separator for the last
    cell of a row.
    """
    if alignment is Alignment.RIGHT:
        return f"{' ' * pad_width}{cell}{output_separator}"
    if alignment is Alignment.CENTER:
        left, right = center_split(pad_width)
        return f"{' ' * left}{cell}{' ' * right}{output_separator}"
    return f"{cell}{' ' * pad_width}{output_separator}"
