"""Tabulation engine for xcol.

Re-exports all public names so consumers can do:
    from xcol.formatters import tabulate
"""

from xcol.formatters._align import (
    center_split,
    render_cell,
)
from xcol.formatters._table import (
    aggregate_widths,
    check_rectangular,
    filter_blank_lines,
    plan_row,
    render_rows,
    tabulate,
)
from xcol.formatters._width import (
    measure_text_width,
    strip_ansi_codes,
)

__all__ = [
    "aggregate_widths",
    "center_split",
    "check_rectangular",
    "filter_blank_lines",
    "measure_text_width",
    "plan_row",
    "render_cell",
    "render_rows",
    "strip_ansi_codes",
    "tabulate",
]
