"""Row splitting, width aggregation and the tabulation driver."""

from xcol._utils import log_event, split_lines, warn
from xcol.alignment import alignment_assignment
from xcol.exceptions import RaggedRowsError
from xcol.formatters._align import render_cell
from xcol.formatters._width import measure_text_width, strip_ansi_codes
from xcol.models import HIDE_UNNAMED, TableConfig


def _is_blank(line):
    return not strip_ansi_codes(line).strip()


def filter_blank_lines(lines, keep_blank=False):
    """Apply the blank-line policy.

    Without keep_blank every blank line goes. With it, only a single
    trailing blank line is dropped.
    """
    if keep_blank:
        if lines and _is_blank(lines[-1]):
            return lines[:-1]
        return list(lines)
    return [line for line in lines if not _is_blank(line)]


def plan_row(line, separator, columns_hide, columns_titles=None):
    """Split *line* on the literal *separator* and drop hidden columns."""
    return [
        cell
        for index, cell in enumerate(line.split(separator))
        if not columns_hide.is_hidden(index, columns_titles)
    ]


def aggregate_widths(column_plans):
    """Measure every cell once.

    Returns (column_widths, cell_widths): the per-column maximum, and the
    per-row list of measured widths reused at render time.
    """
    column_widths: list[int] = []
    cell_widths: list[list[int]] = []
    for cells in column_plans:
        row_widths = []
        for index, cell in enumerate(cells):
            width = measure_text_width(cell)
            if index == len(column_widths):
                column_widths.append(width)
            elif column_widths[index] < width:
                column_widths[index] = width
            row_widths.append(width)
        cell_widths.append(row_widths)
    return column_widths, cell_widths


def check_rectangular(column_plans):
    """Raise RaggedRowsError at the first row whose column count differs from row 1."""
    if not column_plans:
        return
    expected = len(column_plans[0])
    for row_number, cells in enumerate(column_plans, start=1):
        if len(cells) != expected:
            raise RaggedRowsError(expected, row_number, len(cells), column_plans[0], cells)


def render_rows(column_plans, cell_widths, column_widths, alignments, output_separator):
    lines = []
    for cells, widths in zip(column_plans, cell_widths):
        parts = []
        last = len(cells) - 1
        for index, cell in enumerate(cells):
            sep = "" if index == last else output_separator
            pad_width = column_widths[index] - widths[index]
            parts.append(render_cell(cell, alignments[index], pad_width, sep))
        lines.append("".join(parts))
    return lines


def tabulate(text, table_config=None):
    """Align the delimiter-separated *text* into columns.

    Returns the rendered lines joined by "\\n" without a trailing newline,
    or "" when there is nothing to print.
    """
    cfg = table_config if table_config is not None else TableConfig()

    raw_lines = split_lines(text)
    lines = filter_blank_lines(raw_lines, cfg.keep_blank)
    log_event(
        cfg.verbose,
        "lines_filtered",
        before=len(raw_lines),
        after=len(lines),
        keep_blank=cfg.keep_blank,
    )
    if not lines:
        return ""

    if cfg.columns_titles is not None:
        lines.insert(0, cfg.columns_titles.title_line)

    if cfg.columns_hide.mode == HIDE_UNNAMED and cfg.columns_titles is None:
        log_event(cfg.verbose, "hide_unnamed_without_titles", rows=len(lines))
        warn("--columns-hide '-' without --columns-titles hides every column.")

    column_plans = [
        plan_row(line, cfg.separator, cfg.columns_hide, cfg.columns_titles) for line in lines
    ]
    max_columns = max(len(cells) for cells in column_plans)
    log_event(cfg.verbose, "columns_planned", rows=len(column_plans), max_columns=max_columns)
    if max_columns == 0:
        return ""

    if cfg.strict:
        check_rectangular(column_plans)

    column_widths, cell_widths = aggregate_widths(column_plans)
    alignments = alignment_assignment(cfg.alignment, max_columns)

    return "\n".join(
        render_rows(column_plans, cell_widths, column_widths, alignments, cfg.output_separator)
    )
