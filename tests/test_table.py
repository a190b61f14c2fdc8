"""Tests for row planning, width aggregation and the tabulation driver."""

import pytest

from xcol.exceptions import InvalidColumnIndexError, RaggedRowsError
from xcol.formatters import (
    aggregate_widths,
    check_rectangular,
    filter_blank_lines,
    measure_text_width,
    plan_row,
    tabulate,
)
from xcol.models import ColumnsHide, ColumnsTitles, TableConfig


def _cfg(**kwargs):
    return TableConfig.from_kwargs(**kwargs)


# ---------------------------------------------------------------------------
# filter_blank_lines
# ---------------------------------------------------------------------------


class TestFilterBlankLines:
    def test_strip_mode_removes_all_blank(self):
        lines = ["", "a", "  ", "\x1b[0m", "b", ""]
        assert filter_blank_lines(lines) == ["a", "b"]

    def test_keep_mode_drops_only_trailing_blank(self):
        assert filter_blank_lines(["", "a", "", "b", " "], keep_blank=True) == ["", "a", "", "b"]

    def test_keep_mode_drops_single_trailing_blank(self):
        assert filter_blank_lines(["a", "", ""], keep_blank=True) == ["a", ""]

    def test_keep_mode_no_trailing_blank(self):
        assert filter_blank_lines(["a", "", "b"], keep_blank=True) == ["a", "", "b"]

    def test_empty(self):
        assert filter_blank_lines([]) == []
        assert filter_blank_lines([], keep_blank=True) == []


# ---------------------------------------------------------------------------
# plan_row
# ---------------------------------------------------------------------------


class TestPlanRow:
    def test_splits_on_literal_separator(self):
        assert plan_row("a.b.c", ".", ColumnsHide()) == ["a", "b", "c"]

    def test_multi_character_separator(self):
        assert plan_row("a, b,c", ", ", ColumnsHide()) == ["a", "b,c"]

    def test_adjacent_separators_make_empty_cells(self):
        assert plan_row("a  b", " ", ColumnsHide()) == ["a", "", "b"]

    def test_hides_indices(self):
        hide = ColumnsHide.from_value("1,3")
        assert plan_row("a b c d", " ", hide) == ["b", "d"]

    def test_hides_unnamed(self):
        hide = ColumnsHide.from_value("-")
        titles = ColumnsTitles.from_value("x,y")
        assert plan_row("a b c d", " ", hide, titles) == ["a", "b"]

    def test_hides_unnamed_without_titles(self):
        assert plan_row("a b c", " ", ColumnsHide.from_value("-")) == []


# ---------------------------------------------------------------------------
# aggregate_widths / check_rectangular
# ---------------------------------------------------------------------------


class TestAggregateWidths:
    def test_max_per_column(self):
        column_widths, cell_widths = aggregate_widths([["ab", "c"], ["d", "efgh", "i"]])
        assert column_widths == [2, 4, 1]
        assert cell_widths == [[2, 1], [1, 4, 1]]

    def test_visual_width(self):
        column_widths, _ = aggregate_widths([["\x1b[31mred\x1b[0m"], ["中"]])
        assert column_widths == [3]

    def test_empty_rows(self):
        assert aggregate_widths([[], []]) == ([], [[], []])


class TestCheckRectangular:
    def test_equal_rows_pass(self):
        check_rectangular([["a", "b"], ["c", "d"]])

    def test_reports_first_offending_row(self):
        with pytest.raises(RaggedRowsError) as exc_info:
            check_rectangular([["a", "b", "c"], ["d", "e", "f"], ["g"], ["h", "i"]])
        assert exc_info.value.first_columns == 3
        assert exc_info.value.row_number == 3
        assert exc_info.value.row_columns == 1
        assert exc_info.value.first_cells == ("a", "b", "c")
        assert exc_info.value.row_cells == ("g",)


# ---------------------------------------------------------------------------
# tabulate
# ---------------------------------------------------------------------------


class TestTabulate:
    def test_left_aligned_default(self):
        assert tabulate("a bb\nccc d\n") == "a   bb\nccc d "

    def test_default_config(self):
        assert tabulate("a bb\nccc d\n", TableConfig()) == tabulate("a bb\nccc d\n")

    def test_right_aligned(self):
        assert tabulate("10 x\n5 y\n", _cfg(alignment="r")) == "10 x\n 5 y"

    def test_center_even_padding(self):
        result = tabulate("abcdef x\nab y\n", _cfg(alignment="c"))
        assert result.split("\n")[1] == "  ab   y"

    def test_center_odd_padding_extra_goes_right(self):
        result = tabulate("abcdefg\nab\n", _cfg(alignment="^"))
        assert result.split("\n")[1] == "  ab   "

    def test_last_alignment_repeats(self):
        result = tabulate("a b c\nxxx yyy zzz\n", _cfg(alignment="lr"))
        assert result.split("\n")[0] == "a     b   c"

    def test_output_separator(self):
        assert tabulate("a b\nccc d\n", _cfg(output_separator=" | ")) == "a   | b\nccc | d"

    def test_multi_character_separator(self):
        assert tabulate("a, b\nccc, d\n", _cfg(separator=", ")) == "a   b\nccc d"

    def test_ansi_cells_align_by_visible_width(self):
        result = tabulate("\x1b[31mred\x1b[0m x\nlonger y\n")
        assert result.split("\n")[0] == "\x1b[31mred\x1b[0m    x"

    def test_wide_characters(self):
        result = tabulate("中文 x\nabc y\n")
        assert result == "中文 x\nabc  y"

    def test_ragged_rows(self):
        assert tabulate("a b c\nd\n") == "a b c\nd"

    def test_strip_mode_removes_interior_blank(self):
        assert tabulate("a b\n\n c \n") == "a b\n  c "

    def test_keep_mode_preserves_interior_blank(self):
        assert tabulate("a b\n\nc d\n", _cfg(keep_blank=True)) == "a b\n \nc d"

    def test_keep_mode_drops_trailing_blank(self):
        assert tabulate("a b\n\n", _cfg(keep_blank=True)) == "a b"

    def test_empty_input(self):
        assert tabulate("") == ""
        assert tabulate("\n\n  \n") == ""

    def test_titles_row_prepended(self):
        result = tabulate("alice 30\nbob 7\n", _cfg(columns_titles="Name,Age"))
        assert result == "Name  Age\nalice 30 \nbob   7  "

    def test_titles_participate_in_width(self):
        result = tabulate("a b\n", _cfg(columns_titles="Longer,X"))
        assert result.split("\n")[1] == "a      b"

    def test_titles_on_empty_input_print_nothing(self):
        assert tabulate("", _cfg(columns_titles="a,b")) == ""

    def test_hide_indices(self):
        assert tabulate("a b c\nd e f\n", _cfg(columns_hide="2")) == "a c\nd f"

    def test_hide_unnamed(self):
        result = tabulate("1 2 3\n4 5 6\n", _cfg(columns_titles="A,B", columns_hide="-"))
        assert result == "A B\n1 2\n4 5"

    def test_hide_unnamed_without_titles_prints_nothing(self, capsys):
        assert tabulate("a b\n", _cfg(columns_hide="-")) == ""
        assert "[WARN]" in capsys.readouterr().err

    def test_hide_unnamed_without_titles_logs_event(self, capsys):
        tabulate("a b\n", _cfg(columns_hide="-", verbose=True))
        assert '"event": "hide_unnamed_without_titles"' in capsys.readouterr().err

    def test_hide_zero_rejected(self):
        with pytest.raises(InvalidColumnIndexError):
            tabulate("a b\n", _cfg(columns_hide="0"))

    def test_strict_rectangular_passes(self):
        assert tabulate("a b\nc d\n", _cfg(strict=True)) == "a b\nc d"

    def test_strict_ragged_raises(self):
        with pytest.raises(RaggedRowsError) as exc_info:
            tabulate("a b\nc d\ne\n", _cfg(strict=True))
        assert exc_info.value.row_number == 3

    def test_strict_counts_title_as_row_one(self):
        with pytest.raises(RaggedRowsError) as exc_info:
            tabulate("a b\n", _cfg(strict=True, columns_titles="x"))
        assert exc_info.value.first_columns == 1
        assert exc_info.value.row_number == 2

    def test_verbose_logs_to_stderr(self, capsys):
        tabulate("a b\n", _cfg(verbose=True))
        err = capsys.readouterr().err
        assert '"event": "lines_filtered"' in err
        assert '"event": "columns_planned"' in err


class TestTabulateProperties:
    TEXT = "id name score\n1 alice 93\n22 bob 7\n333 \x1b[1mcharlotte\x1b[0m 100\n"

    def test_line_count_matches_rows(self):
        assert len(tabulate(self.TEXT).split("\n")) == 4
        assert len(tabulate(self.TEXT, _cfg(columns_titles="a,b,c")).split("\n")) == 5

    @pytest.mark.parametrize("alignment", ["l", "r", "c", "lrc"])
    def test_columns_line_up(self, alignment):
        result = tabulate(self.TEXT, _cfg(alignment=alignment, output_separator="|"))
        rows = [line.split("|") for line in result.split("\n")]
        for column in zip(*rows):
            assert len({measure_text_width(cell) for cell in column}) == 1

    def test_rerun_on_own_output_is_stable(self):
        cfg = _cfg(output_separator="|")
        once = tabulate(self.TEXT, cfg)
        again = tabulate(once, _cfg(separator="|", output_separator="|"))
        assert again == once
