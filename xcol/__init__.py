"""xcol — align delimiter-separated text into columns."""

from xcol._utils import parse_list
from xcol.alignment import Alignment
from xcol.config import VERSION
from xcol.exceptions import (
    CliError,
    ConfigValidationError,
    InputError,
    InvalidColumnIndexError,
    RaggedRowsError,
    UnreadableFileError,
)
from xcol.formatters import measure_text_width, tabulate
from xcol.models import ColumnsHide, ColumnsTitles, TableConfig

__all__ = [
    "VERSION",
    "Alignment",
    "CliError",
    "ColumnsHide",
    "ColumnsTitles",
    "ConfigValidationError",
    "InputError",
    "InvalidColumnIndexError",
    "RaggedRowsError",
    "TableConfig",
    "UnreadableFileError",
    "measure_text_width",
    "parse_list",
    "tabulate",
]
