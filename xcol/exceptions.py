"""
xcol exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


def _shape(cells, maxlen=60):
    """Render a row as [cell | cell], truncated with an ellipsis."""
    s = "[" + " | ".join(cells) + "]"
    return s[: maxlen - 1] + "\u2026" if len(s) > maxlen else s


class CliError(Exception):
    """Exit code 1 — validation, usage and row-shape errors."""

    exit_code = 1


class ConfigValidationError(CliError):
    """Exit code 1 — invalid option value (alignment, separator, usage)."""

    exit_code = 1


class InvalidColumnIndexError(ConfigValidationError):
    """Exit code 1 — a --columns-hide token is not a positive integer."""

    exit_code = 1

    def __init__(self, token):
        self.token = token
        super().__init__(
            f"[ERROR] Invalid column index '{token}'. "
            "Column indices are 1-based positive integers."
        )


class RaggedRowsError(CliError):
    """Exit code 1 — rows differ in column count while --strict is set."""

    exit_code = 1

    def __init__(self, first_columns, row_number, row_columns, first_cells=(), row_cells=()):
        self.first_columns = first_columns
        self.row_number = row_number
        self.row_columns = row_columns
        self.first_cells = tuple(first_cells)
        self.row_cells = tuple(row_cells)
        super().__init__(
            f"[ERROR] Row 1 has {first_columns} columns but row {row_number} "
            f"has {row_columns} columns.\n"
            f"  row 1: {_shape(self.first_cells)}\n"
            f"  row {row_number}: {_shape(self.row_cells)}"
        )


class InputError(CliError):
    """Exit code 2 — input could not be acquired."""

    exit_code = 2


class UnreadableFileError(InputError):
    """Exit code 2 — the input file is missing or cannot be read."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"[ERROR] The file '{path}' does not exist or cannot be read.")
