"""
Typed, immutable configuration for a single tabulation run.
"""

import re
from dataclasses import dataclass, field

from xcol import config
from xcol._utils import parse_list
from xcol.alignment import IDENTIFIERS, is_valid_alignment
from xcol.exceptions import ConfigValidationError, InvalidColumnIndexError

_INDEX_TOKEN_RE = re.compile(r"^[0-9]+$")

HIDE_NONE = "none"
HIDE_UNNAMED = "unnamed"
HIDE_INDICES = "indices"


@dataclass(frozen=True)
class ColumnsTitles:
    """Synthetic title row built from a comma list of names."""

    names: tuple[str, ...]
    separator: str = config.DEFAULT_SEPARATOR

    @property
    def named_columns(self) -> int:
        return len(self.names)

    @property
    def title_line(self) -> str:
        return self.separator.join(self.names)

    @classmethod
    def from_value(cls, raw, separator=config.DEFAULT_SEPARATOR):
        if raw is None:
            return None
        return cls(names=tuple(parse_list(raw)), separator=separator)


@dataclass(frozen=True)
class ColumnsHide:
    """Which columns to drop before measuring and rendering.

    mode is one of HIDE_NONE, HIDE_UNNAMED or HIDE_INDICES. indices are
    0-based and only meaningful for HIDE_INDICES.
    """

    mode: str = HIDE_NONE
    indices: frozenset[int] = frozenset()

    @classmethod
    def from_value(cls, raw):
        """Parse the user-facing --columns-hide value.

        "-" hides every unnamed column; anything else is a comma list of
        1-based indices. A token that is not a positive integer raises
        InvalidColumnIndexError.
        """
        if raw is None:
            return cls()
        if raw.strip() == config.HIDE_UNNAMED_PLACEHOLDER:
            return cls(mode=HIDE_UNNAMED)
        indices = set()
        for token in parse_list(raw):
            if not _INDEX_TOKEN_RE.match(token):
                raise InvalidColumnIndexError(token)
            index = int(token)
            if index == 0:
                raise InvalidColumnIndexError(token)
            indices.add(index - 1)
        if not indices:
            return cls()
        return cls(mode=HIDE_INDICES, indices=frozenset(indices))

    def is_hidden(self, column_index, columns_titles=None):
        if self.mode == HIDE_INDICES:
            return column_index in self.indices
        if self.mode == HIDE_UNNAMED:
            if columns_titles is None:
                return True
            return column_index >= columns_titles.named_columns
        return False


@dataclass(frozen=True)
class TableConfig:
    """Validated input contract for `tabulate`.

    Built once at the CLI boundary and passed down unchanged.
    """

    separator: str = config.DEFAULT_SEPARATOR
    output_separator: str = config.DEFAULT_OUTPUT_SEPARATOR
    alignment: str = config.DEFAULT_ALIGNMENT
    keep_blank: bool = False
    columns_titles: ColumnsTitles | None = None
    columns_hide: ColumnsHide = field(default_factory=ColumnsHide)
    strict: bool = False
    verbose: bool = False

    def __post_init__(self):
        if not self.separator:
            raise ConfigValidationError("[ERROR] The separator cannot be empty.")
        if not is_valid_alignment(self.alignment):
            raise ConfigValidationError(
                "[ERROR] The alignment can only contain the following characters: "
                + "".join(IDENTIFIERS)
            )

    @classmethod
    def from_namespace(cls, ns):
        return cls.from_kwargs(
            separator=ns.separator,
            output_separator=ns.output_separator,
            alignment=ns.alignment,
            keep_blank=bool(ns.keep_blank_lines),
            columns_titles=ns.columns_titles,
            columns_hide=ns.columns_hide,
            strict=bool(getattr(ns, "strict", False)),
            verbose=bool(getattr(ns, "verbose", False)),
        )

    @classmethod
    def from_kwargs(
        cls,
        *,
        separator=config.DEFAULT_SEPARATOR,
        output_separator=config.DEFAULT_OUTPUT_SEPARATOR,
        alignment=config.DEFAULT_ALIGNMENT,
        keep_blank=False,
        columns_titles=None,
        columns_hide=None,
        strict=False,
        verbose=False,
    ):
        """Create a TableConfig from raw user-facing strings (programmatic API)."""
        return cls(
            separator=separator,
            output_separator=output_separator,
            alignment=alignment,
            keep_blank=keep_blank,
            columns_titles=ColumnsTitles.from_value(columns_titles, separator),
            columns_hide=ColumnsHide.from_value(columns_hide),
            strict=strict,
            verbose=verbose or config.debug_enabled(),
        )
