"""
xcol — align delimiter-separated text into columns
"""

import argparse
import sys

from xcol import config
from xcol._utils import log_event
from xcol.alignment import IDENTIFIERS, is_valid_alignment
from xcol.exceptions import CliError, ConfigValidationError, UnreadableFileError
from xcol.formatters import tabulate
from xcol.models import TableConfig

ALIGNMENT_EXAMPLES = """\
Examples:
  All columns right:    xcol --alignment r
  Left, center, right:  xcol --alignment lcr"""

HELP_TEXT = f"""\
Usage: xcol [options] [file]

Align delimiter-separated text into columns. Reads stdin when no file is given.

Options:
  -s, --separator <str>         Column delimiter in the input (default: space)
  -o, --output-separator <str>  Delimiter placed between output columns
                                (default: space)
  -a, --alignment <spec>        Per-column alignment, one character per column;
                                the last one repeats (default: l)
                                  l, L, <   left
                                  r, R, >   right
                                  c, C, ^   center
  -L, --keep-blank-lines        Preserve whitespace-only lines in the input
  -N, --columns-titles <list>   Comma separated column titles, printed as the
                                first row
  -H, --columns-hide <list>     Comma separated 1-based columns to hide;
                                '-' hides every column without a title
  --strict                      Fail when rows differ in column count
  -v, --verbose                 Print diagnostics to stderr
  --version                     Show version number
  -h, --help                    Show this help

{ALIGNMENT_EXAMPLES}
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """Parser that raises ConfigValidationError instead of printing usage."""

    def error(self, message):
        raise ConfigValidationError(f"[ERROR] {message}")


def _alignment_value(value):
    if not is_valid_alignment(value):
        raise argparse.ArgumentTypeError(
            "the alignment can only contain the following characters: "
            f"{''.join(IDENTIFIERS)}\n\n{ALIGNMENT_EXAMPLES}"
        )
    return value


def build_parser():
    parser = _ArgumentParser(
        prog="xcol",
        description="Align delimiter-separated text into columns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    parser.add_argument("--version", action="store_true", dest="show_version")
    parser.add_argument("--separator", "-s", default=config.DEFAULT_SEPARATOR)
    parser.add_argument(
        "--output-separator",
        "-o",
        default=config.DEFAULT_OUTPUT_SEPARATOR,
        dest="output_separator",
    )
    parser.add_argument(
        "--alignment", "-a", type=_alignment_value, default=config.DEFAULT_ALIGNMENT
    )
    parser.add_argument(
        "--keep-blank-lines", "-L", action="store_true", dest="keep_blank_lines"
    )
    parser.add_argument("--columns-titles", "-N", dest="columns_titles")
    parser.add_argument("--columns-hide", "-H", dest="columns_hide")
    parser.add_argument("--strict", action="store_true")
    parser.add_argument("--verbose", "-v", action="store_true")
    parser.add_argument("file", nargs="?")
    return parser


# ---------------------------------------------------------------------------
# Input / output
# ---------------------------------------------------------------------------


def read_input(path=None, verbose=False):
    """Read the whole input: the file at *path*, or stdin when *path* is None."""
    if path is None:
        if hasattr(sys.stdin, "buffer"):
            text = sys.stdin.buffer.read().decode("utf-8", errors="replace")
        else:
            text = sys.stdin.read()
        source = "stdin"
    else:
        try:
            with open(path, encoding="utf-8", errors="replace") as f:
                text = f.read()
        except OSError as e:
            raise UnreadableFileError(path) from e
        source = path
    log_event(verbose, "input_read", source=source, chars=len(text))
    return text


def output_suffix(term=None):
    """Color reset, xterm mouse-tracking reset, then the final newline."""
    parts = [config.COLOR_RESET]
    if config.term_is_xterm(term):
        parts.extend(config.XTERM_MOUSE_DISABLE)
    parts.append("\n")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def run(argv):
    """Parse *argv*, tabulate the input and return the text to print."""
    ns = build_parser().parse_args(argv)

    if ns.show_help:
        print(HELP_TEXT)
        sys.exit(0)

    if ns.show_version:
        print(f"xcol {config.VERSION}")
        sys.exit(0)

    table_config = TableConfig.from_namespace(ns)
    text = read_input(ns.file, verbose=table_config.verbose)
    return tabulate(text, table_config)


def main(argv=None):
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8", errors="replace")

    if argv is None:
        argv = sys.argv[1:]

    try:
        rendered = run(argv)
    except CliError as e:
        print(str(e), file=sys.stderr)
        sys.exit(e.exit_code)

    sys.stdout.write(rendered + output_suffix())
    sys.stdout.flush()


if __name__ == "__main__":
    main()
