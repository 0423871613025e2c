"""
colkit command line: read lines from a file and/or stdin, run the column
pipeline, write the result to stdout.
"""
from __future__ import annotations

import argparse
import signal
import sys
import traceback

from . import __version__
from .config import Configuration
from .pipeline import format_lines
from .utils import io as UIO
from .utils import logging as ULOG


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a column number, got '{value}'")
    if n < 1:
        raise argparse.ArgumentTypeError(f"column numbers are 1-based, got {n}")
    return n


def _non_negative_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a number, got '{value}'")
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="colkit",
        description=(
            "Format and shape unformatted text into columns.\n\n"
            "COLUMNS selects and orders output columns: 1-based numbers or\n"
            "ranges such as 1:3 (3:1 reverses). A header label starting with\n"
            "'-' right-aligns its column."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    ap.add_argument("columns", nargs="*", metavar="COLUMNS", help="Columns to output, e.g. 4 1 7 or 1:3.")

    g_in = ap.add_argument_group("Input")
    g_in.add_argument("-f", "--file", help="Read input from FILE (piped stdin is appended).")
    g_in.add_argument("-s", "--sep", default=" ", help="Input separator (default: space). Supports escapes like '\\t'.")
    g_in.add_argument("-m", "--mb", action="store_true", help="Treat runs of separators as one delimiter.")
    g_in.add_argument("-H", "--header", help="Header line to use; all input lines become data.")
    g_in.add_argument("--nhl", action="store_true", help="No headline: the first line is data.")
    g_in.add_argument("--rh", action="store_true", help="Remove the first line that passes the filter (it is not read as header).")
    g_in.add_argument("--encoding", default="utf-8", help="Input encoding (default: utf-8).")

    g_tr = ap.add_argument_group("Transforms")
    g_tr.add_argument("-F", "--filter", help="Keep only lines matching REGEX.")
    g_tr.add_argument("-S", "--sortcol", type=_positive_int, help="Sort by output column N.")
    g_tr.add_argument("--desc", action="store_true", help="Sort descending.")
    g_tr.add_argument("-g", "--gcol", type=_positive_int, help="Group by output column N (repeated values blanked).")
    g_tr.add_argument("--gcolval", action="store_true", help="Keep repeated values when grouping.")

    g_tbl = ap.add_argument_group("Table layout")
    g_tbl.add_argument("-w", "--width", type=_non_negative_int, default=1, help="Padding between columns (default: 1).")
    g_tbl.add_argument("-C", "--colsep", default="|", help="Column separator glyph for --cs (default: '|').")
    g_tbl.add_argument("-p", "--pp", action="store_true", help="Pretty print: box-drawing border.")
    g_tbl.add_argument("--ts", action="store_true", help="Title separator below the header.")
    g_tbl.add_argument("--fs", action="store_true", help="Footer separator before the last row.")
    g_tbl.add_argument("--cs", action="store_true", help="Draw a separator between columns.")
    g_tbl.add_argument("-n", "--num", action="store_true", help="Add a row with the source column numbers.")
    g_tbl.add_argument("--nf", action="store_true", help="No format: do not pad columns.")
    g_tbl.add_argument("--nn", action="store_true", help="No numeric right-alignment.")

    g_out = ap.add_argument_group("Output format")
    fmt = g_out.add_mutually_exclusive_group()
    fmt.add_argument("--csv", action="store_true", help="Output CSV.")
    fmt.add_argument("--json", action="store_true", help="Output JSON.")
    fmt.add_argument("--html", action="store_true", help="Output an HTML table.")
    fmt.add_argument("--yaml", action="store_true", help="Output YAML.")
    g_out.add_argument("--jtc", action="store_true", help="JSON/YAML keyed by the first column.")

    g = ap.add_argument_group("Global Options")
    g.add_argument("-v", "--verify", action="store_true", help="Print the resolved configuration and exit.")
    g.add_argument("--debug", action="store_true", help="Verbose logging and tracebacks.")
    g.add_argument("--quiet", action="store_true", help="Only log errors.")
    g.add_argument("--version", action="version", version=__version__)
    return ap


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    try:
        signal.signal(signal.SIGPIPE, signal.SIG_DFL)
    except (AttributeError, ValueError):
        pass

    try:
        args = parser.parse_intermixed_args(argv)
    except SystemExit as e:
        return 0 if e.code == 0 else 2

    ULOG.configure(quiet=args.quiet, debug=args.debug)
    logger = ULOG.get_logger("colkit.core")

    try:
        config = Configuration.from_args(args)
        if args.verify:
            UIO.write_output(f"{config}\n")
            return 0
        lines = UIO.read_lines(args.file, encoding=args.encoding)
        UIO.write_output(format_lines(lines, config))
        return 0
    except ValueError as e:
        logger.error(str(e))
        if args.debug: traceback.print_exc()
        return 2
    except OSError as e:
        if isinstance(e, BrokenPipeError):
            try: sys.stdout.close()
            except OSError: pass
            return 0
        logger.error(str(e))
        if args.debug: traceback.print_exc()
        return 3
    except Exception as e:
        logger.error("An unexpected error occurred: %s", e)
        if args.debug: traceback.print_exc()
        return 4


if __name__ == "__main__":
    raise SystemExit(main())
