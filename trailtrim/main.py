"""
Main module for trailtrim.

Contains the main function and argument parsing for the trailtrim command-line interface.
"""

import argparse
import sys

from argparse_formatter import FlexiFormatter

from ._version import __version__
from .core import (
    DEFAULT_BASE_DIRECTORY,
    DEFAULT_PATTERN,
    TrailtrimError,
    resolve_base_directory,
    validate_pattern,
)
from .report import write_summary
from .scanner import strip_tree

_RED = "\033[91m"
_RESET = "\033[0m"


def _print_error(message: str) -> None:
    """Write an error message to stderr, coloured when stderr is a terminal."""
    if sys.stderr.isatty():
        print(f"{_RED}ERROR:{_RESET} {message}", file=sys.stderr)
    else:
        print(f"ERROR: {message}", file=sys.stderr)


def create_parser():
    """Create and return the argument parser."""

    parser = argparse.ArgumentParser(
        prog="trailtrim",
        description=(
            "trailtrim: strip trailing spaces and tabs from every line of the "
            "matching files under a directory, rewriting only files that change "
            "and printing their paths relative to that directory"
        ),
        formatter_class=FlexiFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=DEFAULT_BASE_DIRECTORY,
        help=f"Base directory to scan (default: {DEFAULT_BASE_DIRECTORY})",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        action="store",
        default=DEFAULT_PATTERN,
        help=f"Glob matched against file names (default: {DEFAULT_PATTERN})",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help=(
            "Report the files that would change without rewriting them; "
            "exit with status 1 if any would change"
        ),
    )
    parser.add_argument(
        "--summary",
        action="store",
        default=None,
        metavar="CSV",
        help="Write a CSV summary of the changed files to this path",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print the full traceback when a file operation fails",
    )

    return parser


def main(sysargs=None):
    """Entry point for the trailtrim CLI."""
    if sysargs is None:
        sysargs = sys.argv[1:]

    parser = create_parser()

    try:
        args = parser.parse_args(sysargs)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 0
        return code

    return _run(args)


def _run(args):
    try:
        base = resolve_base_directory(args.directory)
        pattern = validate_pattern(args.pattern)
        results = strip_tree(base, pattern, write=not args.check)
        if args.summary:
            write_summary(results, args.summary)
    except TrailtrimError as e:
        _print_error(str(e))
        return 1
    except OSError as e:
        _print_error(str(e))
        if args.debug:
            import traceback

            traceback.print_exc()
        return 1

    if args.check and results:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
