"""Command-line interface."""

from __future__ import annotations

import argparse
import logging
import re
import sys
from collections.abc import Sequence
from pathlib import Path

from nearfacsimile.app import RunError, run
from nearfacsimile.logsetup import LOGGER_NAME, init_logging
from nearfacsimile.options import Method, Options

_VERSION = "1.0.9"

# Pairs of options that cannot be given together.
_CONFLICTS = (
    ("ignore_file", "require_file"),
    ("ignore_ext", "require_ext"),
    ("require_file", "ignore_ext"),
)


def _regex(text: str) -> re.Pattern[str]:
    try:
        return re.compile(text)
    except re.error as error:
        raise argparse.ArgumentTypeError(f"invalid regular expression: {error}") from error


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="near-facsimile",
        description="Find similar or identical text files in a directory",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "-p", "--path", type=Path, metavar="DIR", default=Path("."),
        help="Path to the root documentation directory",
    )
    parser.add_argument(
        "-t", "--threshold", type=float, metavar="DECIMAL", default=85.0,
        help="The similarity percentage above which to report files",
    )
    parser.add_argument(
        "-f", "--fast", action="count", default=0,
        help="Use a faster but less precise comparison method",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Display status and debugging information",
    )
    parser.add_argument("-c", "--csv", type=Path, metavar="FILE", help="Save the results as a CSV file")
    parser.add_argument("-j", "--json", type=Path, metavar="FILE", help="Save the results as a JSON file")
    parser.add_argument(
        "--ignore-file", action="append", default=[], metavar="NAME",
        help="Ignore this file name in the search and comparison",
    )
    parser.add_argument(
        "--ignore-ext", action="append", default=[], metavar="EXTENSION",
        help="Ignore this file extension in the search and comparison",
    )
    parser.add_argument(
        "--require-file", action="append", default=[], metavar="NAME",
        help="Look for this file name in the search and comparison",
    )
    parser.add_argument(
        "--require-ext", action="append", default=[], metavar="EXTENSION",
        help="Look for this file extension in the search and comparison",
    )
    parser.add_argument(
        "--skip-lines", action="append", default=[], type=_regex, metavar="REGEX",
        help="Skip all lines that match this regular expression when comparing files",
    )
    parser.add_argument(
        "-P", "--progress", action="store_true",
        help="Display detailed progress information",
    )
    return parser


def parse_options(argv: Sequence[str] | None = None) -> Options:
    """Parse the command line into options, with the threshold as a fraction."""
    parser = build_parser()
    args = parser.parse_args(argv)
    for first, second in _CONFLICTS:
        if getattr(args, first) and getattr(args, second):
            parser.error(
                f"--{first.replace('_', '-')} cannot be used with --{second.replace('_', '-')}"
            )
    return Options(
        path=args.path,
        threshold=args.threshold / 100.0,
        method=Method.from_count(args.fast),
        verbose=args.verbose,
        csv=args.csv,
        json=args.json,
        ignore_file=args.ignore_file,
        ignore_ext=args.ignore_ext,
        require_file=args.require_file,
        require_ext=args.require_ext,
        skip_lines=args.skip_lines,
        progress=args.progress,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return its exit status."""
    options = parse_options(argv)
    init_logging(options.verbose)
    try:
        run(options)
    except (RunError, OSError, ValueError) as error:
        logging.getLogger(LOGGER_NAME).debug("Run failed", exc_info=True)
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())