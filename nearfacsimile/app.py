"""The top-level search for similar files."""

from __future__ import annotations

from itertools import combinations

from nearfacsimile.comparison import Comparison, comparisons
from nearfacsimile.load_files import load_files
from nearfacsimile.options import Options
from nearfacsimile.serialize import serialize


class RunError(Exception):
    """The settings or the directory do not allow a comparison."""


def run(options: Options) -> list[Comparison]:
    """Load the files, compare every pair once, and save the results if asked."""
    if options.threshold < 0.0 or options.threshold > 1.0:
        raise RunError("The similarity threshold must be between 0.0 and 100.0.")

    files = load_files(options)
    if len(files) < 2:
        raise RunError(
            "Too few files that match the settings to compare in this directory."
        )

    results = comparisons(combinations(files, 2), options)

    if options.csv is not None or options.json is not None:
        serialize(results, options)

    return results