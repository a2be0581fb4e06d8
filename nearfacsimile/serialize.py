"""Saving comparison results as CSV or JSON."""

from __future__ import annotations

import csv
import json
import logging
import math
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass
from pathlib import Path

from nearfacsimile.comparison import Comparison
from nearfacsimile.options import Options

log = logging.getLogger(__name__)

CSV_HEADER = ("% similar", "File 1", "File 2")


@dataclass(frozen=True)
class OutputComparison:
    """One comparison as written to the output files."""

    pct_similar: float
    file1: str
    file2: str

    @classmethod
    def from_comparison(cls, comparison: Comparison, root: Path | str) -> OutputComparison:
        """Build a record with rounded percentage and paths relative to the root."""
        return cls(
            pct_similar=comparison.similarity_pct.rounded(),
            file1=stripped_path(comparison.path1, root),
            file2=stripped_path(comparison.path2, root),
        )


def stripped_path(path: Path | str, root: Path | str) -> str:
    """Show the path without the leading root directory.

    Raises ValueError if the path is not inside the root.
    """
    relative = str(Path(path).relative_to(Path(root)))
    return "" if relative == "." else relative


def _sort_key(comparison: Comparison) -> int:
    return -math.floor(comparison.similarity_pct.value * 10.0 + 0.5)


def write_csv(records: Sequence[OutputComparison], path: Path | str) -> None:
    """Write the records as a CSV table with a header row."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(
            (f"{record.pct_similar:.1f}", record.file1, record.file2)
            for record in records
        )


def write_json(records: Sequence[OutputComparison], path: Path | str) -> None:
    """Write the records as a pretty-printed JSON array."""
    with open(path, "w", encoding="utf-8") as handle:
        json.dump([asdict(record) for record in records], handle, indent=2, ensure_ascii=False)


def serialize(comparisons: Iterable[Comparison], options: Options) -> list[OutputComparison]:
    """Save the results, most similar first, to the configured CSV and JSON files."""
    log.debug("Saving the comparison results…")
    records = [
        OutputComparison.from_comparison(comparison, options.path)
        for comparison in sorted(comparisons, key=_sort_key)
    ]
    if options.csv is not None:
        write_csv(records, options.csv)
    if options.json is not None:
        write_json(records, options.json)
    return records