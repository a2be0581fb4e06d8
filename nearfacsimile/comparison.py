"""Pairwise comparison of loaded files against a similarity threshold."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from tqdm import tqdm

from nearfacsimile.load_files import File
from nearfacsimile.metrics import jaro, normalized_levenshtein, trigram_similarity
from nearfacsimile.options import Method, Options
from nearfacsimile.percentage import Percentage

log = logging.getLogger(__name__)

_RED = "\x1b[31m"
_YELLOW = "\x1b[33m"
_RESET = "\x1b[0m"

_PROGRESS_FORMAT = (
    "Progress {percentage:3.0f}%    Comparison# {n_fmt:>8}/{total_fmt:8}    [{elapsed}]"
)


@dataclass(frozen=True)
class Comparison:
    """Two files whose similarity exceeded the threshold."""

    path1: Path
    path2: Path
    similarity_pct: Percentage


def _paint(text: str, color: str) -> str:
    if os.environ.get("NO_COLOR"):
        return text
    isatty = getattr(sys.stdout, "isatty", None)
    if isatty and isatty():
        return f"{color}{text}{_RESET}"
    return text


def _similarity(file1: File, file2: File, trigram: float, method: Method) -> float:
    if method is Method.LEVENSHTEIN:
        return normalized_levenshtein(file1.content, file2.content)
    if method is Method.JARO:
        return jaro(file1.content, file2.content)
    # The trigram value has already been computed for the pre-selection.
    return trigram


def compare_files(file1: File, file2: File, options: Options) -> Comparison | None:
    """Compare two files and report them if they are more similar than the threshold.

    Returns None when the pair is too different.
    """
    trigram = trigram_similarity(file1.content, file2.content)
    # The trigram is cheap; require at least half the threshold before
    # running the expensive metric.
    if trigram < options.threshold / 2.0:
        log.debug(
            "Trigram similarity below the threshold: %.3f\n\t→%s\n\t→%s",
            trigram,
            file1.path,
            file2.path,
        )
        return None

    similarity = _similarity(file1, file2, trigram, options.method)
    if not similarity > options.threshold:
        log.debug("Similarity below the threshold:%.3f", similarity)
        return None

    percent = Percentage.from_fraction(similarity)
    listing = f"  ‣ {file1.path}\n  ‣ {file2.path}"
    if similarity >= 1.0:
        message = _paint(
            f"These two files are identical ({percent.rounded():.1f}%):", _RED
        )
    else:
        message = _paint(
            f"These two files are similar ({percent.rounded():.1f}%):", _YELLOW
        )
    log.info("%s\n%s", message, listing)
    log.debug("Similarity above the threshold:\n\tDistance: %.3f", similarity)

    return Comparison(file1.path, file2.path, percent)


def _progress(pairs: Iterable[tuple[File, File]]) -> Iterator[tuple[File, File]]:
    items = list(pairs)
    with tqdm(items, total=len(items), bar_format=_PROGRESS_FORMAT) as bar:
        yield from bar


def comparisons(pairs: Iterable[tuple[File, File]], options: Options) -> list[Comparison]:
    """Compare every pair and return those above the threshold."""
    log.debug("Comparing files…")
    source = _progress(pairs) if options.progress else pairs
    return [
        result
        for file1, file2 in source
        if (result := compare_files(file1, file2, options)) is not None
    ]