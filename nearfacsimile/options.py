"""Settings that control how files are selected and compared."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

DEFAULT_THRESHOLD = 0.85


class Method(Enum):
    """The similarity metric used for the final comparison."""

    LEVENSHTEIN = "levenshtein"
    JARO = "jaro"
    TRIGRAM = "trigram"

    @classmethod
    def from_count(cls, count: int) -> Method:
        """Pick the metric from how many times the "fast" flag was given."""
        if count < 0:
            raise ValueError(f"the fast flag count cannot be negative: {count}")
        if count == 0:
            return cls.LEVENSHTEIN
        if count == 1:
            return cls.JARO
        return cls.TRIGRAM


@dataclass
class Options:
    """Run settings. The threshold is a fraction between 0.0 and 1.0."""

    path: Path = field(default_factory=lambda: Path("."))
    threshold: float = DEFAULT_THRESHOLD
    method: Method = Method.LEVENSHTEIN
    verbose: int = 0
    csv: Path | None = None
    json: Path | None = None
    ignore_file: list[str] = field(default_factory=list)
    ignore_ext: list[str] = field(default_factory=list)
    require_file: list[str] = field(default_factory=list)
    require_ext: list[str] = field(default_factory=list)
    skip_lines: list[re.Pattern[str]] = field(default_factory=list)
    progress: bool = False