"""Similarity percentages and their display rounding."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _round_half_away_from_zero(value: float) -> float:
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


@dataclass(frozen=True)
class Percentage:
    """A similarity expressed as a percentage between 0 and 100."""

    value: float

    @classmethod
    def from_fraction(cls, fraction: float) -> Percentage:
        """Build a percentage from a fraction between 0.0 and 1.0."""
        return cls(fraction * 100.0)

    def rounded(self) -> float:
        """Round to one decimal place, keeping 100.0 for identical files only.

        Anything strictly between 99.9 and 100.0 is reported as 99.9, so that
        a nearly identical pair is never displayed as an exact duplicate.
        """
        upscaled = self.value * 10.0
        if 999.0 < upscaled < 1000.0:
            return 99.9
        return _round_half_away_from_zero(upscaled) / 10.0