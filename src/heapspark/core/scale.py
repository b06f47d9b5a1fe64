"""Bucket mapping — integer min/max scaling onto a fixed number of levels.

Levels are computed with shift-and-divide integer arithmetic:

    step  = max(1, ((max - min) << shift) // (levels - 1))
    level = ((value - min) << shift) // step

The result always lands in [0, levels - 1]. When every sample is equal the
step floors to 1 and every sample maps to level 0.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from heapspark.core.errors import EmptyInputError, InvalidLevelCountError


def sample_range(samples: Sequence[int]) -> tuple[int, int]:
    """Return (min, max) over a non-empty sample sequence."""
    if not samples:
        raise EmptyInputError("at least one sample is required")
    return min(samples), max(samples)


def bucket_step(lo: int, hi: int, levels: int, shift: int) -> int:
    if levels < 2:
        raise InvalidLevelCountError(f"levels must be >= 2, got {levels}")
    step = ((hi - lo) << shift) // (levels - 1)
    return max(1, step)


def bucket_level(value: int, lo: int, step: int, shift: int) -> int:
    return ((value - lo) << shift) // step


@dataclass(frozen=True)
class Scale:
    min_value: int
    max_value: int
    levels: int
    shift: int
    step: int

    def level(self, value: int) -> int:
        """Zero-based level of a sample inside [min_value, max_value]."""
        return bucket_level(value, self.min_value, self.step, self.shift)


def build_scale(samples: Sequence[int], levels: int, shift: int) -> Scale:
    """Compute the shared scale for one render call."""
    lo, hi = sample_range(samples)
    return Scale(lo, hi, levels, shift, bucket_step(lo, hi, levels, shift))
