"""Vertical digit axis — each sample's decimal digits stacked in its own column."""

from __future__ import annotations

from collections.abc import Sequence

from heapspark.core.errors import InvalidTickError, NegativeSampleError

ALIGNMENTS = ("bottom", "top")


def render_digit_axis(samples: Sequence[int], tick: int = 1, *,
                      align: str = "bottom") -> tuple[str, ...]:
    """Write samples vertically, one column per sample, top row first.

    The grid is as tall as the longest number. With ``align="bottom"`` shorter
    numbers are blank-padded above so their units digits share the last row;
    ``align="top"`` starts every number on the first row instead.

    With ``tick > 1`` only every ``tick``-th character position (1-based,
    counted per row) is kept and the rest are blanked.
    """
    if tick < 1:
        raise InvalidTickError(f"tick must be >= 1, got {tick}")
    if align not in ALIGNMENTS:
        raise ValueError(f"align must be one of {ALIGNMENTS}, got {align!r}")
    for v in samples:
        if v < 0:
            raise NegativeSampleError(f"digit axis needs non-negative samples, got {v}")

    digits = [str(v) for v in samples]
    height = max((len(d) for d in digits), default=0)

    grid = [[" "] * len(digits) for _ in range(height)]
    for col, number in enumerate(digits):
        offset = height - len(number) if align == "bottom" else 0
        for i, ch in enumerate(number):
            grid[offset + i][col] = ch

    if tick > 1:
        for cells in grid:
            for pos in range(len(cells)):
                if (pos + 1) % tick != 0:
                    cells[pos] = " "

    return tuple("".join(cells) for cells in grid)
