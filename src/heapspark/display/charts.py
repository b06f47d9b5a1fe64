"""Block-glyph sparklines and multi-row bar charts."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from heapspark.core.models import BarResult, GlyphResult
from heapspark.core.scale import build_scale

log = logging.getLogger(__name__)

SPARK_CHARS = "▁▂▃▄▅▆▇█"
GLYPH_SHIFT = 8  # x256

BAR_HEIGHTS = (1, 2, 3, 4)
BAR_SHIFT = 4  # x16
BAR_FILL = "|"


def render_glyphs(samples: Sequence[int]) -> GlyphResult:
    """Render one glyph per sample, lightest block for the minimum."""
    scale = build_scale(samples, len(SPARK_CHARS), GLYPH_SHIFT)
    levels = tuple(scale.level(v) for v in samples)
    line = "".join(SPARK_CHARS[i] for i in levels)
    log.debug("glyphs min=%d max=%d step=%d", scale.min_value, scale.max_value, scale.step)
    return GlyphResult(scale.min_value, scale.max_value, line, levels)


def render_bars(samples: Sequence[int], fill: str = BAR_FILL) -> BarResult:
    """Render a bar chart of heights 1..4, rows returned top first.

    Every column is at least one cell tall, so the last row (the baseline)
    is filled across the whole width.
    """
    if len(fill) != 1:
        raise ValueError(f"fill must be a single character, got {fill!r}")

    scale = build_scale(samples, len(BAR_HEIGHTS), BAR_SHIFT)
    heights = tuple(BAR_HEIGHTS[scale.level(v)] for v in samples)
    max_height = max(heights)

    # grid[0] is the baseline while filling
    grid = [[" "] * len(heights) for _ in range(max_height)]
    for col, height in enumerate(heights):
        for row in range(height):
            grid[row][col] = fill

    rows = tuple("".join(cells) for cells in reversed(grid))
    log.debug("bars min=%d max=%d rows=%d", scale.min_value, scale.max_value, max_height)
    return BarResult(scale.min_value, scale.max_value, rows, heights, fill)


def joined_rows(rows: Sequence[str], line_separator: str = os.linesep) -> str:
    """Join rendered rows without a trailing separator."""
    return line_separator.join(rows)
