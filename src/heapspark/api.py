"""Public Python API — returns ibis tables for programmatic use.

Usage:
    import heapspark.api as hs

    tables = hs.bars([10, 3, 4, 5, 6, 90, 389, 28, 3])
    tables["samples"].to_pandas()
    tables["rows"].to_pandas()

    # All: hs.glyphs(), hs.bars(), hs.axis()

The plain renderers live in heapspark.display.charts and
heapspark.display.axis when tables are not wanted.
"""

from __future__ import annotations

from collections.abc import Iterable

import ibis

from heapspark.display.axis import render_digit_axis
from heapspark.display.charts import render_bars, render_glyphs
from heapspark.frames import axis_frames, bar_frames, glyph_frames


def glyphs(samples: Iterable[int]) -> dict[str, ibis.Table]:
    """One-row block sparkline: summary and per-sample levels."""
    samples = list(samples)
    return glyph_frames(render_glyphs(samples), samples)


def bars(samples: Iterable[int], fill: str = "|") -> dict[str, ibis.Table]:
    """Bar chart: summary, per-sample heights and rendered rows."""
    samples = list(samples)
    return bar_frames(render_bars(samples, fill), samples)


def axis(samples: Iterable[int], tick: int = 1, *, align: str = "bottom") -> dict[str, ibis.Table]:
    """Vertical digit axis rows."""
    return axis_frames(render_digit_axis(list(samples), tick, align=align))
