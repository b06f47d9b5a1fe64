"""Glyph, bar, axis and combined chart commands."""

from __future__ import annotations

from heapspark.cli import SparkContext
from heapspark.display.axis import render_digit_axis
from heapspark.display.charts import render_bars, render_glyphs
from heapspark.display.json_out import print_json
from heapspark.display.tables import display_axis, display_bars, display_chart, display_glyphs


def run_glyphs(ctx: SparkContext, samples: list[int]) -> None:
    result = render_glyphs(samples)

    if ctx.fmt:
        from heapspark.frames import export_tables, glyph_frames
        export_tables(glyph_frames(result, samples), ctx.fmt)
    elif ctx.json_output:
        print_json(result)
    else:
        display_glyphs(result, samples)


def run_bars(ctx: SparkContext, samples: list[int]) -> None:
    result = render_bars(samples, ctx.fill)

    if ctx.fmt:
        from heapspark.frames import bar_frames, export_tables
        export_tables(bar_frames(result, samples), ctx.fmt)
    elif ctx.json_output:
        print_json(result)
    else:
        display_bars(result)


def run_axis(ctx: SparkContext, samples: list[int]) -> None:
    rows = render_digit_axis(samples, ctx.tick, align=ctx.align)

    if ctx.fmt:
        from heapspark.frames import axis_frames, export_tables
        export_tables(axis_frames(rows), ctx.fmt)
    elif ctx.json_output:
        print_json({"tick": ctx.tick, "rows": rows})
    else:
        display_axis(rows, ctx.tick)


def run_chart(ctx: SparkContext, samples: list[int]) -> None:
    """Bars and the digit axis for the same samples."""
    result = render_bars(samples, ctx.fill)
    axis_rows = render_digit_axis(samples, ctx.tick)

    if ctx.fmt:
        from heapspark.frames import axis_frames, bar_frames, export_tables
        tables = bar_frames(result, samples)
        tables.update({f"axis_{k}": t for k, t in axis_frames(axis_rows).items()})
        export_tables(tables, ctx.fmt)
    elif ctx.json_output:
        print_json({"name": ctx.name, "bars": result, "axis": axis_rows})
    else:
        display_chart(ctx.name, result, axis_rows, samples)
