"""Rich console formatters per command, plus the log sink for monitored series."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from heapspark.core.models import BarResult, GlyphResult
from heapspark.display.axis import render_digit_axis
from heapspark.display.charts import render_bars

console = Console()
log = logging.getLogger(__name__)


def _min_max(min_value: int, max_value: int) -> str:
    return f"min: {min_value}  max: {max_value}"


def display_glyphs(result: GlyphResult, samples: Sequence[int]) -> None:
    console.print()
    console.print(Panel(
        Text(result.line),
        title=f"[bold]{len(samples)}[/] samples",
        subtitle=_min_max(result.min_value, result.max_value),
    ))
    console.print()


def display_bars(result: BarResult) -> None:
    console.print()
    console.print(Panel(
        Text("\n".join(result.rows)),
        subtitle=_min_max(result.min_value, result.max_value),
    ))
    console.print()


def display_axis(rows: Sequence[str], tick: int) -> None:
    console.print()
    if not rows:
        console.print("[yellow]No samples to draw.[/]")
        return
    console.print(Panel(Text("\n".join(rows)), subtitle=f"tick: {tick}"))
    console.print()


def display_chart(name: str, result: BarResult, axis_rows: Sequence[str],
                  samples: Sequence[int]) -> None:
    """Bars over the digit axis, with a small summary table underneath."""
    body = Text("\n".join(result.rows))
    body.append("\n")
    body.append("\n".join(axis_rows), style="dim")

    console.print()
    console.print(Panel(
        body,
        title=f"[bold]{name}[/]",
        subtitle=_min_max(result.min_value, result.max_value),
    ))

    table = Table(show_header=False, border_style="dim")
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")
    table.add_row("Samples", str(len(samples)))
    table.add_row("First", str(samples[0]))
    table.add_row("Last", str(samples[-1]))
    table.add_row("Rows", str(len(result.rows)))
    console.print(table)
    console.print()


def log_series(name: str, unit: str, samples: Sequence[int], tick: int = 4) -> None:
    """Log a bar chart and its digit axis line by line.

    Every chart line is indented to the width of the ``"<name> in <unit>"``
    header so the bars line up underneath it.
    """
    if not samples:
        log.warning("%s: no samples recorded", name)
        return

    graph = render_bars(samples)
    header = f"{name} in {unit}"
    pad = " " * len(header)

    log.info("%s:", header)
    log.info("(min:%d/max:%d)", graph.min_value, graph.max_value)
    for line in graph.rows:
        log.info("%s:%s", pad, line)
    for line in render_digit_axis(samples, tick):
        log.info("%s:%s", pad, line)
    log.info("")
