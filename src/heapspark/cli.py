"""CLI entry point — click group with global options and subcommand routing."""

from __future__ import annotations

import logging
import re
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from heapspark.core.errors import RenderError

console = Console()

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Let negative samples such as -5 through as arguments
SAMPLE_SETTINGS = {**CONTEXT_SETTINGS, "ignore_unknown_options": True}

DEFAULT_TICK = 4
DEFAULT_INTERVAL_MS = 500


class SparkContext:
    """Shared context passed to all commands."""

    def __init__(self, json_output: bool, fmt: str | None, verbose: bool,
                 tick: int = 1, fill: str = "|", align: str = "bottom",
                 name: str = "samples", interval: float = DEFAULT_INTERVAL_MS / 1000):
        self.json_output = json_output
        self.fmt = fmt
        self.verbose = verbose
        self.tick = tick
        self.fill = fill
        self.align = align
        self.name = name
        self.interval = interval


class SparkGroup(click.Group):
    """Custom group that allows `heapspark 1 2 3` as well as `heapspark <cmd> ...`."""

    def parse_args(self, ctx, args):
        # A leading number (negative or comma-separated included) means
        # the default chart command
        if args and args[0].lstrip("-")[:1].isdigit():
            args = ["chart"] + args
        return super().parse_args(ctx, args)


def _samples_argument(f):
    """Common SAMPLES argument decorator."""
    return click.argument("samples", nargs=-1)(f)


def _single_char(ctx, param, value):
    if len(value) != 1:
        raise click.BadParameter("must be a single character")
    return value


def _fill_option(f):
    """Common --fill option decorator."""
    return click.option("--fill", default="|", show_default=True, callback=_single_char,
                        help="Bar fill character")(f)


def _global_options(f):
    """Common global options decorator."""
    f = click.option("--json", "json_output", is_flag=True, help="Output as JSON")(f)
    f = click.option("--format", "fmt", type=click.Choice(["csv", "parquet"]),
                     default=None, help="Export tables instead of drawing")(f)
    f = click.option("--verbose", "-v", is_flag=True, help="Verbose output")(f)
    return f


def _setup_logging(verbose: bool) -> None:
    root = logging.getLogger("heapspark")
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def parse_samples(tokens: tuple[str, ...]) -> list[int]:
    """Parse whitespace/comma separated integers, reading stdin for none or '-'."""
    if not tokens or tokens == ("-",):
        tokens = (sys.stdin.read(),)

    samples: list[int] = []
    for token in tokens:
        for part in re.split(r"[,\s]+", token.strip()):
            if not part:
                continue
            try:
                samples.append(int(part))
            except ValueError:
                raise click.BadParameter(f"not an integer: {part!r}", param_hint="SAMPLES")
    return samples


def _make_context(json_output, fmt, verbose, **options) -> SparkContext:
    _setup_logging(verbose)
    return SparkContext(json_output, fmt, verbose, **options)


def _run(runner, ctx: SparkContext, *args) -> None:
    try:
        runner(ctx, *args)
    except RenderError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)


@click.group(cls=SparkGroup, context_settings=CONTEXT_SETTINGS)
def main():
    """Sparklines, bar charts and digit axes for integer samples.

    \b
    Usage:
      heapspark 10 3 4 5 6 90 389           Bars over a digit axis (default)
      heapspark glyphs 10 3 4 5             One-row block sparkline
      heapspark bars 10 3 4 5               Multi-row bar chart
      heapspark axis --tick 4 101 250 47    Vertical digit axis
      heapspark profile script.py           Chart a script's memory use
    """
    pass


@main.command("chart", context_settings=SAMPLE_SETTINGS)
@_samples_argument
@click.option("--tick", "-t", default=DEFAULT_TICK, show_default=True, type=click.IntRange(min=1),
              help="Keep every Nth axis position")
@_fill_option
@click.option("--name", "-n", default="samples", show_default=True, help="Chart title")
@_global_options
def chart_cmd(samples, tick, fill, name, json_output, fmt, verbose):
    """Bar chart over a digit axis (default)."""
    ctx = _make_context(json_output, fmt, verbose, tick=tick, fill=fill, name=name)
    from heapspark.commands.render import run_chart
    _run(run_chart, ctx, parse_samples(samples))


@main.command("glyphs", context_settings=SAMPLE_SETTINGS)
@_samples_argument
@_global_options
def glyphs_cmd(samples, json_output, fmt, verbose):
    """One block glyph per sample."""
    ctx = _make_context(json_output, fmt, verbose)
    from heapspark.commands.render import run_glyphs
    _run(run_glyphs, ctx, parse_samples(samples))


@main.command("bars", context_settings=SAMPLE_SETTINGS)
@_samples_argument
@_fill_option
@_global_options
def bars_cmd(samples, fill, json_output, fmt, verbose):
    """Bars of height 1-4 per sample."""
    ctx = _make_context(json_output, fmt, verbose, fill=fill)
    from heapspark.commands.render import run_bars
    _run(run_bars, ctx, parse_samples(samples))


@main.command("axis", context_settings=SAMPLE_SETTINGS)
@_samples_argument
@click.option("--tick", "-t", default=1, show_default=True, type=click.IntRange(min=1),
              help="Keep every Nth position")
@click.option("--align", type=click.Choice(["bottom", "top"]), default="bottom",
              show_default=True, help="Where short numbers sit in the grid")
@_global_options
def axis_cmd(samples, tick, align, json_output, fmt, verbose):
    """Samples written vertically, one digit per row."""
    ctx = _make_context(json_output, fmt, verbose, tick=tick, align=align)
    from heapspark.commands.render import run_axis
    _run(run_axis, ctx, parse_samples(samples))


@main.command("profile", context_settings={**CONTEXT_SETTINGS, "ignore_unknown_options": True,
                                           "allow_interspersed_args": False})
@click.argument("script", type=click.Path(exists=True, dir_okay=False))
@click.argument("script_args", nargs=-1, type=click.UNPROCESSED)
@click.option("--interval", "-i", default=DEFAULT_INTERVAL_MS, show_default=True,
              type=click.IntRange(min=1), help="Polling interval in milliseconds")
@click.option("--tick", "-t", default=DEFAULT_TICK, show_default=True, type=click.IntRange(min=1),
              help="Keep every Nth axis position")
@_global_options
def profile_cmd(script, script_args, interval, tick, json_output, fmt, verbose):
    """Run a Python script and chart its memory use."""
    ctx = _make_context(json_output, fmt, verbose, tick=tick, interval=interval / 1000)
    from heapspark.commands.monitor import run_profile
    _run(run_profile, ctx, script, script_args)
