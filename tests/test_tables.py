"""Tests for the log sink and rich displays."""

from __future__ import annotations

import logging

import pytest

from heapspark.display import tables
from heapspark.display.axis import render_digit_axis
from heapspark.display.charts import render_bars, render_glyphs


@pytest.fixture
def info_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    caplog.set_level(logging.INFO, logger="heapspark")
    return caplog


def test_log_series_writes_header_bars_and_axis(info_logs: pytest.LogCaptureFixture) -> None:
    tables.log_series("Young Space", "mb", [1, 1, 3, 2, 3, 4, 2, 1, 4], tick=1)

    pad = " " * len("Young Space in mb")
    assert info_logs.messages == [
        "Young Space in mb:",
        "(min:1/max:4)",
        f"{pad}:     |  |",
        f"{pad}:  | ||  |",
        f"{pad}:  ||||| |",
        f"{pad}:|||||||||",
        f"{pad}:113234214",
        "",
    ]


def test_log_series_masks_axis_with_tick(info_logs: pytest.LogCaptureFixture) -> None:
    tables.log_series("Old Space", "mb", [101, 250, 47, 150, 6, 90, 389, 28, 300], tick=4)

    pad = " " * len("Old Space in mb")
    assert info_logs.messages[-4:] == [
        f"{pad}:   1     ",
        f"{pad}:   5   2 ",
        f"{pad}:   0   8 ",
        "",
    ]


def test_log_series_warns_on_empty_series(info_logs: pytest.LogCaptureFixture) -> None:
    tables.log_series("Perm Space", "mb", [])

    assert info_logs.messages == ["Perm Space: no samples recorded"]
    assert info_logs.records[0].levelno == logging.WARNING


def test_display_chart_prints_bars_and_axis(capsys: pytest.CaptureFixture[str]) -> None:
    samples = [101, 250, 47, 150, 6, 90, 389, 28, 300]
    tables.display_chart("heap", render_bars(samples), render_digit_axis(samples), samples)

    out = capsys.readouterr().out
    assert "heap" in out
    assert "|||||||||" in out
    assert "107060980" in out
    assert "min: 6  max: 389" in out


def test_display_glyphs_prints_line(capsys: pytest.CaptureFixture[str]) -> None:
    samples = [10, 3, 4, 5, 6, 90, 389, 28, 3]
    tables.display_glyphs(render_glyphs(samples), samples)

    assert "▁▁▁▁▁▂█▁▁" in capsys.readouterr().out


def test_display_axis_without_rows(capsys: pytest.CaptureFixture[str]) -> None:
    tables.display_axis((), 1)

    assert "No samples" in capsys.readouterr().out
