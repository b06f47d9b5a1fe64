"""Tests for the memory and GC sample producers."""

from __future__ import annotations

import gc
import itertools
import logging
import tracemalloc

import pytest

from heapspark.commands.monitor import MIB, GcMonitor, MemoryMonitor, MemoryPool, default_pools, mebibytes
from heapspark.core.models import MemorySeries


def _counting_pool(name: str = "Counter") -> MemoryPool:
    counter = itertools.count(1)
    return MemoryPool(name, "mb", lambda: next(counter))


def test_mebibytes_rounds_down() -> None:
    assert mebibytes(5 * MIB + 10) == 5
    assert mebibytes(MIB - 1) == 0
    assert mebibytes(0) == 0


def test_default_pools_names() -> None:
    assert [p.name for p in default_pools()] == [
        "Traced Memory", "Peak Traced Memory", "Tracked Objects",
    ]


def test_poll_records_one_reading_per_pool() -> None:
    monitor = MemoryMonitor(pools=[_counting_pool("A"), _counting_pool("B")])
    monitor.poll()
    monitor.poll()
    monitor.poll()

    assert monitor.snapshot() == (
        MemorySeries("A", "mb", (1, 2, 3)),
        MemorySeries("B", "mb", (1, 2, 3)),
    )


def test_background_polling_records_at_least_once() -> None:
    monitor = MemoryMonitor(interval=0.01, pools=[_counting_pool()])
    monitor.start()
    monitor.stop_recording()

    samples = monitor.snapshot()[0].samples
    assert len(samples) >= 1
    assert list(samples) == list(range(1, len(samples) + 1))


def test_start_twice_is_an_error() -> None:
    monitor = MemoryMonitor(interval=0.01, pools=[_counting_pool()])
    monitor.start()
    try:
        with pytest.raises(RuntimeError):
            monitor.start()
    finally:
        monitor.stop_recording()


def test_stop_logs_series_and_clears(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="heapspark")
    monitor = MemoryMonitor(interval=0.01, pools=[_counting_pool("Young Space")])
    monitor.start()

    series = monitor.stop(tick=1)

    assert series[0].name == "Young Space"
    assert len(series[0].samples) >= 1
    assert "Young Space in mb:" in caplog.messages
    assert monitor.snapshot()[0].samples == ()


def test_context_manager_stops_polling() -> None:
    with MemoryMonitor(interval=0.01, pools=[_counting_pool()]) as monitor:
        pass

    recorded = monitor.snapshot()[0].samples
    assert len(recorded) >= 1
    assert monitor.snapshot()[0].samples == recorded


def test_default_pools_leave_tracemalloc_as_found() -> None:
    was_tracing = tracemalloc.is_tracing()
    with MemoryMonitor(interval=0.01) as monitor:
        data = [bytes(1024) for _ in range(100)]

    assert data
    assert tracemalloc.is_tracing() == was_tracing
    assert all(len(s.samples) >= 1 for s in monitor.snapshot())
    assert all(v >= 0 for s in monitor.snapshot() for v in s.samples)


def test_gc_monitor_counts_full_collections(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="heapspark")
    monitor = GcMonitor()
    monitor.start()
    gc.collect()

    report = monitor.report()

    assert report.old >= 1
    assert report.young >= 0
    assert caplog.messages[-1].startswith("number of young gc collections:")


def test_gc_monitor_report_before_start() -> None:
    with pytest.raises(RuntimeError):
        GcMonitor().report()


def test_failing_pool_is_logged_and_ends_polling(caplog: pytest.LogCaptureFixture) -> None:
    def broken() -> int:
        raise OSError("pool unavailable")

    caplog.set_level(logging.INFO, logger="heapspark")
    monitor = MemoryMonitor(interval=0.01, pools=[MemoryPool("Broken", "mb", broken)])
    monitor.start()
    monitor.stop_recording()

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].exc_info[0] is OSError
    assert monitor.snapshot()[0].samples == ()


def test_memory_series_defaults_to_no_samples() -> None:
    assert MemorySeries("Traced Memory", "mb").samples == ()
