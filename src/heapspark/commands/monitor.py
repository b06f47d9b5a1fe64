"""Memory and GC sample producers, and the `profile` command."""

from __future__ import annotations

import gc
import logging
import runpy
import sys
import threading
import tracemalloc
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from heapspark.cli import SparkContext
from heapspark.core.models import GcReport, MemorySeries
from heapspark.display.json_out import print_json
from heapspark.display.tables import log_series

log = logging.getLogger(__name__)

MIB = 1024 * 1024
DEFAULT_INTERVAL = 0.5  # seconds


def mebibytes(n_bytes: int) -> int:
    return n_bytes // MIB


@dataclass(frozen=True)
class MemoryPool:
    name: str
    unit: str
    read: Callable[[], int]


def default_pools() -> list[MemoryPool]:
    """Traced heap, its peak, and the number of GC-tracked objects."""
    return [
        MemoryPool("Traced Memory", "mb",
                   lambda: mebibytes(tracemalloc.get_traced_memory()[0])),
        MemoryPool("Peak Traced Memory", "mb",
                   lambda: mebibytes(tracemalloc.get_traced_memory()[1])),
        MemoryPool("Tracked Objects", "thousands",
                   lambda: len(gc.get_objects()) // 1000),
    ]


class MemoryMonitor:
    """Poll every pool at a fixed interval on a background thread.

    Readings are only handed out as immutable snapshots once polling has
    stopped, so a render never sees a series that is still growing.
    """

    def __init__(self, interval: float = DEFAULT_INTERVAL,
                 pools: Iterable[MemoryPool] | None = None):
        self.interval = interval
        self._trace = pools is None
        self.pools = default_pools() if pools is None else list(pools)
        self._readings: dict[str, deque[int]] = {p.name: deque() for p in self.pools}
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None
        self._started_tracing = False

    def start(self) -> MemoryMonitor:
        if self._thread is not None:
            raise RuntimeError("monitor is already recording")
        if self._trace and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._started_tracing = True
        self._stopped.clear()
        self._thread = threading.Thread(target=self._run, name="heapspark-monitor", daemon=True)
        self._thread.start()
        log.debug("polling %d pools every %.3fs", len(self.pools), self.interval)
        return self

    def _run(self) -> None:
        while True:
            try:
                self.poll()
            except Exception:
                log.exception("polling stopped after a pool read failed")
                return
            if self._stopped.wait(self.interval):
                break

    def poll(self) -> None:
        """Record one reading from every pool."""
        for pool in self.pools:
            self._readings[pool.name].append(pool.read())

    def stop_recording(self) -> None:
        if self._thread is None:
            return
        self._stopped.set()
        self._thread.join()
        self._thread = None
        if self._started_tracing:
            tracemalloc.stop()
            self._started_tracing = False

    def snapshot(self) -> tuple[MemorySeries, ...]:
        return tuple(
            MemorySeries(p.name, p.unit, tuple(self._readings[p.name]))
            for p in self.pools
        )

    def clear(self) -> None:
        for readings in self._readings.values():
            readings.clear()

    def stop(self, tick: int = 4) -> tuple[MemorySeries, ...]:
        """Stop polling, log every series as bars over a digit axis, and reset."""
        self.stop_recording()
        series = self.snapshot()
        for s in series:
            log_series(s.name, s.unit, s.samples, tick)
        self.clear()
        return series

    def __enter__(self) -> MemoryMonitor:
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop_recording()


def _collections() -> list[int]:
    return [generation["collections"] for generation in gc.get_stats()]


class GcMonitor:
    """Count garbage collections per generation between start() and report()."""

    def __init__(self):
        self._start: list[int] | None = None

    def start(self) -> None:
        self._start = _collections()

    def report(self) -> GcReport:
        if self._start is None:
            raise RuntimeError("GcMonitor.report() called before start()")
        deltas = [now - then for now, then in zip(_collections(), self._start)]
        middle = deltas[1] if len(deltas) > 2 else 0
        report = GcReport(young=deltas[0], middle=middle, old=deltas[-1])
        log.info("number of young gc collections: %d, number of old gc collections: %d",
                 report.young, report.old)
        return report


def run_profile(ctx: SparkContext, script: str, script_args: Iterable[str] = ()) -> None:
    """Run a script as __main__ under both monitors, then chart what was recorded."""
    monitor = MemoryMonitor(interval=ctx.interval)
    gc_monitor = GcMonitor()
    saved_argv = sys.argv
    sys.argv = [script, *script_args]

    gc_monitor.start()
    monitor.start()
    try:
        runpy.run_path(script, run_name="__main__")
    except SystemExit as e:
        if e.code not in (None, 0):
            log.warning("%s exited with status %s", script, e.code)
    finally:
        sys.argv = saved_argv
        monitor.stop_recording()

    gc_report = gc_monitor.report()
    series = monitor.snapshot()

    if ctx.fmt:
        from heapspark.frames import export_tables, series_frames
        export_tables(series_frames(series), ctx.fmt)
    elif ctx.json_output:
        print_json({"script": script, "series": series, "gc": gc_report})
    else:
        for s in series:
            log_series(s.name, s.unit, s.samples, ctx.tick)
