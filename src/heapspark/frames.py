"""Convert render results to ibis memtables and export them.

Per-result functions return dict[str, ibis.Table]. Tables can be
materialized to any backend:

    tables["samples"].to_pandas()
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

import ibis

from heapspark.core.models import BarResult, GlyphResult, MemorySeries


def _mt(rows: list[dict]) -> ibis.Table | None:
    """Create a memtable from rows, or None if empty."""
    if not rows:
        return None
    return ibis.memtable(rows)


def _row_table(rows: Sequence[str]) -> ibis.Table | None:
    return _mt([{"row": i, "text": text} for i, text in enumerate(rows)])


def glyph_frames(result: GlyphResult, samples: Sequence[int]) -> dict[str, ibis.Table]:
    tables: dict[str, ibis.Table] = {}

    tables["summary"] = ibis.memtable([{
        "count": len(samples),
        "min": result.min_value,
        "max": result.max_value,
        "line": result.line,
    }])

    tables["samples"] = ibis.memtable([
        {"index": i, "value": v, "level": level, "glyph": glyph}
        for i, (v, level, glyph) in enumerate(zip(samples, result.levels, result.line))
    ])
    return tables


def bar_frames(result: BarResult, samples: Sequence[int]) -> dict[str, ibis.Table]:
    tables: dict[str, ibis.Table] = {}

    tables["summary"] = ibis.memtable([{
        "count": len(samples),
        "min": result.min_value,
        "max": result.max_value,
        "rows": len(result.rows),
    }])

    tables["samples"] = ibis.memtable([
        {"index": i, "value": v, "height": h}
        for i, (v, h) in enumerate(zip(samples, result.heights))
    ])

    t = _row_table(result.rows)
    if t is not None:
        tables["rows"] = t
    return tables


def axis_frames(rows: Sequence[str]) -> dict[str, ibis.Table]:
    t = _row_table(rows)
    return {"rows": t} if t is not None else {}


def series_frames(series: Sequence[MemorySeries]) -> dict[str, ibis.Table]:
    """One long table of every monitored reading."""
    rows = [
        {"series": s.name, "unit": s.unit, "index": i, "value": v}
        for s in series
        for i, v in enumerate(s.samples)
    ]
    t = _mt(rows)
    return {"series": t} if t is not None else {}


def export_tables(tables: dict[str, ibis.Table], fmt: str) -> None:
    """Export ibis tables to stdout (csv) or files (parquet)."""
    if fmt == "csv":
        for name, table in tables.items():
            sys.stdout.write(f"# {name}\n")
            table.to_pandas().to_csv(sys.stdout, index=False)
            sys.stdout.write("\n")
    elif fmt == "parquet":
        for name, table in tables.items():
            path = f"{name}.parquet"
            table.to_pandas().to_parquet(path)
            sys.stderr.write(f"Wrote {path}\n")
    else:
        raise ValueError(f"unknown export format: {fmt}")
