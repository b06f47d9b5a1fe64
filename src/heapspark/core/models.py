"""Data models as dataclasses."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphResult:
    min_value: int
    max_value: int
    line: str
    levels: tuple[int, ...] = ()  # zero-based level per sample

    def __str__(self) -> str:
        return f"{self.line}:min/max:{self.min_value}/{self.max_value}"


@dataclass(frozen=True)
class BarResult:
    min_value: int
    max_value: int
    rows: tuple[str, ...]  # top row first, baseline last
    heights: tuple[int, ...] = ()  # 1..4 per sample
    fill: str = "|"

    def joined(self, line_separator: str = os.linesep) -> str:
        return line_separator.join(self.rows)

    def __str__(self) -> str:
        return self.joined()


@dataclass(frozen=True)
class MemorySeries:
    name: str
    unit: str
    samples: tuple[int, ...] = ()


@dataclass(frozen=True)
class GcReport:
    young: int
    middle: int
    old: int
