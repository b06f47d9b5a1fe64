"""Render precondition errors."""

from __future__ import annotations


class RenderError(ValueError):
    pass


class EmptyInputError(RenderError):
    """A scaled renderer was given no samples."""


class InvalidLevelCountError(RenderError):
    """Bucketing asked for fewer than two levels."""


class NegativeSampleError(RenderError):
    """The digit axis only writes non-negative magnitudes."""


class InvalidTickError(RenderError):
    pass
