"""Exceptions raised by the construction kernel."""

from __future__ import annotations

from typing import Optional


class GeometryError(RuntimeError):
    """Base class for construction failures.

    A construction that raises cannot be completed; nothing in the kernel
    retries or falls back, the caller's render is aborted.
    """


class DegenerateConfigurationError(GeometryError):
    """The input admits no unique construction (e.g. coincident directions)."""


class ParallelLinesError(DegenerateConfigurationError):
    """The 2x2 intersection system has a near-zero determinant."""

    def __init__(self, determinant: float, tolerance: float) -> None:
        super().__init__(
            f"likely parallel lines: |det|={abs(determinant):.3g} < tolerance {tolerance:.3g}"
        )
        self.determinant = determinant
        self.tolerance = tolerance


class SegmentsDisjointError(GeometryError):
    """The carrier lines cross, but outside one or both segments."""

    def __init__(self, ta: float, tb: float, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"segments don't intersect (ta={ta:.6g}, tb={tb:.6g})"
        )
        self.ta = ta
        self.tb = tb
