"""Drawing surfaces and the leaf calls that put geometry on them.

Geometry is constructed first and rendered separately: the helpers here
hand a finished :class:`~proofsketch.kernel.Line` to a surface and give the
same line back, they never derive new geometry.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Protocol, Tuple, Union

import numpy as np

from .kernel import Line, Point
from .styles import Style, StyleLike, StyleProfile, resolve_style

logger = logging.getLogger(__name__)


class Surface(Protocol):
    """What the kernel needs from a rendering target.

    Coordinates are y-down; arc angles are standard radians and follow the
    HTML canvas ``arc`` sweep rules.
    """

    def stroke_segment(self, p1: Point, p2: Point, style: Style) -> None:
        ...

    def stroke_circle(self, center: Point, radius: float, style: Style) -> None:
        ...

    def stroke_arc(
        self,
        center: Point,
        radius: float,
        start: float,
        end: float,
        counterclockwise: bool,
        style: Style,
    ) -> None:
        ...


@dataclass(frozen=True)
class SegmentStroke:
    p1: Point
    p2: Point
    style: Style


@dataclass(frozen=True)
class CircleStroke:
    center: Point
    radius: float
    style: Style


@dataclass(frozen=True)
class ArcStroke:
    center: Point
    radius: float
    start: float
    end: float
    counterclockwise: bool
    style: Style

    def sweep(self) -> float:
        """Signed sweep in radians (positive is clockwise on screen).

        Mirrors the canvas rules: a clockwise arc covers
        ``(end - start) mod 2pi``, a full turn or more draws the whole circle.
        """

        delta = self.end - self.start
        full = 2 * math.pi
        if not self.counterclockwise:
            if delta >= full:
                return full
            return delta % full
        if -delta >= full:
            return -full
        return -((-delta) % full)


Stroke = Union[SegmentStroke, CircleStroke, ArcStroke]


def _finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


@dataclass
class Drawing:
    """A surface that records strokes in call order.

    Strokes with non-finite geometry (typically produced by normalizing a
    zero-length vector) are dropped, turning them into rendering no-ops.
    """

    strokes: List[Stroke] = field(default_factory=list)

    def stroke_segment(self, p1: Point, p2: Point, style: Style) -> None:
        if not _finite(p1.x, p1.y, p2.x, p2.y):
            logger.debug("Dropping non-finite segment %s -> %s", p1, p2)
            return
        self.strokes.append(SegmentStroke(p1, p2, style))

    def stroke_circle(self, center: Point, radius: float, style: Style) -> None:
        if not _finite(center.x, center.y, radius):
            logger.debug("Dropping non-finite circle at %s r=%s", center, radius)
            return
        self.strokes.append(CircleStroke(center, radius, style))

    def stroke_arc(
        self,
        center: Point,
        radius: float,
        start: float,
        end: float,
        counterclockwise: bool,
        style: Style,
    ) -> None:
        if not _finite(center.x, center.y, radius, start, end):
            logger.debug("Dropping non-finite arc at %s r=%s", center, radius)
            return
        self.strokes.append(ArcStroke(center, radius, start, end, bool(counterclockwise), style))

    def __iter__(self) -> Iterator[Stroke]:
        return iter(self.strokes)

    def __len__(self) -> int:
        return len(self.strokes)

    def segments(self) -> List[SegmentStroke]:
        return [stroke for stroke in self.strokes if isinstance(stroke, SegmentStroke)]

    def bounds(self) -> Tuple[float, float, float, float]:
        """``(min_x, min_y, max_x, max_y)`` covering every stroke.

        Circles and arcs contribute their full bounding square.
        """

        if not self.strokes:
            return (0.0, 0.0, 0.0, 0.0)
        corners: List[Tuple[float, float]] = []
        for stroke in self.strokes:
            if isinstance(stroke, SegmentStroke):
                corners.append((stroke.p1.x, stroke.p1.y))
                corners.append((stroke.p2.x, stroke.p2.y))
            else:
                cx, cy, r = stroke.center.x, stroke.center.y, abs(stroke.radius)
                corners.append((cx - r, cy - r))
                corners.append((cx + r, cy + r))
        arr = np.asarray(corners, dtype=float)
        min_x, min_y = arr.min(axis=0)
        max_x, max_y = arr.max(axis=0)
        return (float(min_x), float(min_y), float(max_x), float(max_y))


def draw_line(surface: Surface, line: Line, style: StyleLike = None) -> Line:
    surface.stroke_segment(line.p1, line.p2, resolve_style(style))
    return line


def draw_circle(surface: Surface, line: Line, style: StyleLike = None) -> Line:
    """Circle centred at ``line.p1`` passing through ``line.p2``."""

    surface.stroke_circle(line.p1, line.length(), resolve_style(style))
    return line


def draw_arc(
    surface: Surface,
    line: Line,
    other: Line,
    counterclockwise: bool = False,
    style: StyleLike = None,
) -> Line:
    """Arc centred at ``line.p1`` of radius ``line.length()``.

    It starts in the direction of ``line`` and ends in the direction of
    ``other``.
    """

    surface.stroke_arc(
        line.p1,
        line.length(),
        line.vec().dir_raw(),
        other.vec().dir_raw(),
        counterclockwise,
        resolve_style(style),
    )
    return line


def draw_lines(surface: Surface, lines: List[Line], style: StyleLike = StyleProfile.DEFAULT) -> List[Line]:
    for item in lines:
        draw_line(surface, item, style)
    return lines
