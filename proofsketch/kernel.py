"""Points, directed lines and the shared intersection solver."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .errors import ParallelLinesError, SegmentsDisjointError
from .logging_utils import apply_debug_logging
from .vector import Vector, vector_dir

logger = logging.getLogger(__name__)

PARALLEL_TOLERANCE = 1e-6


def intersect_params(
    pa: "Point",
    pb: "Point",
    va: Vector,
    vb: Vector,
    *,
    tol: float = PARALLEL_TOLERANCE,
) -> Tuple[float, float]:
    """Solve ``pa + ta * va == pb + tb * vb`` for ``(ta, tb)``.

    Cramer's rule on::

        va.x * ta - vb.x * tb = pb.x - pa.x
        va.y * ta - vb.y * tb = pb.y - pa.y

    Raises :class:`ParallelLinesError` when ``|det| < tol``.
    """

    cx = pb.x - pa.x
    cy = pb.y - pa.y
    den = va.y * vb.x - va.x * vb.y
    if abs(den) < tol:
        raise ParallelLinesError(den, tol)
    ta = (cy * vb.x - cx * vb.y) / den
    tb = (cy * va.x - cx * va.y) / den
    return ta, tb


@dataclass(frozen=True)
class Point:
    """A position on the surface (y grows downwards)."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def move_towards(self, direction: float, r: float) -> "Point":
        return self.move_to(vector_dir(direction, r))

    def move_to(self, vec: Vector) -> "Point":
        return Point(self.x + vec.x, self.y + vec.y)

    def move_until_intersect(
        self, direction: float, target: "Line", *, tol: float = PARALLEL_TOLERANCE
    ) -> "Point":
        """Travel along ``direction`` until the carrier of ``target`` is met.

        This is a ray cast against an infinite line: neither the travel
        distance (which may come out negative) nor the position along
        ``target`` is range checked.
        """

        unit = vector_dir(direction, 1.0)
        ta, _ = intersect_params(self, target.p1, unit, target.vec(), tol=tol)
        return self.move_to(unit.scale(ta))

    def line_towards(self, direction: float, r: float) -> "Line":
        return self.line_to(vector_dir(direction, r))

    def line_to(self, vec: Vector) -> "Line":
        return Line(self, self.move_to(vec))

    def line_until_intersect(
        self, direction: float, target: "Line", *, tol: float = PARALLEL_TOLERANCE
    ) -> "Line":
        return Line(self, self.move_until_intersect(direction, target, tol=tol))

    def pos(self) -> Vector:
        """This point as a position vector from the origin."""

        return Vector(self.x, self.y)

    def dist(self, other: "Point") -> float:
        return self.pos().sub(other.pos()).length()

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)


def point(x: float, y: float) -> Point:
    return Point(x, y)


@dataclass(frozen=True)
class Line:
    """Directed segment from ``p1`` to ``p2``.

    The order is significant: it fixes :meth:`vec` and therefore the side on
    which right-angle ticks and angle arcs are drawn.
    """

    p1: Point
    p2: Point

    def vec(self) -> Vector:
        return Vector(self.p2.x - self.p1.x, self.p2.y - self.p1.y)

    def length(self) -> float:
        return self.vec().length()

    def direction(self) -> float:
        """Screen direction of ``p1 -> p2``."""

        return self.vec().dir()

    def mid(self) -> Point:
        return Point((self.p1.x + self.p2.x) / 2, (self.p1.y + self.p2.y) / 2)

    def offset(self, d: float) -> Point:
        """Point at signed distance ``d`` from ``p1`` along this line.

        ``d`` is not clamped to the segment; negative values go behind
        ``p1`` and values above :meth:`length` go past ``p2``.
        """

        return self.p1.move_to(self.vec().set_length(d))

    def reverse(self) -> "Line":
        return Line(self.p2, self.p1)

    def intersect(self, other: "Line", *, tol: float = PARALLEL_TOLERANCE) -> Point:
        """Crossing point of two segments.

        Raises :class:`ParallelLinesError` if the carriers are parallel and
        :class:`SegmentsDisjointError` if they cross outside either segment.
        """

        va = self.vec()
        ta, tb = intersect_params(self.p1, other.p1, va, other.vec(), tol=tol)
        if ta > 1 or ta < 0 or tb > 1 or tb < 0:
            raise SegmentsDisjointError(ta, tb)
        return self.p1.move_to(va.scale(ta))

    def intersect_extended(self, other: "Line", *, tol: float = PARALLEL_TOLERANCE) -> Point:
        """Crossing point of the infinite carriers of both lines."""

        va = self.vec()
        ta, _ = intersect_params(self.p1, other.p1, va, other.vec(), tol=tol)
        return self.p1.move_to(va.scale(ta))


def line(p1: Point, p2: Point) -> Line:
    return Line(p1, p2)


def angle_between(l1: Line, l2: Line) -> float:
    """Raw difference of screen directions ``l1 - l2`` (not normalized)."""

    return l1.direction() - l2.direction()


def incircle(a: Point, b: Point, c: Point) -> Tuple[Point, float]:
    """Incentre and inradius of triangle ``abc``.

    The incentre is the side-length weighted mean of the vertices, each
    vertex weighted by the length of the opposite side.  Collinear vertices
    give a radius of ``0``; three coincident vertices give NaNs, which a
    ``Drawing`` discards.
    """

    ab = a.dist(b)
    bc = b.dist(c)
    ca = c.dist(a)
    perimeter = ab + bc + ca
    if perimeter == 0.0:
        return Point(math.nan, math.nan), math.nan
    centre = (
        a.pos().scale(bc).add(b.pos().scale(ca)).add(c.pos().scale(ab)).scale(1 / perimeter)
    )
    s = 0.5 * perimeter
    # rounding can push a collinear product just below zero
    radius = math.sqrt(max(0.0, (s - ab) * (s - bc) * (s - ca)) / s)
    return Point(centre.x, centre.y), radius


apply_debug_logging(
    globals(),
    logger=logger,
    skip={"Point.is_finite", "Point.as_array"},
)
