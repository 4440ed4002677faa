"""Immutable displacement vectors with screen-convention directions."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from .angles import radians_to_screen, screen_to_radians
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Vector:
    """A displacement ``(x, y)`` in y-down surface coordinates."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def scale(self, c: float) -> "Vector":
        return Vector(self.x * c, self.y * c)

    def length(self) -> float:
        return math.sqrt(self.x ** 2 + self.y ** 2)

    def dir(self) -> float:
        """Screen direction in degrees: 0 is up, clockwise positive."""

        return radians_to_screen(self.dir_raw())

    def dir_raw(self) -> float:
        """Standard ``atan2`` angle in radians, as surface arcs expect it."""

        return math.atan2(self.y, self.x)

    def normalize(self) -> "Vector":
        """Unit vector with the same direction.

        The zero vector has no direction; the result is ``Vector(nan, nan)``
        and anything drawn from it is dropped by the surface.
        """

        length = self.length()
        if length == 0.0:
            return Vector(math.nan, math.nan)
        return Vector(self.x / length, self.y / length)

    def set_length(self, c: float) -> "Vector":
        return self.normalize().scale(c)

    def add(self, v: "Vector") -> "Vector":
        return Vector(self.x + v.x, self.y + v.y)

    def sub(self, v: "Vector") -> "Vector":
        return Vector(self.x - v.x, self.y - v.y)

    def rotate(self, d: float) -> "Vector":
        """Rotate by ``d`` screen degrees (clockwise for positive ``d``)."""

        return vector_dir(self.dir() + d, self.length())

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.sub(other)

    def __mul__(self, c: float) -> "Vector":
        return self.scale(c)

    __rmul__ = __mul__

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)


def vector(x: float, y: float) -> Vector:
    return Vector(x, y)


def vector_dir(direction: float, r: float) -> Vector:
    """Vector of length ``r`` pointing in screen direction ``direction``."""

    angle = screen_to_radians(direction)
    return Vector(math.cos(angle) * r, math.sin(angle) * r)


apply_debug_logging(globals(), logger=logger, skip={"Vector.is_finite", "Vector.as_array"})
