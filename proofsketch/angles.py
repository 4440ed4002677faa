"""Screen-convention angle helpers.

Construction code speaks in *screen directions*: degrees, 0 pointing to the
top of the surface, growing clockwise.  The arc primitive of a surface and
``math.atan2`` speak standard radians measured in y-down screen
coordinates.  :func:`screen_to_radians` and :func:`radians_to_screen` are the
only place where the two are reconciled.
"""

from __future__ import annotations

import math

FULL_TURN = 360.0
_NORTH_OFFSET = 90.0


def screen_to_radians(direction: float) -> float:
    """Convert a screen direction (degrees) to a standard angle (radians)."""

    return (direction - _NORTH_OFFSET) / 180.0 * math.pi


def radians_to_screen(angle: float) -> float:
    """Convert a standard angle (radians) to a screen direction (degrees).

    The result is not normalized; ``atan2`` input yields values in
    ``(-90, 270]``.
    """

    return angle / math.pi * 180.0 + _NORTH_OFFSET


def normalize_dir(direction: float) -> float:
    """Map ``direction`` into ``[0, 360)``."""

    value = direction % FULL_TURN
    # -1e-17 % 360 rounds up to exactly 360.0
    if value >= FULL_TURN:
        return 0.0
    return value


def angular_distance(a: float, b: float) -> float:
    """Smallest unsigned difference between two directions, in ``[0, 180]``."""

    diff = normalize_dir(a - b)
    return min(diff, FULL_TURN - diff)
