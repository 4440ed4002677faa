"""Self-similar motifs grown by feeding one construction step its own output.

A *frame* is the active edge of the motif.  Iteration ``i`` runs the step
at scale ``ratio ** i``: the step builds the next piece from the frame,
draws it with a style scaled by the same factor and returns the frame for
iteration ``i + 1``.  The loop always runs a fixed number of times.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

import numpy as np

from .annotations import mark_hatches, mark_right_angle
from .drawing import Surface, draw_line
from .kernel import Line, line
from .styles import Style, StyleLike, StyleProfile, resolve_style

logger = logging.getLogger(__name__)

LARGE = 10000.0


@dataclass(frozen=True)
class LayerContext:
    index: int
    scale: float
    ratio: float
    surface: Surface
    style: Style


LayerStep = Callable[[Line, LayerContext], Line]


def decay_scales(ratio: float, iterations: int) -> np.ndarray:
    """``[1, ratio, ratio**2, ...]`` with ``iterations`` entries."""

    return np.power(float(ratio), np.arange(iterations, dtype=float))


def layer(
    surface: Surface,
    frame: Line,
    step: LayerStep,
    iterations: int,
    *,
    ratio: float = 0.8,
    style: StyleLike = StyleProfile.DEFAULT,
) -> List[Line]:
    """Run ``step`` ``iterations`` times, returning the seed and every new frame."""

    if iterations < 0:
        raise ValueError(f"iterations must be >= 0 (got {iterations})")
    if not 0.0 < ratio <= 1.0:
        raise ValueError(f"ratio must be in (0, 1] (got {ratio})")

    base_style = resolve_style(style)
    frames = [frame]
    for index, scale in enumerate(decay_scales(ratio, iterations)):
        context = LayerContext(
            index=index,
            scale=float(scale),
            ratio=ratio,
            surface=surface,
            style=base_style.scaled(float(scale)),
        )
        frame = step(frame, context)
        logger.debug("layer %d at scale %.4f -> %s", index, scale, frame)
        frames.append(frame)
    return frames


def square(line_a: Line, side: float = 1.0) -> Tuple[Line, Line, Line, Line]:
    """The four sides of the square erected on ``line_a``.

    Each side starts where the previous one ends and turns by ``90`` screen
    degrees in the direction of ``side``'s sign.
    """

    turn = 90.0 if side >= 0 else -90.0
    sides = [line_a]
    for _ in range(3):
        last = sides[-1]
        sides.append(last.p2.line_to(last.vec().rotate(turn)))
    return sides[0], sides[1], sides[2], sides[3]


def mark_square_corners(
    surface: Surface, sides: Sequence[Line], side: float = 1.0, *, scale: float = 1.0
) -> None:
    """Right-angle ticks inside every corner of a square built by ``square``."""

    turn = 1.0 if side >= 0 else -1.0
    for piece in sides:
        mark_right_angle(surface, piece, turn, scale=scale)


@dataclass(frozen=True)
class RightTriangleStaircase:
    """A staircase of right triangles shrinking along the frame.

    The frame is the run of the current triangle.  A ray leaves ``frame.p1``
    at ``slope`` degrees off the frame, the rise is cast perpendicular from
    ``frame.p2`` until it meets that ray, and the next run starts at the top
    of the rise, ``ratio`` times as long as the current one.
    """

    slope: float = 30.0
    side: float = -1.0
    marks: bool = True

    def __call__(self, frame: Line, context: LayerContext) -> Line:
        turn = 1.0 if self.side >= 0 else -1.0
        heading = frame.direction()
        hypotenuse_ray = frame.p1.line_towards(heading + turn * self.slope, LARGE)
        rise = frame.p2.line_until_intersect(heading + turn * 90.0, hypotenuse_ray)
        hypotenuse = line(frame.p1, rise.p2)

        surface = context.surface
        for piece in (frame, rise, hypotenuse):
            draw_line(surface, piece, context.style)
        if self.marks:
            mark_right_angle(surface, rise, turn, scale=context.scale)

        return rise.p2.line_to(frame.vec().scale(context.ratio))


@dataclass(frozen=True)
class RecedingSquares:
    """A row of squares, each ``ratio`` times the previous, marked congruent.

    With ``right_angles`` every corner also gets a right-angle tick.
    """

    side: float = 1.0
    marks: bool = True
    right_angles: bool = False

    def __call__(self, frame: Line, context: LayerContext) -> Line:
        sides = square(frame, self.side)
        for piece in sides:
            draw_line(context.surface, piece, context.style)
            if self.marks:
                mark_hatches(context.surface, piece, 1, scale=context.scale)
        if self.right_angles:
            mark_square_corners(context.surface, sides, self.side, scale=context.scale)
        return frame.p2.line_to(frame.vec().scale(context.ratio))
