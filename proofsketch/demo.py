"""A short composition exercising every part of the kernel."""

from __future__ import annotations

import logging

from .annotations import mark_angle, mark_arrows, mark_hatches, mark_right_angle
from .drawing import Drawing, draw_arc, draw_circle, draw_line, draw_lines
from .kernel import Point, incircle, line
from .layering import (
    LARGE,
    RecedingSquares,
    RightTriangleStaircase,
    layer,
    mark_square_corners,
    square,
)
from .styles import StyleProfile

logger = logging.getLogger(__name__)

CANVAS_SIZE = 800.0


def build_demo_sketch(
    *,
    iterations: int = 5,
    ratio: float = 0.8,
    center: Point = Point(CANVAS_SIZE / 2, CANVAS_SIZE / 2),
) -> Drawing:
    drawing = Drawing()

    for idx in range(12):
        draw_line(drawing, center.line_towards(idx * 30, 180), StyleProfile.DEBUG)

    # equilateral triangle, all sides marked equal
    apex = center.move_towards(30, 200)
    side_a = draw_line(drawing, apex.line_towards(120, 80))
    side_b = draw_line(drawing, apex.line_towards(60, 80))
    base = draw_line(drawing, line(side_a.p2, side_b.p2))
    for side in (side_a, side_b, base):
        mark_hatches(drawing, side, 1)
    mark_angle(drawing, side_b, side_a, 1)

    # right triangle closed by casting a ray against the hypotenuse
    foot = center.move_towards(120, 120)
    leg = draw_line(drawing, foot.line_towards(90, 100))
    hyp_ray = foot.line_towards(50, LARGE)
    rise = draw_line(drawing, leg.p2.line_until_intersect(0, hyp_ray))
    hyp = draw_line(drawing, line(foot, rise.p2), StyleProfile.IMPORTANT)
    mark_right_angle(drawing, rise, -1)
    mark_angle(drawing, leg, hyp, 2, ccw=True, declutter=True)
    mark_arrows(drawing, hyp, 2)

    # incircle of the right triangle
    incentre, inradius = incircle(foot, leg.p2, rise.p2)
    draw_circle(drawing, incentre.line_towards(0, inradius))

    # square with a quarter arc across it
    sq = square(center.move_towards(200, 150).line_towards(270, 60))
    draw_lines(drawing, list(sq))
    mark_square_corners(drawing, sq)
    draw_arc(drawing, sq[1], sq[0].reverse())

    # crossing diagonals of the square
    diagonal_a = line(sq[0].p1, sq[1].p2)
    diagonal_b = line(sq[1].p1, sq[2].p2)
    crossing = diagonal_a.intersect(diagonal_b)
    draw_line(drawing, line(sq[0].p1, crossing), StyleProfile.MARKER)

    stairs = center.move_towards(300, 60).line_towards(270, 90)
    layer(drawing, stairs, RightTriangleStaircase(slope=35, side=1), iterations, ratio=ratio)

    row = center.move_towards(160, 220).line_towards(90, 50)
    layer(drawing, row, RecedingSquares(side=-1), iterations, ratio=ratio)

    logger.info("Demo sketch recorded %d stroke(s)", len(drawing))
    return drawing
