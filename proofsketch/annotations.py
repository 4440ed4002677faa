"""Textbook-style marks: equal-length hatches, arrows, right angles, angle arcs.

The host line's direction decides orientation: ticks are placed along
``p1 -> p2`` and right-angle/arc marks sit at ``p1``.  Marks never validate
the host geometry; a zero-length host yields zero-length ticks.
"""

from __future__ import annotations

import logging
import math
from typing import Callable, Optional

from .angles import normalize_dir
from .config import AnnotationConfig, get_annotation_config
from .drawing import Surface
from .kernel import Line
from .logging_utils import apply_debug_logging
from .styles import Style, StyleLike, StyleProfile, scaled_style
from .vector import Vector

logger = logging.getLogger(__name__)

_TickPainter = Callable[[Surface, Line, float, Style, AnnotationConfig, float], None]


def _heading(line: Line, length: float) -> Vector:
    """Vector of ``length`` along ``line``; the zero vector for a degenerate line."""

    vec = line.vec()
    if vec.length() == 0.0:
        return Vector(0.0, 0.0)
    return vec.set_length(length)


def _paint_hatch(
    surface: Surface, line: Line, at: float, style: Style, config: AnnotationConfig, scale: float
) -> None:
    base = _heading(line, config.hatch_length * scale)
    anchor = line.p1.move_to(_heading(line, at))
    for turn in (90.0, -90.0):
        tip = anchor.move_to(base.rotate(turn))
        surface.stroke_segment(anchor, tip, style)


def _paint_arrow(
    surface: Surface, line: Line, at: float, style: Style, config: AnnotationConfig, scale: float
) -> None:
    base = _heading(line, config.arrow_length * scale)
    anchor = line.p1.move_to(_heading(line, at))
    for turn in (config.arrow_angle, -config.arrow_angle):
        tip = anchor.move_to(base.rotate(turn))
        surface.stroke_segment(anchor, tip, style)


def _repeat_marks(
    surface: Surface,
    line: Line,
    centre: float,
    count: int,
    spacing: float,
    style: Style,
    config: AnnotationConfig,
    scale: float,
    painter: _TickPainter,
) -> None:
    for idx in range(count):
        painter(surface, line, centre + spacing * (idx - (count - 1) / 2), style, config, scale)


def mark_hatches(
    surface: Surface,
    line: Line,
    count: int,
    offset: float = 0.0,
    style: StyleLike = None,
    *,
    scale: float = 1.0,
    config: Optional[AnnotationConfig] = None,
) -> Line:
    """Mark ``line`` with ``count`` perpendicular ticks ("equal length")."""

    config = config or get_annotation_config()
    _repeat_marks(
        surface,
        line,
        line.length() / 2 + offset,
        count,
        config.hatch_spacing * scale,
        scaled_style(style, scale, StyleProfile.MARKER),
        config,
        scale,
        _paint_hatch,
    )
    return line


def mark_arrows(
    surface: Surface,
    line: Line,
    count: int,
    offset: float = 0.0,
    style: StyleLike = None,
    *,
    scale: float = 1.0,
    config: Optional[AnnotationConfig] = None,
) -> Line:
    """Mark ``line`` with ``count`` chevrons ("parallel"/"directed")."""

    config = config or get_annotation_config()
    _repeat_marks(
        surface,
        line,
        line.length() / 2 - config.arrow_center_shift * scale + offset,
        count,
        config.arrow_spacing * scale,
        scaled_style(style, scale, StyleProfile.MARKER),
        config,
        scale,
        _paint_arrow,
    )
    return line


def mark_right_angle(
    surface: Surface,
    line: Line,
    side: float,
    style: StyleLike = None,
    *,
    scale: float = 1.0,
    config: Optional[AnnotationConfig] = None,
) -> Line:
    """Draw the square corner of a right angle at ``line.p1``.

    ``side`` picks the half-plane: its sign rotates the second leg by
    ``+90`` or ``-90`` screen degrees from the line.  A zero ``side`` folds
    the second leg onto the first, leaving a collapsed tick along the line.
    """

    sign = math.copysign(1.0, side) if side else 0.0
    config = config or get_annotation_config()
    resolved = scaled_style(style, scale, StyleProfile.MARKER)

    leg_a = _heading(line, config.right_angle_size * scale)
    leg_b = leg_a.rotate(sign * 90.0)
    corner = line.p1.move_to(leg_a.add(leg_b))
    surface.stroke_segment(line.p1.move_to(leg_a), corner, resolved)
    surface.stroke_segment(line.p1.move_to(leg_b), corner, resolved)
    return line


def swept_angle(l1: Line, l2: Line, ccw: bool = False) -> float:
    """Screen degrees covered by an arc from ``l1``'s direction to ``l2``'s.

    Clockwise on screen unless ``ccw``; the result is in ``[0, 360)``.
    This is the arc actually stroked, the complement of the signed
    ``l1 - l2`` difference (``angle_between``) taken modulo a full turn.
    """

    diff = l2.direction() - l1.direction()
    if ccw:
        diff = -diff
    return normalize_dir(diff)


def mark_angle(
    surface: Surface,
    l1: Line,
    l2: Line,
    count: int,
    ccw: bool = False,
    style: StyleLike = None,
    *,
    declutter: bool = False,
    scale: float = 1.0,
    config: Optional[AnnotationConfig] = None,
) -> Line:
    """Stack ``count`` concentric arcs at ``l1.p1`` between ``l1`` and ``l2``.

    With ``declutter`` the base radius drops to ``small_angle_radius`` when
    the swept angle is under ``small_angle_threshold`` degrees.
    """

    config = config or get_annotation_config()
    resolved = scaled_style(style, scale, StyleProfile.MARKER)
    base_radius = config.angle_radius
    if declutter:
        sweep = swept_angle(l1, l2, ccw)
        logger.debug("mark_angle sweep=%.3f count=%d", sweep, count)
        if sweep < config.small_angle_threshold:
            base_radius = config.small_angle_radius

    start = l1.vec().dir_raw()
    end = l2.vec().dir_raw()
    for idx in range(count):
        radius = (base_radius + idx * config.angle_step) * scale
        surface.stroke_arc(l1.p1, radius, start, end, ccw, resolved)
    return l1


apply_debug_logging(globals(), logger=logger)
