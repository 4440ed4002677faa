"""TikZ renderer for recorded drawings."""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Optional, Tuple

from .utils import latex_escape_keep_math
from ..drawing import ArcStroke, CircleStroke, Drawing, SegmentStroke, Stroke
from ..styles import Style, StyleProfile

logger = logging.getLogger(__name__)

PT_PER_CM = 28.3464567
DEFAULT_UNIT_CM = 0.02
NORMALIZED_SPAN_CM = 8.0

# debug guides below the construction, marks above it
PROFILE_LAYERS: Dict[StyleProfile, str] = {
    StyleProfile.DEBUG: "bg",
    StyleProfile.DEFAULT: "main",
    StyleProfile.MARKER: "fg",
    StyleProfile.IMPORTANT: "fg",
}
LAYER_ORDER = ("bg", "main", "fg")

standalone_tpl = r"""\documentclass[border=2pt]{standalone}
\usepackage[utf8]{inputenc}
\usepackage{adjustbox}
\usepackage{tikz}
%% optional layers
\pgfdeclarelayer{bg}\pgfdeclarelayer{fg}\pgfsetlayers{bg,main,fg}
\begin{document}
\begin{minipage}[t]{\linewidth}
%s

\begin{adjustbox}{max width=\linewidth, max totalheight=\textheight, keepaspectratio}
%s
\end{adjustbox}
\end{minipage}
\end{document}
"""


def generate_tikz_document(
    drawing: Drawing,
    *,
    caption: Optional[str] = None,
    unit: float = DEFAULT_UNIT_CM,
    normalize: bool = False,
) -> str:
    """Render a standalone LaTeX document containing the drawing."""

    header = ""
    if caption:
        header = (
            "\\noindent\\textbf{"
            + latex_escape_keep_math(caption.strip())
            + "}\\par\\vspace{4pt}\n"
        )
    tikz_code = generate_tikz_code(drawing, unit=unit, normalize=normalize)
    return standalone_tpl % (header, tikz_code)


def generate_tikz_code(
    drawing: Drawing,
    *,
    unit: float = DEFAULT_UNIT_CM,
    normalize: bool = False,
) -> str:
    """Generate a ``tikzpicture`` for ``drawing``.

    Surface coordinates are y-down; TikZ is y-up, so every y is negated and
    arc angles change sign.  ``unit`` is centimetres per surface unit.  With
    ``normalize`` the picture is centred on the origin and scaled so that its
    larger side spans 8cm.
    """

    if not isinstance(drawing, Drawing):
        raise TypeError("drawing must be an instance of Drawing")
    if unit <= 0:
        raise ValueError(f"unit must be positive (got {unit})")

    origin, unit = _prepare_transform(drawing, unit=unit, normalize=normalize)

    layers: Dict[str, List[str]] = {name: [] for name in LAYER_ORDER}
    for stroke in drawing:
        entry = _emit_stroke(stroke, origin, unit)
        if entry is None:
            continue
        layers[PROFILE_LAYERS[stroke.style.profile]].append(entry)

    lines: List[str] = ["\\begin{tikzpicture}[line cap=round]"]
    for name in LAYER_ORDER:
        if not layers[name]:
            continue
        lines.append(f"  \\begin{{pgfonlayer}}{{{name}}}")
        lines.extend("    " + entry for entry in layers[name])
        lines.append("  \\end{pgfonlayer}")
    lines.append("\\end{tikzpicture}")
    logger.info("Generated TikZ for %d stroke(s)", len(drawing))
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Coordinate handling
# ---------------------------------------------------------------------------

def _prepare_transform(
    drawing: Drawing, *, unit: float, normalize: bool
) -> Tuple[Tuple[float, float], float]:
    if not normalize or not len(drawing):
        return (0.0, 0.0), unit
    min_x, min_y, max_x, max_y = drawing.bounds()
    span = max(max_x - min_x, max_y - min_y, 1e-9)
    centre = (0.5 * (min_x + max_x), 0.5 * (min_y + max_y))
    return centre, (NORMALIZED_SPAN_CM / span)


def _project(x: float, y: float, origin: Tuple[float, float], unit: float) -> Tuple[float, float]:
    return ((x - origin[0]) * unit, -(y - origin[1]) * unit)


def _coord(x: float, y: float, origin: Tuple[float, float], unit: float) -> str:
    tx, ty = _project(x, y, origin, unit)
    return f"({_format_float(tx)}, {_format_float(ty)})"


def _style_options(style: Style, unit: float) -> str:
    width_pt = style.width * unit * PT_PER_CM
    return f"draw={style.color}, line width={_format_float(width_pt)}pt"


# ---------------------------------------------------------------------------
# Stroke emission
# ---------------------------------------------------------------------------

def _emit_stroke(stroke: Stroke, origin: Tuple[float, float], unit: float) -> Optional[str]:
    options = _style_options(stroke.style, unit)
    if isinstance(stroke, SegmentStroke):
        return "\\draw[{opts}] {a} -- {b};".format(
            opts=options,
            a=_coord(stroke.p1.x, stroke.p1.y, origin, unit),
            b=_coord(stroke.p2.x, stroke.p2.y, origin, unit),
        )
    if stroke.radius <= 0:
        logger.debug("Skipping %s with non-positive radius", type(stroke).__name__)
        return None
    radius = _format_float(stroke.radius * unit)
    if isinstance(stroke, CircleStroke):
        return "\\draw[{opts}] {c} circle ({r});".format(
            opts=options, c=_coord(stroke.center.x, stroke.center.y, origin, unit), r=radius
        )
    if isinstance(stroke, ArcStroke):
        return _emit_arc(stroke, options, origin, unit)
    raise TypeError(f"unsupported stroke {stroke!r}")


def _emit_arc(stroke: ArcStroke, options: str, origin: Tuple[float, float], unit: float) -> str:
    # a clockwise screen sweep is a clockwise (decreasing) TikZ sweep once y is flipped
    start_deg = -math.degrees(stroke.start)
    end_deg = start_deg - math.degrees(stroke.sweep())
    sx = stroke.center.x + stroke.radius * math.cos(stroke.start)
    sy = stroke.center.y + stroke.radius * math.sin(stroke.start)
    return "\\draw[{opts}] {s} arc[start angle={a}, end angle={b}, radius={r}];".format(
        opts=options,
        s=_coord(sx, sy, origin, unit),
        a=_format_float(start_deg),
        b=_format_float(end_deg),
        r=_format_float(stroke.radius * unit),
    )


def _format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
