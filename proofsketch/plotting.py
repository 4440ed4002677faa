"""matplotlib rendering of recorded drawings."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Union

from .drawing import ArcStroke, CircleStroke, Drawing, SegmentStroke

logger = logging.getLogger(__name__)

# canvas line widths are pixels; matplotlib wants points at 72/inch
PX_TO_PT = 0.75
MARGIN_FRACTION = 0.05


def render_drawing(drawing: Drawing, ax=None):
    """Draw every stroke of ``drawing`` on ``ax`` (a new figure if omitted).

    The y-axis is inverted so the picture reads as it would on a canvas.
    Returns the axes.
    """

    import matplotlib.pyplot as plt
    from matplotlib.patches import Arc, Circle

    if ax is None:
        _, ax = plt.subplots(figsize=(8, 8))

    for stroke in drawing:
        style = stroke.style
        width = style.width * PX_TO_PT
        if isinstance(stroke, SegmentStroke):
            ax.plot(
                [stroke.p1.x, stroke.p2.x],
                [stroke.p1.y, stroke.p2.y],
                color=style.color,
                linewidth=width,
                solid_capstyle=style.line_cap,
            )
        elif isinstance(stroke, CircleStroke):
            ax.add_patch(
                Circle(
                    (stroke.center.x, stroke.center.y),
                    stroke.radius,
                    fill=False,
                    edgecolor=style.color,
                    linewidth=width,
                )
            )
        elif isinstance(stroke, ArcStroke):
            sweep = math.degrees(stroke.sweep())
            start = math.degrees(stroke.start)
            # Arc always sweeps counterclockwise in data space (clockwise on screen once y is inverted)
            theta1, theta2 = (start, start + sweep) if sweep >= 0 else (start + sweep, start)
            diameter = 2 * stroke.radius
            ax.add_patch(
                Arc(
                    (stroke.center.x, stroke.center.y),
                    diameter,
                    diameter,
                    theta1=theta1,
                    theta2=theta2,
                    edgecolor=style.color,
                    linewidth=width,
                )
            )

    min_x, min_y, max_x, max_y = drawing.bounds()
    margin = max(max_x - min_x, max_y - min_y, 1.0) * MARGIN_FRACTION
    ax.set_xlim(min_x - margin, max_x + margin)
    ax.set_ylim(max_y + margin, min_y - margin)
    ax.set_aspect("equal", adjustable="box")
    ax.axis("off")
    return ax


def save_png(drawing: Drawing, path: Union[str, Path], *, dpi: int = 100, size: float = 8.0) -> Path:
    """Rasterise ``drawing`` to ``path`` with the Agg back end."""

    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fig, ax = plt.subplots(figsize=(size, size))
    try:
        render_drawing(drawing, ax)
        fig.tight_layout()
        fig.savefig(target, dpi=dpi)
    finally:
        plt.close(fig)
    logger.info("Wrote %d stroke(s) to %s", len(drawing), target)
    return target
