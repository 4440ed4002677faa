from .angles import angular_distance, normalize_dir, radians_to_screen, screen_to_radians
from .vector import Vector, vector, vector_dir
from .errors import (
    GeometryError,
    DegenerateConfigurationError,
    ParallelLinesError,
    SegmentsDisjointError,
)
from .kernel import (
    PARALLEL_TOLERANCE,
    Point,
    Line,
    point,
    line,
    intersect_params,
    angle_between,
    incircle,
)
from .styles import Style, StyleProfile, resolve_style
from .config import AnnotationConfig, get_annotation_config, set_annotation_config
from .drawing import (
    Surface,
    Drawing,
    SegmentStroke,
    CircleStroke,
    ArcStroke,
    draw_line,
    draw_lines,
    draw_circle,
    draw_arc,
)
from .annotations import mark_hatches, mark_arrows, mark_right_angle, mark_angle, swept_angle
from .layering import (
    LayerContext,
    RecedingSquares,
    RightTriangleStaircase,
    decay_scales,
    layer,
    mark_square_corners,
    square,
)
from .tikz_codegen import generate_tikz_code, generate_tikz_document, latex_escape_keep_math
from .plotting import render_drawing, save_png
from .demo import build_demo_sketch

__all__ = [
    'angular_distance',
    'normalize_dir',
    'radians_to_screen',
    'screen_to_radians',
    'Vector',
    'vector',
    'vector_dir',
    'GeometryError',
    'DegenerateConfigurationError',
    'ParallelLinesError',
    'SegmentsDisjointError',
    'PARALLEL_TOLERANCE',
    'Point',
    'Line',
    'point',
    'line',
    'intersect_params',
    'angle_between',
    'incircle',
    'Style',
    'StyleProfile',
    'resolve_style',
    'AnnotationConfig',
    'get_annotation_config',
    'set_annotation_config',
    'Surface',
    'Drawing',
    'SegmentStroke',
    'CircleStroke',
    'ArcStroke',
    'draw_line',
    'draw_lines',
    'draw_circle',
    'draw_arc',
    'mark_hatches',
    'mark_arrows',
    'mark_right_angle',
    'mark_angle',
    'swept_angle',
    'LayerContext',
    'RecedingSquares',
    'RightTriangleStaircase',
    'decay_scales',
    'layer',
    'mark_square_corners',
    'square',
    'generate_tikz_code',
    'generate_tikz_document',
    'latex_escape_keep_math',
    'render_drawing',
    'save_png',
    'build_demo_sketch',
]
