from __future__ import annotations

import math

import pytest

from proofsketch import Drawing, Style, StyleProfile, draw_circle, draw_line, line, point
from proofsketch.tikz_codegen import (
    generate_tikz_code,
    generate_tikz_document,
    latex_escape_keep_math,
)
from proofsketch.tikz_codegen.generator import _format_float


def _single_segment() -> Drawing:
    drawing = Drawing()
    draw_line(drawing, line(point(0, 0), point(100, 50)))
    return drawing


def test_generate_tikz_document_minimal_preamble() -> None:
    document = generate_tikz_document(_single_segment(), caption="A & B")

    assert document.startswith("\\documentclass[border=2pt]{standalone}")
    assert "\\pgfdeclarelayer{bg}\\pgfdeclarelayer{fg}" in document
    assert "\\textbf{A \\& B}" in document
    assert "\\begin{tikzpicture}[line cap=round]" in document


def test_segment_flips_y_axis_and_uses_style_width() -> None:
    tikz = generate_tikz_code(_single_segment())

    assert "\\draw[draw=black, line width=2.2677pt] (0, 0) -- (2, -1);" in tikz
    assert "\\begin{pgfonlayer}{main}" in tikz
    assert "{bg}" not in tikz


def test_profiles_are_layered_and_coloured() -> None:
    drawing = Drawing()
    draw_line(drawing, line(point(0, 0), point(10, 0)), StyleProfile.DEBUG)
    draw_line(drawing, line(point(0, 0), point(0, 10)), StyleProfile.IMPORTANT)
    draw_line(drawing, line(point(0, 0), point(5, 5)), StyleProfile.MARKER)

    tikz = generate_tikz_code(drawing)

    bg = tikz.index("\\begin{pgfonlayer}{bg}")
    fg = tikz.index("\\begin{pgfonlayer}{fg}")
    assert bg < tikz.index("draw=blue") < fg
    assert fg < tikz.index("draw=red")
    assert "line width=1.7008pt" in tikz


def test_circle_and_zero_radius_circle() -> None:
    drawing = Drawing()
    draw_circle(drawing, line(point(50, 50), point(50, 100)))
    draw_circle(drawing, line(point(10, 10), point(10, 10)))

    tikz = generate_tikz_code(drawing)

    assert "(1, -1) circle (1);" in tikz
    assert tikz.count("circle") == 1


def test_arc_converts_sweep_to_tikz_angles() -> None:
    drawing = Drawing()
    drawing.stroke_arc(point(0, 0), 50.0, 0.0, math.pi / 2, False, Style(StyleProfile.MARKER))
    drawing.stroke_arc(point(0, 0), 50.0, 0.0, math.pi / 2, True, Style(StyleProfile.MARKER))

    tikz = generate_tikz_code(drawing)

    assert "(1, 0) arc[start angle=0, end angle=-90, radius=1];" in tikz
    assert "(1, 0) arc[start angle=0, end angle=270, radius=1];" in tikz


def test_normalize_centres_and_fits_picture() -> None:
    drawing = Drawing()
    draw_line(drawing, line(point(0, 0), point(200, 100)))

    tikz = generate_tikz_code(drawing, normalize=True)

    assert "(-4, 2) -- (4, -2);" in tikz


def test_rejects_non_drawing_and_bad_unit() -> None:
    with pytest.raises(TypeError):
        generate_tikz_code([])  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        generate_tikz_code(Drawing(), unit=0)


def test_format_float_rejects_non_finite() -> None:
    assert _format_float(1.23456) == "1.2346"
    assert _format_float(-0.00001) == "0"
    with pytest.raises(ValueError):
        _format_float(float("nan"))


def test_latex_escape_keeps_math_spans() -> None:
    escaped = latex_escape_keep_math("50% of $a_1 + b$ & #2")

    assert escaped == "50\\% of $a_1 + b$ \\& \\#2"
