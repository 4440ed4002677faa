import math

from proofsketch import ArcStroke, CircleStroke, Drawing, SegmentStroke, StyleProfile, build_demo_sketch
from proofsketch.tikz_codegen import generate_tikz_document


def test_demo_sketch_builds_every_kind_of_stroke():
    drawing = build_demo_sketch(iterations=3, ratio=0.7)

    assert isinstance(drawing, Drawing)
    kinds = {type(stroke) for stroke in drawing}
    assert kinds == {SegmentStroke, CircleStroke, ArcStroke}
    profiles = {stroke.style.profile for stroke in drawing}
    assert profiles == set(StyleProfile)
    debug_spokes = [s for s in drawing if s.style.profile is StyleProfile.DEBUG]
    assert len(debug_spokes) == 12


def test_demo_sketch_geometry_is_finite():
    drawing = build_demo_sketch(iterations=2)

    for stroke in drawing:
        if isinstance(stroke, SegmentStroke):
            values = (stroke.p1.x, stroke.p1.y, stroke.p2.x, stroke.p2.y)
        else:
            values = (stroke.center.x, stroke.center.y, stroke.radius)
        assert all(math.isfinite(value) for value in values)


def test_more_iterations_add_strokes():
    assert len(build_demo_sketch(iterations=4)) > len(build_demo_sketch(iterations=1))


def test_demo_sketch_renders_to_tikz():
    document = generate_tikz_document(build_demo_sketch(iterations=2), normalize=True)

    assert "\\begin{tikzpicture}" in document
    assert "arc[start angle=" in document
    assert "draw=red" in document
