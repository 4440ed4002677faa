import pytest

from proofsketch import (
    Drawing,
    LayerContext,
    RecedingSquares,
    RightTriangleStaircase,
    SegmentStroke,
    StyleProfile,
    decay_scales,
    layer,
    mark_square_corners,
    line,
    point,
    square,
)


def _seed():
    return line(point(0, 0), point(100, 0))


def test_decay_scales_is_geometric():
    assert list(decay_scales(0.5, 4)) == pytest.approx([1.0, 0.5, 0.25, 0.125])
    assert len(decay_scales(0.8, 0)) == 0


def test_layer_feeds_frames_back_with_scale():
    seen = []

    def step(frame, context: LayerContext):
        seen.append((context.index, context.scale, context.style.width))
        return frame.p2.line_to(frame.vec().scale(context.ratio))

    frames = layer(Drawing(), _seed(), step, 3, ratio=0.5)

    assert len(frames) == 4
    assert frames[0] == _seed()
    assert [frame.length() for frame in frames] == pytest.approx([100, 50, 25, 12.5])
    assert [entry[0] for entry in seen] == [0, 1, 2]
    assert [entry[1] for entry in seen] == pytest.approx([1.0, 0.5, 0.25])
    assert [entry[2] for entry in seen] == pytest.approx([4.0, 2.0, 1.0])


def test_layer_zero_iterations_returns_seed_only():
    drawing = Drawing()

    assert layer(drawing, _seed(), RecedingSquares(), 0) == [_seed()]
    assert len(drawing) == 0


@pytest.mark.parametrize("ratio", [0.0, -0.5, 1.5])
def test_layer_rejects_bad_ratio(ratio):
    with pytest.raises(ValueError):
        layer(Drawing(), _seed(), RecedingSquares(), 2, ratio=ratio)


def test_layer_rejects_negative_iterations():
    with pytest.raises(ValueError):
        layer(Drawing(), _seed(), RecedingSquares(), -1)


def test_staircase_builds_shrinking_right_triangles():
    drawing = Drawing()

    frames = layer(drawing, _seed(), RightTriangleStaircase(slope=30, side=-1), 2, ratio=0.5)

    first_next = frames[1]
    assert first_next.p1.x == pytest.approx(100.0)
    assert first_next.p1.y == pytest.approx(-57.735026919, rel=1e-6)
    assert first_next.p2.x == pytest.approx(150.0)
    assert first_next.length() == pytest.approx(50.0)
    assert frames[2].length() == pytest.approx(25.0)

    # three sides and a two-stroke right-angle mark per iteration
    assert len(drawing) == 10
    run, rise, hypotenuse = drawing.strokes[:3]
    run_vec = (run.p2.x - run.p1.x, run.p2.y - run.p1.y)
    rise_vec = (rise.p2.x - rise.p1.x, rise.p2.y - rise.p1.y)
    assert run_vec[0] * rise_vec[0] + run_vec[1] * rise_vec[1] == pytest.approx(0.0, abs=1e-6)
    assert hypotenuse.p1 == run.p1
    assert hypotenuse.p2.x == pytest.approx(rise.p2.x)


def test_staircase_strokes_shrink_with_scale():
    drawing = Drawing()

    layer(drawing, _seed(), RightTriangleStaircase(), 2, ratio=0.5)

    widths = [stroke.style.width for stroke in drawing]
    assert widths[:3] == pytest.approx([4.0, 4.0, 4.0])
    assert widths[3:5] == pytest.approx([3.0, 3.0])
    assert widths[5:8] == pytest.approx([2.0, 2.0, 2.0])
    assert widths[8:10] == pytest.approx([1.5, 1.5])


def test_staircase_right_angle_mark_faces_the_triangle():
    drawing = Drawing()

    layer(drawing, _seed(), RightTriangleStaircase(slope=30, side=-1, marks=True), 1)

    corner = drawing.strokes[3].p2
    # the corner of the tick lies inside the triangle: left of the rise, above the run
    assert corner.x == pytest.approx(90.0)
    assert corner.y == pytest.approx(-10.0)


def test_receding_squares_row():
    drawing = Drawing()

    frames = layer(drawing, _seed(), RecedingSquares(), 2, ratio=0.5, style=StyleProfile.IMPORTANT)

    assert frames[1].p1 == point(100, 0)
    assert frames[1].p2.x == pytest.approx(150.0)
    # four sides plus one two-stroke hatch each
    assert len(drawing) == 24
    sides = [stroke for stroke in drawing.strokes if stroke.style.profile is StyleProfile.IMPORTANT]
    assert len(sides) == 8
    assert all(isinstance(stroke, SegmentStroke) for stroke in sides)


def test_square_closes():
    sides = square(_seed())

    assert sides[3].p2.x == pytest.approx(0.0, abs=1e-9)
    assert sides[3].p2.y == pytest.approx(0.0, abs=1e-9)
    assert sides[1].p2.y == pytest.approx(100.0)
    flipped = square(_seed(), -1)
    assert flipped[1].p2.y == pytest.approx(-100.0)


def test_square_corners_are_marked_inside():
    drawing = Drawing()

    mark_square_corners(drawing, square(_seed()))

    assert len(drawing) == 8
    corners = {(round(s.p2.x, 6), round(s.p2.y, 6)) for s in drawing}
    assert corners == {(10.0, 10.0), (90.0, 10.0), (90.0, 90.0), (10.0, 90.0)}


def test_square_corners_follow_flipped_side():
    drawing = Drawing()

    mark_square_corners(drawing, square(_seed(), -1), -1)

    corners = {(round(s.p2.x, 6), round(s.p2.y, 6)) for s in drawing}
    assert corners == {(10.0, -10.0), (90.0, -10.0), (90.0, -90.0), (10.0, -90.0)}


def test_receding_squares_right_angles_opt_in():
    plain = Drawing()
    marked = Drawing()

    layer(plain, _seed(), RecedingSquares(), 1)
    layer(marked, _seed(), RecedingSquares(right_angles=True), 1)

    assert len(marked) == len(plain) + 8
