import math

import pytest

from lathframe.blueprint.base import MeasureStyle, format_length, plan_measure
from lathframe.blueprint.straight_lintel import StraightLintel
from lathframe.drawing.port import RecordingPort
from lathframe.model.geometry_primitives import Point


def test_long_horizontal_measure_is_inner():
    layout = plan_measure(90, Point(0, 0), Point(800, 0))

    assert not layout.is_outer
    assert layout.constrained_by_label_width
    assert layout.arrow_direction == 1
    assert layout.start.y == pytest.approx(60)
    assert layout.end.x == pytest.approx(800)
    assert layout.label_position == layout.center
    assert layout.arrow_length == pytest.approx(400 - 65)
    assert len(layout.measure_lines) == 2
    assert layout.bounding_box.contains(Point(0, 0))
    assert layout.bounding_box.contains(Point(800, 0))
    assert layout.bounding_box.bottom == pytest.approx(60 + 15)


def test_short_horizontal_measure_is_outer():
    layout = plan_measure(90, Point(0, 0), Point(100, 0))

    assert layout.is_outer
    assert layout.arrow_direction == -1
    assert len(layout.measure_lines) == 1
    # Label pushed below the line by half its height.
    assert layout.label_position.x == pytest.approx(50)
    assert layout.label_position.y == pytest.approx(60 + 35)


def test_short_vertical_measure_pushes_label_sideways():
    layout = plan_measure(66, Point(800, 40), Point(800, 0))

    assert layout.is_negative_angle
    assert not layout.constrained_by_label_width
    assert layout.is_outer
    assert layout.start.x == pytest.approx(860)
    assert layout.start.y == pytest.approx(40)
    assert layout.label_position.x == pytest.approx(860 + (66 + 40) / 2)
    assert layout.label_position.y == pytest.approx(20)
    assert layout.bounding_box.right == pytest.approx(layout.label_position.x + 33)


@pytest.mark.parametrize(
    "p2, expected",
    [
        (Point(100, 0), True),
        (Point(-100, 0), True),
        (Point(0, 100), False),
        (Point(-100, 100), False),
        (Point(100, 100 * math.tan(0.3)), True),
        (Point(100, 100 * math.tan(0.6)), False),
        (Point(100, -100 * math.tan(0.3)), True),
    ],
)
def test_label_constraint_follows_angle_modulo_half_turn(p2, expected):
    # Label box 130 x 70, so the threshold is atan(70 / 130) ~ 0.494 rad.
    layout = plan_measure(90, Point(0, 0), p2)
    assert layout.label_width == 130
    assert layout.label_height == 70
    assert layout.constrained_by_label_width is expected


def test_explicit_offset_overrides_style():
    layout = plan_measure(90, Point(0, 0), Point(800, 0), offset=100)
    assert layout.start.y == pytest.approx(100)


def test_style_changes_label_box():
    style = MeasureStyle(label_margin=5, font_size=10)
    layout = plan_measure(50, Point(0, 0), Point(800, 0), style=style)
    assert layout.label_width == 60
    assert layout.label_height == 20


def test_arrows_point_at_the_line_ends():
    layout = plan_measure(90, Point(0, 0), Point(800, 0))
    (first, tip, last), (first_end, tip_end, last_end) = layout.arrows
    assert tip == layout.start
    assert tip_end == layout.end
    # Inner arrows open towards the label.
    assert first.x > tip.x and last.x > tip.x
    assert first_end.x < tip_end.x and last_end.x < tip_end.x


def test_format_length_rounds_to_whole_millimeters():
    assert format_length(799.6) == "800mm"
    assert format_length(40) == "40mm"


ANGLES = [0.0, 0.3, 0.7, math.pi / 2, 2.0, 2.9, math.pi, -0.3, -1.0, -math.pi / 2, -2.5]


def _anchor(length, angle):
    return Point(200 + length * math.cos(angle), 300 + length * math.sin(angle))


@pytest.mark.parametrize("length", [800, 60])
@pytest.mark.parametrize("angle", ANGLES)
def test_bounding_box_contains_anchors_and_label(length, angle):
    style = MeasureStyle()
    p1 = Point(200, 300)
    p2 = _anchor(length, angle)
    layout = plan_measure(90, p1, p2, style=style)
    box = layout.bounding_box
    label = layout.label_position

    assert box.contains(p1)
    assert box.contains(p2)
    assert box.contains(Point(label.x - 45, label.y - style.font_size / 2))
    assert box.contains(Point(label.x + 45, label.y + style.font_size / 2))


def test_measure_angles_cover_inner_and_outer_modes():
    modes = {
        plan_measure(90, Point(200, 300), _anchor(length, angle)).is_outer
        for length in (800, 60)
        for angle in ANGLES
    }
    assert modes == {True, False}


def test_coincident_anchors_still_give_a_finite_box():
    port = RecordingPort()
    blueprint = StraightLintel("Piece", port, 100, 40)
    anchor = Point(50, 50)

    layout = blueprint.plan_measure("0mm", anchor, anchor)
    box = blueprint.draw_measure("0mm", anchor, anchor)

    assert layout.start == layout.end
    assert layout.arrows[0][1] == layout.arrows[1][1]
    assert all(math.isfinite(value) for value in (box.x, box.y, box.width, box.height))
    assert box.contains(anchor)
    half_text = layout.text_width / 2
    assert box.contains(Point(layout.label_position.x - half_text, layout.label_position.y - 15))
    assert box.contains(Point(layout.label_position.x + half_text, layout.label_position.y + 15))
    assert ("fill_text", ("0mm", layout.label_position.x, layout.label_position.y)) in [
        (command.name, command.args) for command in port.commands
    ]
