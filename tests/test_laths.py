import logging
import math

import pytest

from lathframe.config import LayoutConfig
from lathframe.errors import InvalidConfigurationError
from lathframe.model.geometry_primitives import Circle, Point, Segment
from lathframe.model.laths import layout_arc, layout_link, layout_silhouette, layout_straight
from lathframe.model.presets import DesignPreset, get_preset
from lathframe.model.silhouette import ArcLink, StraightLink, build_silhouette


def _straight(length):
    return StraightLink(Segment(Point(0, 0), Point(length, 0)))


def test_straight_link_count_and_leftover():
    layout = layout_straight(_straight(1000), 55, 18)
    # floor(1018 / 73) = 13, 1000 - 13 * 73 = 51
    assert layout.count == 13
    assert layout.leftover == pytest.approx(51)
    assert len(layout.laths) == 13
    assert layout.laths[0] == Segment(Point(0, 0), Point(55, 0))
    assert layout.laths[-1].p1.x == pytest.approx(12 * 73)


@pytest.mark.parametrize("offset", [-54.0, -30.0, -5.0, 0.0, 7.5, 18.0])
def test_straight_link_conserves_length(offset):
    length = 1000
    layout = layout_straight(_straight(length), 55, 18, offset)
    assert layout.count * 73 + offset + layout.leftover == pytest.approx(length)
    assert -18 <= layout.leftover < 55


def test_straight_link_with_positive_offset_starts_inside():
    layout = layout_straight(_straight(1000), 55, 18, offset=10)
    assert layout.count == 13
    assert layout.leftover == pytest.approx(41)
    assert layout.laths[0].p1.x == pytest.approx(10)


def test_straight_link_with_negative_offset_starts_before():
    layout = layout_straight(_straight(1000), 55, 18, offset=-30)
    assert layout.count == 14
    assert layout.leftover == pytest.approx(8)
    assert layout.laths[0].p1.x == pytest.approx(-30)


def test_short_straight_link_carries_no_lath():
    layout = layout_straight(_straight(20), 55, 18, offset=40)
    assert layout.count == 0
    assert layout.laths == ()
    assert layout.leftover == pytest.approx(-20)


def test_arc_link_scenario():
    link = ArcLink(Circle(Point(0, 0), 300), start_angle=0.0, end_angle=1.0)
    layout = layout_arc(link, 55, 18)

    lath_angle = math.asin(55 / 300)
    gap_angle = math.asin(18 / 300)
    expected = math.trunc((1.0 + gap_angle) / (lath_angle + gap_angle))
    assert layout.count == expected == 4
    assert layout.remaining_angle == pytest.approx(1.0 - 4 * (lath_angle + gap_angle))
    assert 0 <= layout.leftover < 55 + 18
    assert layout.leftover == pytest.approx(2 * 300 * math.sin(layout.remaining_angle / 2))


def test_arc_laths_are_chords_of_the_circle():
    circle = Circle(Point(100, 100), 300)
    layout = layout_arc(ArcLink(circle, 0.0, 1.0), 55, 18)
    for lath in layout.laths:
        assert lath.p1.distance_to(circle.center) == pytest.approx(300)
        assert lath.p2.distance_to(circle.center) == pytest.approx(300)
        assert lath.length == pytest.approx(2 * 300 * math.sin(math.asin(55 / 300) / 2))


def test_counter_clockwise_arc_lays_laths_backwards():
    circle = Circle(Point(0, 0), 300)
    forward = layout_arc(ArcLink(circle, 0.0, 1.0), 55, 18)
    backward = layout_arc(ArcLink(circle, 0.0, -1.0, counter_clockwise=True), 55, 18)

    assert backward.count == forward.count
    assert backward.leftover == pytest.approx(forward.leftover)
    assert backward.laths[0].p2.y < 0
    assert backward.laths[0].p2.y == pytest.approx(-forward.laths[0].p2.y)


def test_arc_offset_shifts_the_pattern():
    link = ArcLink(Circle(Point(0, 0), 300), 0.0, 1.0)
    layout = layout_arc(link, 55, 18, offset=10)
    offset_angle = math.asin(10 / 300)
    assert layout.laths[0].p1.x == pytest.approx(300 * math.cos(offset_angle))
    assert layout.laths[0].p1.y == pytest.approx(300 * math.sin(offset_angle))
    assert layout.remaining_angle == pytest.approx(
        1.0 - layout.count * (math.asin(55 / 300) + math.asin(18 / 300)) - offset_angle
    )


def test_arc_smaller_than_lath_places_nothing(caplog):
    link = ArcLink(Circle(Point(0, 0), 40), 0.0, 1.0)
    with caplog.at_level(logging.WARNING, logger="lathframe"):
        layout = layout_arc(link, 55, 18)

    assert layout.count == 0
    assert layout.laths == ()
    assert math.isfinite(layout.leftover)
    assert layout.leftover == pytest.approx(2 * 40 * math.sin(0.5))
    assert "Invalid pattern geometry" in caplog.text


def test_layout_link_dispatches_on_link_type():
    arc = ArcLink(Circle(Point(0, 0), 300), 0.0, 1.0)
    assert layout_link(arc, 55, 18).remaining_angle is not None
    assert layout_link(_straight(100), 55, 18).remaining_angle is None


@pytest.mark.parametrize("width, gap", [(0, 18), (55, 0), (-1, 18)])
def test_non_positive_pattern_is_rejected(width, gap):
    with pytest.raises(InvalidConfigurationError):
        layout_straight(_straight(100), width, gap)
    with pytest.raises(InvalidConfigurationError):
        layout_arc(ArcLink(Circle(Point(0, 0), 300), 0.0, 1.0), width, gap)


def test_silhouette_offsets_chain_from_head_to_foot(silhouette, config):
    layout = layout_silhouette(silhouette, config)

    assert len(layout.links) == 5
    assert layout.links[0].offset == 0.0
    for previous, current in zip(layout.links, layout.links[1:]):
        assert current.offset == -previous.leftover
    assert layout.count == sum(link.count for link in layout.links)
    assert len(layout.laths) == layout.count
    assert layout.leftover == layout.links[-1].leftover


def test_silhouette_layout_starts_at_head(controls, silhouette, config):
    layout = layout_silhouette(silhouette, config)
    first = layout.laths[0]
    assert first.p1.x == pytest.approx(controls.head_point.x)
    assert first.p1.y == pytest.approx(controls.head_point.y)


def test_silhouette_layout_is_deterministic(silhouette, config):
    assert layout_silhouette(silhouette, config) == layout_silhouette(silhouette, config)


@pytest.mark.parametrize("preset", list(DesignPreset))
def test_remaining_length_is_not_negative(preset):
    silhouette = build_silhouette(get_preset(preset))
    layout = layout_silhouette(silhouette, LayoutConfig())
    assert layout.count > 0
    assert layout.remaining_length == pytest.approx(layout.leftover + 18)
    assert layout.remaining_length >= 0


def test_layout_silhouette_validates_config(silhouette):
    with pytest.raises(InvalidConfigurationError):
        layout_silhouette(silhouette, LayoutConfig(lath_width=-5))


@pytest.mark.parametrize("radius, sweep", [(300, 1.0), (215, 0.8), (1000, 0.35), (320, 2.4)])
def test_arc_leftover_converts_back_to_remaining_angle(radius, sweep):
    layout = layout_arc(ArcLink(Circle(Point(0, 0), radius), 0.0, sweep), 55, 18)
    recovered = 2 * math.asin(layout.leftover / (2 * radius))
    assert recovered == pytest.approx(layout.remaining_angle, abs=1e-9)

def test_arc_offset_enters_the_lath_count():
    link = ArcLink(Circle(Point(0, 0), 300), 0.0, 1.0)
    lath_angle = math.asin(55 / 300)
    gap_angle = math.asin(18 / 300)
    offset_angle = math.asin(40 / 300)

    shifted = layout_arc(link, 55, 18, offset=40)

    assert layout_arc(link, 55, 18).count == 4
    assert shifted.count == math.trunc((1.0 - offset_angle + gap_angle) / (lath_angle + gap_angle)) == 3
