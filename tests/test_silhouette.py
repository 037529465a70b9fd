import pytest

from lathframe.errors import DegenerateTangentError, InvalidConfigurationError, SilhouetteOrientationError
from lathframe.model.controls import CircleKey, ControlPrimitives, Handle
from lathframe.model.geometry_primitives import Circle, Point
from lathframe.model.presets import DesignPreset, PRESETS, get_preset
from lathframe.model.silhouette import ArcLink, SilhouetteMetrics, StraightLink, build_silhouette


@pytest.mark.parametrize("preset", list(DesignPreset))
def test_presets_build_with_expected_orientation(preset):
    silhouette = build_silhouette(get_preset(preset))
    assert silhouette.leg_arc.counter_clockwise
    assert silhouette.leg_arc.sweep <= 0
    assert not silhouette.back_arc.counter_clockwise
    assert silhouette.back_arc.sweep >= 0


def test_tangents_start_and_end_at_the_points(controls, silhouette):
    assert silhouette.leg_tangent.p1 == controls.foot_point
    assert silhouette.back_tangent.p2 == controls.head_point
    assert silhouette.leg_tangent.p2.distance_to(controls.leg_circle.center) == pytest.approx(300)
    assert silhouette.middle_tangent.p1.distance_to(controls.leg_circle.center) == pytest.approx(300)
    assert silhouette.middle_tangent.p2.distance_to(controls.back_circle.center) == pytest.approx(320)
    assert silhouette.back_tangent.p1.distance_to(controls.back_circle.center) == pytest.approx(320)


@pytest.mark.parametrize("head_first", [True, False])
def test_links_form_a_continuous_path(controls, silhouette, head_first):
    links = silhouette.links(head_first=head_first)
    assert [type(link) for link in links] == [StraightLink, ArcLink, StraightLink, ArcLink, StraightLink]

    for previous, current in zip(links, links[1:]):
        assert current.start_point.x == pytest.approx(previous.end_point.x)
        assert current.start_point.y == pytest.approx(previous.end_point.y)

    start, end = (controls.head_point, controls.foot_point) if head_first else (
        controls.foot_point, controls.head_point
    )
    assert links[0].start_point == start
    assert links[-1].end_point == end


def test_silhouette_iterates_head_first(silhouette):
    assert list(silhouette) == silhouette.links()
    assert silhouette.length == pytest.approx(sum(link.length for link in silhouette.links(head_first=False)))


def test_metrics_match_the_links(silhouette):
    metrics = SilhouetteMetrics.from_silhouette(silhouette)
    assert metrics.leg_tangent_length == silhouette.leg_tangent.length
    assert metrics.leg_angle == pytest.approx(abs(silhouette.leg_arc.sweep))
    assert metrics.back_arc_length == pytest.approx(320 * metrics.back_angle)
    assert metrics.leg_arc_chord_length < metrics.leg_arc_length
    assert metrics.back_arc_thickness > 0
    assert metrics.leg_angle_degrees == pytest.approx(metrics.leg_angle * 180 / 3.141592653589793)


def test_foot_above_leg_circle_is_rejected(controls):
    moved = controls.moved(Handle.FOOT, Point(805, 700))
    with pytest.raises(SilhouetteOrientationError):
        build_silhouette(moved)


def test_overlapping_circles_have_no_middle_tangent(controls):
    moved = controls.moved(Handle.BACK, Point(900, 1200))
    with pytest.raises(DegenerateTangentError) as excinfo:
        build_silhouette(moved)
    assert excinfo.value.link == "middle tangent"


def test_foot_inside_leg_circle_has_no_leg_tangent(controls):
    moved = controls.moved(Handle.FOOT, controls.leg_circle.center)
    with pytest.raises(DegenerateTangentError) as excinfo:
        build_silhouette(moved)
    assert excinfo.value.link == "leg tangent"


def test_non_positive_radius_is_rejected(controls):
    with pytest.raises(InvalidConfigurationError):
        build_silhouette(controls.resized(CircleKey.BACK, 0.0))


def test_controls_snapshots_are_not_mutated(controls):
    moved = controls.moved(Handle.LEG, Point(1, 2))
    resized = controls.resized(CircleKey.LEG, 123.0)
    assert controls == PRESETS[DesignPreset.DEFAULT]
    assert moved.leg_circle == Circle(Point(1, 2), 300.0)
    assert resized.leg_circle.radius == 123.0
    assert resized.position(Handle.LEG) == controls.position(Handle.LEG)
    assert list(controls.handles()) == [Handle.FOOT, Handle.LEG, Handle.BACK, Handle.HEAD]


def test_unknown_preset():
    with pytest.raises(KeyError):
        get_preset("sofa")
    assert isinstance(get_preset("bed"), ControlPrimitives)
