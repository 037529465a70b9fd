import math

import pytest

from lathframe.blueprint import ArcLintel, BlueprintSheet, StraightLintel
from lathframe.config import LayoutConfig
from lathframe.drawing.port import RecordingPort
from lathframe.errors import InvalidConfigurationError


def _texts(port):
    return [command.args[0] for command in port.calls("fill_text")]


def test_straight_lintel_is_larger_than_the_piece(port):
    blueprint = StraightLintel("Seat lintel", port, 800, 40)
    blueprint.render()

    assert blueprint.width > 800
    assert blueprint.height > 40
    # Rectangle, width dimension (text 82.5 wide) and thickness dimension (text 66 wide).
    assert blueprint.width == pytest.approx(880 + 146 + 80)
    assert blueprint.height == pytest.approx(155 + 75 + 40)
    assert port.calls("stroke_rect")[0].args == (80.0, 115.0, 800, 40)
    assert _texts(port) == ["Seat lintel", "800mm", "40mm"]


def test_straight_lintel_leaves_port_state_balanced(port):
    StraightLintel("Foot lintel", port, 500, 40).render()
    assert port.names().count("save") == port.names().count("restore")


@pytest.mark.parametrize("width, thickness", [(0, 40), (800, 0), (-10, 40)])
def test_straight_lintel_rejects_non_positive_dimensions(port, width, thickness):
    with pytest.raises(InvalidConfigurationError):
        StraightLintel("Bad", port, width, thickness)


def test_arc_lintel_outer_radius(port):
    blueprint = ArcLintel("Knee arc", port, radius=300, angle=1.0, thickness=40)
    shape = blueprint.layout()

    assert shape.outer_radius == 300
    assert shape.inner_radius == 260
    assert shape.outer_chord_length == pytest.approx(600 * math.sin(0.5))
    assert shape.bounding_box.width == pytest.approx(shape.outer_chord_length)
    assert shape.bounding_box.height == pytest.approx(
        40 + 260 * (1 - math.cos(0.5))
    )
    assert shape.end_angle - shape.start_angle == pytest.approx(1.0)

    blueprint.render()
    radii = sorted(command.args[2] for command in port.calls("arc"))
    assert radii == [260, 300]
    assert blueprint.width > shape.bounding_box.right
    assert blueprint.height > shape.inner_bottom_y
    texts = _texts(port)
    assert "Knee arc" in texts
    assert "57°" in texts
    assert "300mm" in texts and "260mm" in texts


def test_arc_lintel_inner_radius(port):
    blueprint = ArcLintel("Back arc", port, radius=300, angle=0.5, thickness=40, is_inner_radius=True)
    shape = blueprint.layout()
    assert shape.inner_radius == 300
    assert shape.outer_radius == 340
    assert shape.center.y == pytest.approx(shape.inner_top_y + 300)


def test_arc_lintel_sits_symmetric_about_its_center(port):
    shape = ArcLintel("Knee arc", port, radius=300, angle=1.2, thickness=40).layout()
    assert shape.center.x - shape.outer_left.x == pytest.approx(shape.outer_right.x - shape.center.x)
    assert shape.center.x - shape.inner_left.x == pytest.approx(shape.inner_right.x - shape.center.x)


@pytest.mark.parametrize(
    "radius, angle, thickness, inner",
    [(0, 1.0, 40, False), (300, 0.0, 40, False), (300, 1.0, -1, False), (30, 1.0, 40, False)],
)
def test_arc_lintel_rejects_invalid_dimensions(port, radius, angle, thickness, inner):
    with pytest.raises(InvalidConfigurationError):
        ArcLintel("Bad", port, radius, angle, thickness, is_inner_radius=inner)


def test_thin_inner_radius_is_allowed(port):
    ArcLintel("Back arc", port, radius=30, angle=1.0, thickness=40, is_inner_radius=True).render()


def test_sheet_stacks_five_pieces(silhouette, config, port):
    sheet = BlueprintSheet(silhouette, config)
    size = sheet.render(port)

    offsets = [command.args[1] for command in port.calls("translate")]
    assert len(offsets) == 5
    assert offsets[0] == 0.0
    assert offsets == sorted(offsets)
    assert size.height > offsets[-1]
    assert size.width > silhouette.middle_tangent.length

    labels = [text for text in _texts(port) if not text[0].isdigit()]
    assert labels == ["Foot lintel", "Knee arc", "Seat lintel", "Back arc", "Head lintel"]


def test_sheet_measure_matches_render_without_drawing(silhouette, config):
    sheet = BlueprintSheet(silhouette, config)
    measuring_port = RecordingPort()

    measured = sheet.measure(measuring_port)

    assert measured == sheet.render(RecordingPort())
    assert "stroke" not in measuring_port.names()
    assert set(measuring_port.names()) <= {"save", "set_font", "restore"}


def test_sheet_uses_configured_thickness(silhouette, port):
    BlueprintSheet(silhouette, LayoutConfig(lintel_thickness=55)).render(port)
    assert port.calls("stroke_rect")[0].args[3] == 55
    assert "55mm" in _texts(port)


def test_sheet_rejects_invalid_config(silhouette):
    with pytest.raises(InvalidConfigurationError):
        BlueprintSheet(silhouette, LayoutConfig(lintel_thickness=0))
