import pytest

from lathframe.config import DisplayOptions
from lathframe.drawing.mpl_port import MatplotlibPort
from lathframe.drawing.port import DrawingPort, RecordingPort, estimate_text_width
from lathframe.drawing.scene import LATH_COLOR, MUTED_LINE_COLOR, render_scene
from lathframe.model.laths import layout_silhouette


@pytest.mark.parametrize(
    "color, expected",
    [
        ("#f00", (1.0, 0.0, 0.0, 1.0)),
        ("#ff000080", (1.0, 0.0, 0.0, 128 / 255)),
        ("#abcd", (0xAA / 255, 0xBB / 255, 0xCC / 255, 0xDD / 255)),
    ],
)
def test_matplotlib_port_parses_css_colors(color, expected):
    port = MatplotlibPort(100, 100)
    port.set_stroke_style(color)
    port.set_fill_style(color)
    port.begin_path()
    port.move_to(0, 0)
    port.line_to(50, 50)
    port.stroke()
    port.fill_rect(10, 10, 20, 20)

    stroked, filled = port.axes.patches[-2:]
    assert tuple(stroked.get_edgecolor()) == pytest.approx(expected)
    assert tuple(filled.get_facecolor()) == pytest.approx(expected)


@pytest.mark.parametrize("color", ["#12345", "#ggg"])
def test_matplotlib_port_rejects_bad_colors(color):
    port = MatplotlibPort(100, 100)
    port.set_stroke_style(color)
    with pytest.raises(ValueError):
        port.stroke_rect(0, 0, 10, 10)


def test_matplotlib_port_applies_translation():
    port = MatplotlibPort(100, 100)
    port.save()
    port.translate(5, 7)
    port.stroke_rect(10, 10, 20, 20)
    port.restore()
    port.stroke_rect(10, 10, 20, 20)

    moved, plain = port.axes.patches[-2:]
    assert tuple(moved.get_xy()) == (15, 17)
    assert tuple(plain.get_xy()) == (10, 10)


def test_recording_port_records_and_restores_font(port):
    assert isinstance(port, DrawingPort)
    port.save()
    port.set_font(30)
    assert port.measure_text("abcd").width == pytest.approx(estimate_text_width("abcd", 30))
    port.restore()
    assert port.font_size == 10
    port.set_line_dash([1, 2])
    assert port.names() == ["save", "set_font", "restore", "set_line_dash"]
    assert port.calls("set_line_dash")[0].args == ((1, 2),)
    port.clear()
    assert port.commands == []


def test_recording_port_custom_text_width():
    port = RecordingPort(text_width=lambda text, size: 7.0)
    assert port.measure_text("anything").width == 7.0


def test_scene_draws_everything(port, controls, silhouette, config):
    laths = layout_silhouette(silhouette, config)
    render_scene(port, controls, silhouette, laths)

    # Background first, then 4 handles, 2 construction circles and 2 arcs.
    assert port.names()[:2] == ["save", "clear_rect"]
    assert len(port.calls("arc")) == 8
    assert ("set_stroke_style", (LATH_COLOR,)) in [(c.name, c.args) for c in port.commands]
    # Three tangents, four angle guide radii and one segment per lath.
    assert len(port.calls("line_to")) == 3 + 4 + laths.count
    assert port.names().count("save") == port.names().count("restore")


def test_scene_respects_display_options(port, controls, silhouette, config):
    laths = layout_silhouette(silhouette, config)
    display = DisplayOptions(construction_lines=False, construction_handles=False, laths=False)
    render_scene(port, controls, silhouette, laths, display)

    assert len(port.calls("arc")) == 2
    assert len(port.calls("line_to")) == 3
    assert port.calls("set_stroke_style")[0].args == (MUTED_LINE_COLOR,)


def test_scene_without_silhouette_draws_primitives_only(port, controls):
    render_scene(port, controls)
    assert len(port.calls("arc")) == 6
    assert port.calls("line_to") == []
