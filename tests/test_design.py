import xml.etree.ElementTree as ET

import pytest

from lathframe.__main__ import EXIT_REJECTED, SUMMARY_LABELS, main
from lathframe.config import LayoutConfig
from lathframe.controller.design import compute_design
from lathframe.controller.export import export_blueprints
from lathframe.drawing.port import RecordingPort
from lathframe.errors import InvalidConfigurationError, SilhouetteError
from lathframe.model.controls import Handle
from lathframe.model.geometry_primitives import Point


def test_compute_design(controls, config):
    design = compute_design(controls, config)

    assert design.lath_count == design.laths.count > 0
    assert design.remaining_length == pytest.approx(design.laths.leftover + config.lath_gap)
    summary = design.summary()
    assert set(summary) == set(SUMMARY_LABELS)
    assert summary["lath_count"] == design.lath_count
    assert summary["leg_angle"] == round(design.metrics.leg_angle_degrees)
    assert all(isinstance(value, int) for value in summary.values())


def test_compute_design_rejects_invalid_input(controls, config):
    with pytest.raises(SilhouetteError):
        compute_design(controls.moved(Handle.FOOT, Point(805, 700)), config)
    with pytest.raises(InvalidConfigurationError):
        compute_design(controls, LayoutConfig(lath_gap=0))


def test_wider_laths_mean_fewer_laths(controls):
    narrow = compute_design(controls, LayoutConfig(lath_width=40))
    wide = compute_design(controls, LayoutConfig(lath_width=80))
    assert wide.lath_count < narrow.lath_count


def test_export_svg(tmp_path, controls, config):
    design = compute_design(controls, config)
    out = tmp_path / "sheet.svg"

    size = export_blueprints(design, out)

    assert size.width > 0 and size.height > 0
    ET.parse(str(out))


def test_export_rejects_unknown_format(tmp_path, controls, config):
    design = compute_design(controls, config)
    with pytest.raises(ValueError):
        export_blueprints(design, tmp_path / "sheet.txt")


def test_cli_prints_summary(capsys):
    assert main(["--preset", "seat"]) == 0
    out = capsys.readouterr().out
    for label in SUMMARY_LABELS.values():
        assert label in out


def test_cli_rejects_invalid_dimensions(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--lath-width", "0"])
    assert excinfo.value.code == 2


def test_cli_exports(tmp_path, capsys):
    out = tmp_path / "sheet.pdf"
    assert main(["--export", str(out)]) == 0
    assert out.stat().st_size > 0
    assert "Blueprints written" in capsys.readouterr().out


def test_exit_code_for_rejected_design_is_distinct():
    assert EXIT_REJECTED != 0


def test_compute_design_rejects_thickness_beyond_knee_radius(controls, silhouette):
    knee_radius = silhouette.leg_arc.radius
    for thickness in (knee_radius, knee_radius + 50):
        with pytest.raises(InvalidConfigurationError, match="knee arc radius"):
            compute_design(controls, LayoutConfig(lintel_thickness=thickness))


def test_thickness_just_below_knee_radius_still_draws(controls, silhouette):
    thickness = silhouette.leg_arc.radius - 1
    design = compute_design(controls, LayoutConfig(lintel_thickness=thickness))

    size = design.blueprint_sheet().measure(RecordingPort())
    assert size.width > 0
    assert size.height > 0


def test_cli_reports_rejected_thickness(silhouette, caplog):
    thickness = silhouette.leg_arc.radius
    assert main(["--thickness", str(thickness)]) == EXIT_REJECTED
    assert "knee arc radius" in caplog.text
