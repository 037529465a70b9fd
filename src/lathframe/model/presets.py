"""
Design presets: ready-made control primitive placements.
"""
from __future__ import annotations

from enum import StrEnum

from lathframe.model.controls import ControlPrimitives
from lathframe.model.geometry_primitives import Circle, Point


class DesignPreset(StrEnum):
    DEFAULT = "default"
    SEAT = "seat"
    BED = "bed"


PRESETS: dict[DesignPreset, ControlPrimitives] = {
    DesignPreset.DEFAULT: ControlPrimitives(
        leg_circle=Circle(center=Point(805.0, 1360.0), radius=300.0),
        back_circle=Circle(center=Point(1200.0, 850.0), radius=320.0),
        foot_point=Point(200.0, 1325.0),
        head_point=Point(1950.0, 705.0),
    ),
    DesignPreset.SEAT: ControlPrimitives(
        leg_circle=Circle(center=Point(805.0, 1277.0), radius=215.0),
        back_circle=Circle(center=Point(1176.0, 578.0), radius=535.0),
        foot_point=Point(262.0, 1393.0),
        head_point=Point(1847.0, 514.0),
    ),
    DesignPreset.BED: ControlPrimitives(
        leg_circle=Circle(center=Point(805.0, 1365.0), radius=300.0),
        back_circle=Circle(center=Point(1207.0, 108.0), radius=1000.0),
        foot_point=Point(185.0, 1253.0),
        head_point=Point(2110.0, 945.0),
    ),
}


def get_preset(name: str | DesignPreset) -> ControlPrimitives:
    """Look up a preset by name. Raises KeyError for unknown names."""
    try:
        return PRESETS[DesignPreset(name)]
    except ValueError as exc:
        raise KeyError(name) from exc
