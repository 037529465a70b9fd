"""
Blueprint Sheet
===============
Collects the five frame pieces of a design and stacks their blueprints top to
bottom on one drawing surface.

Pieces, from foot to head:
    Foot lintel (leg tangent), Knee arc (leg circle, measured on its outer
    face), Seat lintel (middle tangent), Back arc (back circle, measured on its
    inner face), Head lintel (back tangent).
"""
from __future__ import annotations

import logging

from lathframe.blueprint.arc_lintel import ArcLintel
from lathframe.blueprint.base import Blueprint
from lathframe.blueprint.straight_lintel import StraightLintel
from lathframe.config import LayoutConfig
from lathframe.drawing.port import DrawingPort, RecordingPort
from lathframe.model.geometry_primitives import Size
from lathframe.model.silhouette import Silhouette

logger = logging.getLogger(__name__)


class BlueprintSheet:
    def __init__(self, silhouette: Silhouette, config: LayoutConfig) -> None:
        config.validate()
        self.silhouette = silhouette
        self.config = config

    def pieces(self, port: DrawingPort) -> list[Blueprint]:
        silhouette = self.silhouette
        thickness = self.config.lintel_thickness
        return [
            StraightLintel("Foot lintel", port, silhouette.leg_tangent.length, thickness),
            ArcLintel(
                "Knee arc", port,
                silhouette.leg_arc.radius, silhouette.leg_arc.angle, thickness,
                is_inner_radius=False,
            ),
            StraightLintel("Seat lintel", port, silhouette.middle_tangent.length, thickness),
            ArcLintel(
                "Back arc", port,
                silhouette.back_arc.radius, silhouette.back_arc.angle, thickness,
                is_inner_radius=True,
            ),
            StraightLintel("Head lintel", port, silhouette.back_tangent.length, thickness),
        ]

    def render(self, port: DrawingPort) -> Size:
        """Draw every piece, one below the other, and return the sheet size."""
        offset_y = 0.0
        width = 0.0
        for piece in self.pieces(port):
            port.save()
            port.translate(0.0, offset_y)
            piece.render()
            port.restore()
            offset_y += piece.height
            width = max(width, piece.width)
        logger.debug(f"Blueprint sheet laid out at {width:.0f} x {offset_y:.0f}.")
        return Size(width=width, height=offset_y)

    def measure(self, port: DrawingPort) -> Size:
        """Sheet size on `port`, computed without drawing on it."""

        def text_width(text: str, font_size: float) -> float:
            port.save()
            port.set_font(font_size)
            width = port.measure_text(text).width
            port.restore()
            return width

        return self.render(RecordingPort(text_width=text_width))
