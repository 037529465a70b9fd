"""
Blueprint of an arced frame piece: an annular sector drawn with its chord
bounding box, both radii, the bounding box dimensions and the sweep angle.

The piece is drawn symmetric about the vertical axis with the arc bulging
upwards. `radius` is the inner face radius when `is_inner_radius` is set and
the outer face radius otherwise; the other face is offset by `thickness`.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from lathframe.blueprint.base import (
    DASH_PATTERN,
    GUIDE_COLOR,
    LINE_COLOR,
    Blueprint,
    MeasureStyle,
    format_length,
)
from lathframe.drawing.port import DrawingPort
from lathframe.errors import InvalidConfigurationError
from lathframe.model import geometry
from lathframe.model.angles import FULL_CIRCLE, HALF_CIRCLE, rad2deg
from lathframe.model.geometry_primitives import BoundingBox, Point, Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArcLintelGeometry:
    """Positions of the annular sector within the blueprint."""
    start_angle: float
    end_angle: float
    center: Point
    outer_radius: float
    inner_radius: float
    outer_chord_length: float
    inner_chord_length: float
    outer_top_y: float
    outer_bottom_y: float
    inner_top_y: float
    inner_bottom_y: float

    @property
    def outer_left(self) -> Point:
        return Point(self.center.x - self.outer_chord_length / 2, self.outer_bottom_y)

    @property
    def outer_right(self) -> Point:
        return Point(self.center.x + self.outer_chord_length / 2, self.outer_bottom_y)

    @property
    def inner_left(self) -> Point:
        return Point(self.center.x - self.inner_chord_length / 2, self.inner_bottom_y)

    @property
    def inner_right(self) -> Point:
        return Point(self.center.x + self.inner_chord_length / 2, self.inner_bottom_y)

    @property
    def bounding_box(self) -> BoundingBox:
        return BoundingBox(
            x=self.outer_left.x,
            y=self.outer_top_y,
            width=self.outer_chord_length,
            height=self.inner_bottom_y - self.outer_top_y,
        )


class ArcLintel(Blueprint):
    horizontal_padding = 80.0
    vertical_padding = 40.0
    label_offset = 60.0
    vertical_measure_offset = 100.0

    def __init__(
        self,
        label: str,
        port: DrawingPort,
        radius: float,
        angle: float,
        thickness: float,
        is_inner_radius: bool = False,
        style: MeasureStyle = MeasureStyle(),
    ) -> None:
        super().__init__(port, style)
        if not radius > 0.0 or not thickness > 0.0 or not angle > 0.0:
            raise InvalidConfigurationError(
                f"Arc piece '{label}' needs a positive radius, angle and thickness, "
                f"got r={radius!r}, angle={angle!r}, thickness={thickness!r}."
            )
        if not is_inner_radius and not radius > thickness:
            raise InvalidConfigurationError(
                f"Arc piece '{label}' is thicker ({thickness!r}) than its outer radius ({radius!r})."
            )
        self.label = label
        self.radius = radius
        self.angle = angle
        self.thickness = thickness
        self.is_inner_radius = is_inner_radius

    def is_outer_measurement(self, length: float) -> bool:
        """Whether a horizontal dimension of `length` will have its label pushed off the line."""
        label_width = self.text_width(format_length(length))
        arrow_length = (length - (label_width + self.style.label_margin * 2)) / 2
        return arrow_length < self.style.arrow_size * 2

    def layout(self) -> ArcLintelGeometry:
        font_size = self.style.font_size
        label_y = self.vertical_padding + font_size / 2
        half_remaining_angle = (HALF_CIRCLE - self.angle) / 2

        if self.is_inner_radius:
            outer_radius = self.radius + self.thickness
            inner_radius = self.radius
        else:
            outer_radius = self.radius
            inner_radius = self.radius - self.thickness

        outer_chord = geometry.arc_chord_length(outer_radius, self.angle)
        inner_chord = geometry.arc_chord_length(inner_radius, self.angle)

        outer_top_y = (
            label_y
            + self.style.offset
            + (font_size if self.is_outer_measurement(outer_chord) else 0.0)
            + font_size / 2
            + self.label_offset
        )
        inner_top_y = outer_top_y + self.thickness
        center_x = self.horizontal_padding + outer_chord / 2
        center_y = (inner_top_y if self.is_inner_radius else outer_top_y) + self.radius

        return ArcLintelGeometry(
            start_angle=HALF_CIRCLE + half_remaining_angle,
            end_angle=FULL_CIRCLE - half_remaining_angle,
            center=Point(center_x, center_y),
            outer_radius=outer_radius,
            inner_radius=inner_radius,
            outer_chord_length=outer_chord,
            inner_chord_length=inner_chord,
            outer_top_y=outer_top_y,
            outer_bottom_y=outer_top_y + geometry.arc_sagitta(outer_radius, self.angle),
            inner_top_y=inner_top_y,
            inner_bottom_y=inner_top_y + geometry.arc_sagitta(inner_radius, self.angle),
        )

    def render(self) -> None:
        port = self.port
        font_size = self.style.font_size
        shape = self.layout()
        center = shape.center
        box = shape.bounding_box
        label_y = self.vertical_padding + font_size / 2

        port.save()
        port.set_fill_style(LINE_COLOR)
        port.set_stroke_style(LINE_COLOR)
        self._set_font()
        port.set_text_baseline("middle")

        # Angle guide & chord box
        port.save()
        port.set_stroke_style(GUIDE_COLOR)
        port.set_line_dash(DASH_PATTERN)
        port.begin_path()
        port.move_to(shape.inner_left.x, shape.inner_left.y)
        port.line_to(center.x, center.y)
        port.line_to(shape.inner_right.x, shape.inner_right.y)
        port.stroke()
        port.stroke_rect(box.x, box.y, box.width, box.height)
        port.restore()

        # Piece outline
        port.begin_path()
        port.arc(center.x, center.y, shape.inner_radius, shape.start_angle, shape.end_angle)
        port.arc(center.x, center.y, shape.outer_radius, shape.end_angle, shape.start_angle, True)
        port.close_path()
        port.stroke()

        measures = [
            self.draw_measure(
                format_length(shape.outer_radius),
                center,
                shape.outer_right,
            ),
            self.draw_measure(
                format_length(shape.inner_radius),
                shape.inner_left,
                center,
            ),
            self.draw_measure(
                format_length(box.width),
                Point(box.right, box.y),
                Point(box.x, box.y),
            ),
            self.draw_measure(
                format_length(box.height),
                Point(box.right, box.bottom),
                Point(box.right, box.y),
                self.vertical_measure_offset,
            ),
        ]

        port.fill_text(self.label, box.x, label_y)

        angle_label = f"{round(rad2deg(self.angle))}°"
        angle_label_y = shape.inner_bottom_y + font_size
        port.set_text_align("center")
        port.fill_text(angle_label, center.x, angle_label_y)
        port.restore()

        label_width = self.text_width(self.label)
        angle_label_width = self.text_width(angle_label)
        right = max(
            [box.right, box.x + label_width, center.x + angle_label_width / 2]
            + [measure.right for measure in measures]
        )
        bottom = max(
            [box.bottom, angle_label_y + font_size / 2]
            + [measure.bottom for measure in measures]
        )
        self._size = Size(width=right + self.horizontal_padding, height=bottom + self.vertical_padding)
        logger.debug(f"Rendered '{self.label}' at {self.width:.0f} x {self.height:.0f}.")
