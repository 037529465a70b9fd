"""
Dimension Annotations
=====================
Shared base of the blueprints: a linear dimension between two anchor points,
offset perpendicular to the anchor direction, with two arrows and a label.

Why is this file needed?
------------------------
Every blueprint needs to know how much room its dimensions take, so the sheet
can be sized before anything overlaps. `plan_measure` computes the whole
dimension (line endpoints, arrow strokes, label position and bounding box)
without drawing; `Blueprint.draw_measure` draws that plan through the port.

Classification:
    inner: the arrows point inwards, the dimension line is split around the
        label which sits centered on it.
    outer: there is not enough room for two arrows next to the label; the
        arrows point outwards, the line runs edge to edge and the label is
        pushed off the line.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import math
from typing import Optional

from lathframe.drawing.port import DrawingPort
from lathframe.model import geometry
from lathframe.model.angles import EIGHTH_CIRCLE, HALF_CIRCLE, QUARTER_CIRCLE
from lathframe.model.geometry_primitives import BoundingBox, Point, Size, Vector

LINE_COLOR = "#000"
LEADER_COLOR = "#bbb"
MEASURE_LINE_COLOR = "#666"
GUIDE_COLOR = "#aaa"
DASH_PATTERN = (10.0, 8.0)


@dataclass(frozen=True)
class MeasureStyle:
    offset: float = 60.0
    label_margin: float = 20.0
    arrow_size: float = 25.0
    arrow_angle: float = EIGHTH_CIRCLE
    font_size: float = 30.0
    font_family: str = "Arial"


@dataclass(frozen=True)
class MeasureLayout:
    """Every quantity derived while laying out one dimension."""
    p1: Point
    p2: Point
    start: Point
    end: Point
    center: Point
    measure_angle: float
    is_negative_angle: bool
    constrained_by_label_width: bool
    is_outer: bool
    arrow_length: float
    arrow_start_offset: Vector
    upper_arrow: Vector
    lower_arrow: Vector
    arrow_direction: int
    text_width: float
    label_width: float
    label_height: float
    label_position: Point
    bounding_box: BoundingBox

    @property
    def leader_lines(self) -> tuple[tuple[Point, Point], tuple[Point, Point]]:
        return (self.p1, self.start), (self.p2, self.end)

    @property
    def measure_lines(self) -> list[tuple[Point, Point]]:
        """The dimension line, or its two halves around the label."""
        if self.is_outer:
            return [(self.start, self.end)]
        return [
            (self.start, self.center - self.arrow_start_offset),
            (self.end, self.center + self.arrow_start_offset),
        ]

    @property
    def arrows(self) -> tuple[tuple[Point, Point, Point], tuple[Point, Point, Point]]:
        """Each arrow as a three point polyline through its tip."""
        direction = self.arrow_direction
        return (
            (
                self.start + self.upper_arrow * direction,
                self.start,
                self.start + self.lower_arrow * direction,
            ),
            (
                self.end - self.upper_arrow * direction,
                self.end,
                self.end - self.lower_arrow * direction,
            ),
        )


def plan_measure(
    label_text_width: float,
    p1: Point,
    p2: Point,
    offset: Optional[float] = None,
    style: MeasureStyle = MeasureStyle(),
) -> MeasureLayout:
    """
    Lay out a dimension from `p1` to `p2` without drawing it.

    Args:
        label_text_width: Width of the label text in the measure font.
        p1: First anchor point.
        p2: Second anchor point.
        offset: Perpendicular distance of the dimension line, defaults to the style offset.
        style: Dimension constants.
    """
    measure_offset = style.offset if offset is None else offset
    measure_angle = geometry.angle(p1, p2)
    is_negative = measure_angle < 0 or measure_angle >= HALF_CIRCLE
    sign = -1 if is_negative else 1

    offset_vector = Vector(
        geometry.adjacent_length(measure_offset, measure_angle + QUARTER_CIRCLE),
        geometry.opposite_length(measure_offset, measure_angle + QUARTER_CIRCLE),
    )
    upper_angle = measure_angle - style.arrow_angle
    lower_angle = measure_angle + style.arrow_angle
    upper_arrow = Vector(
        geometry.adjacent_length(style.arrow_size, upper_angle),
        geometry.opposite_length(style.arrow_size, upper_angle),
    )
    lower_arrow = Vector(
        geometry.adjacent_length(style.arrow_size, lower_angle),
        geometry.opposite_length(style.arrow_size, lower_angle),
    )

    start = p1 + offset_vector
    end = p2 + offset_vector
    center = start.midpoint(end)

    label_width = label_text_width + style.label_margin * 2
    label_height = style.font_size + style.label_margin * 2
    label_angle = math.atan(label_height / label_width)
    # Precedence: (|angle| mod half turn) - label angle.
    constrained_by_width = abs(measure_angle) % HALF_CIRCLE - label_angle < 0

    if constrained_by_width:
        arrow_start_offset = Vector(
            sign * label_width / 2,
            sign * label_width / 2 * math.tan(measure_angle),
        )
    else:
        arrow_start_offset = Vector(
            sign * label_height / 2 / math.tan(measure_angle),
            sign * label_height / 2,
        )

    arrow_length = geometry.distance(start, center - arrow_start_offset)
    is_outer = arrow_length < style.arrow_size * 2
    arrow_direction = -1 if is_outer else 1

    label_offset = Vector(0.0, 0.0)
    if is_outer:
        if constrained_by_width:
            label_offset = Vector(0.0, label_height / 2)
        else:
            label_offset = Vector(label_width / 2, 0.0)
        if is_negative:
            label_offset = Vector(label_offset.dx, -label_offset.dy)
    label_position = center + label_offset

    xs = [
        p1.x, p2.x, start.x, end.x,
        label_position.x - label_text_width / 2, label_position.x + label_text_width / 2,
        start.x + lower_arrow.dx * arrow_direction, end.x - lower_arrow.dx * arrow_direction,
    ]
    ys = [
        p1.y, p2.y, start.y, end.y,
        label_position.y - style.font_size / 2, label_position.y + style.font_size / 2,
        start.y + upper_arrow.dy * arrow_direction, end.y - lower_arrow.dy * arrow_direction,
    ]

    return MeasureLayout(
        p1=p1,
        p2=p2,
        start=start,
        end=end,
        center=center,
        measure_angle=measure_angle,
        is_negative_angle=is_negative,
        constrained_by_label_width=constrained_by_width,
        is_outer=is_outer,
        arrow_length=arrow_length,
        arrow_start_offset=arrow_start_offset,
        upper_arrow=upper_arrow,
        lower_arrow=lower_arrow,
        arrow_direction=arrow_direction,
        text_width=label_text_width,
        label_width=label_width,
        label_height=label_height,
        label_position=label_position,
        bounding_box=BoundingBox.from_points(xs, ys),
    )


def format_length(value: float) -> str:
    return f"{round(value)}mm"


class Blueprint(ABC):
    """
    A dimensioned drawing of one frame piece.

    Subclasses draw their piece in `render()` starting at the origin of the
    port, and set `width`/`height` to the extent they used, padding included.
    """

    def __init__(self, port: DrawingPort, style: MeasureStyle = MeasureStyle()) -> None:
        self.port = port
        self.style = style
        self._size = Size(0.0, 0.0)

    @abstractmethod
    def render(self) -> None:
        ...

    @property
    def width(self) -> float:
        return self._size.width

    @property
    def height(self) -> float:
        return self._size.height

    @property
    def size(self) -> Size:
        return self._size

    def _set_font(self) -> None:
        self.port.set_font(self.style.font_size, self.style.font_family)

    def text_width(self, text: str) -> float:
        """Width of `text` in the blueprint font."""
        self.port.save()
        self._set_font()
        width = self.port.measure_text(text).width
        self.port.restore()
        return width

    def plan_measure(self, label: str, p1: Point, p2: Point, offset: Optional[float] = None) -> MeasureLayout:
        return plan_measure(self.text_width(label), p1, p2, offset, self.style)

    def draw_measure(self, label: str, p1: Point, p2: Point, offset: Optional[float] = None) -> BoundingBox:
        """Draw a dimension and return the box it occupies."""
        port = self.port
        layout = self.plan_measure(label, p1, p2, offset)

        port.save()
        port.set_stroke_style(LINE_COLOR)
        port.set_fill_style(LINE_COLOR)
        self._set_font()
        port.set_text_align("center")
        port.set_text_baseline("middle")

        # Leader lines
        port.save()
        port.set_stroke_style(LEADER_COLOR)
        port.set_line_dash(DASH_PATTERN)
        for line_start, line_end in layout.leader_lines:
            port.begin_path()
            port.move_to(line_start.x, line_start.y)
            port.line_to(line_end.x, line_end.y)
            port.stroke()
        port.restore()

        # Dimension line & arrows
        port.save()
        port.set_stroke_style(MEASURE_LINE_COLOR)
        for line_start, line_end in layout.measure_lines:
            port.begin_path()
            port.move_to(line_start.x, line_start.y)
            port.line_to(line_end.x, line_end.y)
            port.stroke()
        for first, tip, last in layout.arrows:
            port.begin_path()
            port.move_to(first.x, first.y)
            port.line_to(tip.x, tip.y)
            port.line_to(last.x, last.y)
            port.stroke()
        port.restore()

        port.fill_text(label, layout.label_position.x, layout.label_position.y)
        port.restore()

        return layout.bounding_box
