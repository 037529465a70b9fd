"""
Construction Scene
==================
Draws the construction canvas: control handles, construction circles, the
silhouette (tangents and arcs), the arc angle guides and the laths.

Drawing order (back to front):
    background -> handles -> construction circles -> tangents -> arcs
    -> angle guides -> laths
"""
from __future__ import annotations

from typing import Optional

from lathframe.config import (
    CANVAS_HEIGHT,
    CANVAS_SCALE,
    CANVAS_WIDTH,
    CONSTRUCTION_LINE_DASH,
    HANDLE_RADIUS,
    DisplayOptions,
)
from lathframe.drawing.port import DrawingPort
from lathframe.model.angles import FULL_CIRCLE
from lathframe.model.controls import ControlPrimitives
from lathframe.model.geometry_primitives import Circle, Point, Segment
from lathframe.model.laths import LathLayout
from lathframe.model.silhouette import ArcLink, Silhouette

BACKGROUND_COLOR = "#fff"
LINE_COLOR = "#000"
MUTED_LINE_COLOR = "#bbb"
HANDLE_FILL_COLOR = "#ccc"
CONSTRUCTION_COLOR = "#ccc"
LATH_COLOR = "#f00"


def draw_segment(port: DrawingPort, segment: Segment) -> None:
    port.begin_path()
    port.move_to(segment.p1.x, segment.p1.y)
    port.line_to(segment.p2.x, segment.p2.y)
    port.stroke()


def draw_circle(port: DrawingPort, circle: Circle, fill: bool = False) -> None:
    port.begin_path()
    port.arc(circle.x, circle.y, circle.radius, 0.0, FULL_CIRCLE)
    port.close_path()
    if fill:
        port.fill()
    port.stroke()


def draw_arc(port: DrawingPort, arc: ArcLink) -> None:
    port.begin_path()
    port.arc(arc.circle.x, arc.circle.y, arc.radius, arc.start_angle, arc.end_angle, arc.counter_clockwise)
    port.stroke()


def draw_angle_guide(port: DrawingPort, center: Point, point1: Point, point2: Point) -> None:
    """Dashed radii from a circle center to the two ends of its arc."""
    port.save()
    port.set_stroke_style(CONSTRUCTION_COLOR)
    port.set_line_dash(CONSTRUCTION_LINE_DASH)
    draw_segment(port, Segment(center, point1))
    draw_segment(port, Segment(center, point2))
    port.restore()


def render_scene(
    port: DrawingPort,
    controls: ControlPrimitives,
    silhouette: Optional[Silhouette] = None,
    laths: Optional[LathLayout] = None,
    display: DisplayOptions = DisplayOptions(),
    width: float = CANVAS_WIDTH,
    height: float = CANVAS_HEIGHT,
) -> None:
    """
    Draw the whole construction canvas in millimeters.

    Without a silhouette only the construction primitives are drawn, which is
    what the canvas shows while the controls are in an invalid placement.
    """
    port.save()
    port.clear_rect(0.0, 0.0, width, height)
    port.set_stroke_style(LINE_COLOR if display.construction_lines else MUTED_LINE_COLOR)
    port.set_fill_style(BACKGROUND_COLOR)
    port.set_line_width(1.0 * CANVAS_SCALE)
    port.fill_rect(0.0, 0.0, width, height)

    if display.construction_handles:
        port.save()
        port.set_stroke_style(LINE_COLOR)
        port.set_fill_style(HANDLE_FILL_COLOR)
        for position in controls.handles().values():
            draw_circle(port, Circle(center=position, radius=HANDLE_RADIUS), fill=True)
        port.restore()

    if display.construction_lines:
        port.save()
        port.set_stroke_style(CONSTRUCTION_COLOR)
        port.set_line_dash(CONSTRUCTION_LINE_DASH)
        for circle in controls.circles().values():
            draw_circle(port, circle)
        port.restore()

    if silhouette is not None:
        for tangent in silhouette.tangents:
            draw_segment(port, tangent)
        draw_arc(port, silhouette.leg_arc)
        draw_arc(port, silhouette.back_arc)

        if display.construction_lines:
            draw_angle_guide(
                port,
                controls.leg_circle.center,
                silhouette.leg_tangent.p2,
                silhouette.middle_tangent.p1,
            )
            draw_angle_guide(
                port,
                controls.back_circle.center,
                silhouette.middle_tangent.p2,
                silhouette.back_tangent.p1,
            )

    if laths is not None and display.laths:
        port.save()
        port.set_stroke_style(LATH_COLOR)
        for lath in laths.laths:
            draw_segment(port, lath)
        port.restore()

    port.restore()
