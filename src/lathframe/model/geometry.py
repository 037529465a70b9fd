"""
Geometry Kernel
===============
Pure functions over points, circles and segments used by the silhouette, the
lath layout and the blueprints.

Angles follow the drawing surface convention: the y axis points down, so a
positive angle turns clockwise on screen.
"""
from __future__ import annotations

import math
from typing import Optional, TYPE_CHECKING

import numpy as np

from lathframe.model.angles import FULL_CIRCLE, HALF_CIRCLE, QUARTER_CIRCLE
from lathframe.model.geometry_primitives import Circle, Point, Segment

if TYPE_CHECKING:
    import numpy.typing as npt


def distance(point1: Point, point2: Point) -> float:
    return math.hypot(point1.x - point2.x, point1.y - point2.y)


def angle(point1: Point, point2: Point) -> float:
    """Signed angle of the vector point1 -> point2, in (-pi, pi]."""
    return math.atan2(point2.y - point1.y, point2.x - point1.x)


def opposite_length(hypotenuse: float, angle_rad: float) -> float:
    return math.sin(angle_rad) * hypotenuse


def adjacent_length(hypotenuse: float, angle_rad: float) -> float:
    return math.cos(angle_rad) * hypotenuse


def polar(center: Point, radius: float, angle_rad: float) -> Point:
    """Point at `radius` from `center` in the direction `angle_rad`."""
    return Point(
        center.x + adjacent_length(radius, angle_rad),
        center.y + opposite_length(radius, angle_rad),
    )


def tangent(circle1: Circle, circle2: Circle, invert: bool = False) -> Optional[Segment]:
    """
    Tangent line between two circles that crosses between their centers.

    The segment starts on `circle1` and ends on `circle2`. `invert` picks which of
    the two crossing tangents is returned; a zero radius turns a circle into a
    point endpoint, in which case both tangents from that point are reachable.

    Returns:
        The tangent segment, or None when the center distance is lower than or
        equal to the sum of the radii (overlapping, touching or nested circles).
    """
    distance_x = circle2.x - circle1.x
    distance_y = circle2.y - circle1.y
    hypotenuse = math.hypot(distance_x, distance_y)
    short_side = circle1.radius + circle2.radius
    if hypotenuse <= short_side:
        return None

    sign = -1 if invert else 1
    start_angle = (
        math.atan2(distance_y, distance_x)
        + sign * math.asin(short_side / hypotenuse)
        - sign * QUARTER_CIRCLE
    )
    return Segment(
        p1=polar(circle1.center, circle1.radius, start_angle),
        p2=polar(circle2.center, circle2.radius, start_angle + HALF_CIRCLE),
    )


def outer_tangent(circle1: Circle, circle2: Circle, invert: bool = False) -> Optional[Segment]:
    """
    Tangent line between two circles that does not pass between them.

    Both tangent points sit at the same angle from their centers. `invert` picks
    the tangent on the other side of the center line.

    Returns:
        The tangent segment, or None when one circle lies inside the other.
    """
    distance_x = circle2.x - circle1.x
    distance_y = circle2.y - circle1.y
    hypotenuse = math.hypot(distance_x, distance_y)
    if hypotenuse <= abs(circle1.radius - circle2.radius):
        return None

    sign = 1 if invert else -1
    touch_angle = (
        math.atan2(distance_y, distance_x)
        + sign * math.acos((circle1.radius - circle2.radius) / hypotenuse)
    )
    return Segment(
        p1=polar(circle1.center, circle1.radius, touch_angle),
        p2=polar(circle2.center, circle2.radius, touch_angle),
    )


def arc_length(radius: float, angle_rad: float) -> float:
    return abs(angle_rad) * radius


def arc_length_between(radius: float, start_angle: float, end_angle: float) -> float:
    return arc_length(radius, end_angle - start_angle)


def arc_chord_length(radius: float, angle_rad: float) -> float:
    return radius * math.sin(angle_rad / 2) * 2


def arc_sagitta(radius: float, angle_rad: float) -> float:
    """Height of the arc above its chord."""
    return radius - radius * math.cos(angle_rad / 2)


def canvas_sweep(start_angle: float, end_angle: float, counter_clockwise: bool = False) -> float:
    """
    Signed sweep travelled by a canvas-style arc from `start_angle` to `end_angle`.

    Clockwise arcs sweep a positive angle in [0, 2pi], counter-clockwise arcs a
    negative one; a difference of a full turn or more draws the whole circle.
    """
    if counter_clockwise:
        difference = start_angle - end_angle
        if difference >= FULL_CIRCLE:
            return -FULL_CIRCLE
        return -(difference % FULL_CIRCLE)

    difference = end_angle - start_angle
    if difference >= FULL_CIRCLE:
        return FULL_CIRCLE
    return difference % FULL_CIRCLE


def arc_points(
    circle: Circle,
    start_angle: float,
    end_angle: float,
    *,
    counter_clockwise: bool = False,
    n_points: int = 100
) -> npt.NDArray[np.float64]:
    """
    Generate points along a circular arc, following the canvas sweep rules.

    Args:
        circle: Circle carrying the arc.
        start_angle: Angle of the first point, in radians.
        end_angle: Angle of the last point, in radians.
        counter_clockwise: Sweep direction on the y-down drawing surface.
        n_points: Number of points to generate along the arc (including endpoints).

    Returns:
        Array of shape (n_points, 2) containing the (x, y) coordinates of the points along the arc.
    """
    sweep = canvas_sweep(start_angle, end_angle, counter_clockwise)
    angles = np.linspace(start_angle, start_angle + sweep, max(2, n_points))

    x = circle.x + circle.radius * np.cos(angles)
    y = circle.y + circle.radius * np.sin(angles)

    return np.column_stack((x, y))
