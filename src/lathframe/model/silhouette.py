"""
Silhouette Construction
=======================
Derives the two-arc, three-tangent path from the four control primitives.

Path from foot to head:
    foot point -> leg tangent -> leg arc (around the leg circle)
    -> middle tangent -> back arc (around the back circle)
    -> back tangent -> head point

The leg arc wraps over the leg circle (counter-clockwise on the y-down
canvas), the back arc wraps under the back circle (clockwise). The middle
tangent therefore crosses between the two circles.

Precondition on placement: the foot point must stay below the leg circle and
the head point above the back circle, so that both arcs sweep in the
direction above. Other placements are rejected with
`SilhouetteOrientationError` instead of being reinterpreted.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator, Union

from lathframe.errors import DegenerateTangentError, SilhouetteOrientationError
from lathframe.model import geometry
from lathframe.model.angles import rad2deg
from lathframe.model.controls import ControlPrimitives
from lathframe.model.geometry_primitives import Circle, Point, Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StraightLink:
    """A straight link, oriented in traversal direction."""
    segment: Segment

    @property
    def start_point(self) -> Point:
        return self.segment.p1

    @property
    def end_point(self) -> Point:
        return self.segment.p2

    @property
    def length(self) -> float:
        return self.segment.length

    @property
    def direction_angle(self) -> float:
        return geometry.angle(self.segment.p1, self.segment.p2)

    def point_at(self, distance_from_start: float) -> Point:
        return geometry.polar(self.segment.p1, distance_from_start, self.direction_angle)

    def reverse(self) -> StraightLink:
        return StraightLink(self.segment.reverse())


@dataclass(frozen=True)
class ArcLink:
    """
    A circular arc from `start_angle` to `end_angle`.

    `counter_clockwise` tells in which direction the arc is swept; it selects the
    sign used to convert lengths into angles along the arc.
    """
    circle: Circle
    start_angle: float
    end_angle: float
    counter_clockwise: bool = False

    @property
    def sweep(self) -> float:
        """Signed angular difference, end minus start."""
        return self.end_angle - self.start_angle

    @property
    def direction(self) -> int:
        return -1 if self.counter_clockwise else 1

    @property
    def angle(self) -> float:
        return abs(self.sweep)

    @property
    def radius(self) -> float:
        return self.circle.radius

    @property
    def length(self) -> float:
        return geometry.arc_length_between(self.circle.radius, self.start_angle, self.end_angle)

    @property
    def chord_length(self) -> float:
        return geometry.arc_chord_length(self.circle.radius, self.angle)

    @property
    def sagitta(self) -> float:
        return geometry.arc_sagitta(self.circle.radius, self.angle)

    @property
    def start_point(self) -> Point:
        return self.point_at_angle(self.start_angle)

    @property
    def end_point(self) -> Point:
        return self.point_at_angle(self.end_angle)

    def point_at_angle(self, angle_rad: float) -> Point:
        return geometry.polar(self.circle.center, self.circle.radius, angle_rad)

    def reverse(self) -> ArcLink:
        return ArcLink(
            circle=self.circle,
            start_angle=self.end_angle,
            end_angle=self.start_angle,
            counter_clockwise=not self.counter_clockwise,
        )


PathLink = Union[StraightLink, ArcLink]


@dataclass(frozen=True)
class Silhouette:
    """
    The five links of the silhouette, as computed from the control primitives.

    Tangent segments keep the orientation they were computed with (from the
    foot towards the head); arcs are oriented from head to foot, which is the
    direction laths are laid in.
    """
    leg_tangent: Segment
    leg_arc: ArcLink
    middle_tangent: Segment
    back_arc: ArcLink
    back_tangent: Segment

    def links(self, head_first: bool = True) -> list[PathLink]:
        """Return the path links in traversal order."""
        if head_first:
            return [
                StraightLink(self.back_tangent.reverse()),
                self.back_arc,
                StraightLink(self.middle_tangent.reverse()),
                self.leg_arc,
                StraightLink(self.leg_tangent.reverse()),
            ]
        return [
            StraightLink(self.leg_tangent),
            self.leg_arc.reverse(),
            StraightLink(self.middle_tangent),
            self.back_arc.reverse(),
            StraightLink(self.back_tangent),
        ]

    def __iter__(self) -> Iterator[PathLink]:
        return iter(self.links())

    @property
    def tangents(self) -> tuple[Segment, Segment, Segment]:
        return self.leg_tangent, self.middle_tangent, self.back_tangent

    @property
    def length(self) -> float:
        return sum(link.length for link in self.links())


@dataclass(frozen=True)
class SilhouetteMetrics:
    """The measured quantities shown to the user for one silhouette."""
    leg_tangent_length: float
    middle_tangent_length: float
    back_tangent_length: float
    leg_angle: float
    back_angle: float
    leg_arc_length: float
    back_arc_length: float
    leg_arc_chord_length: float
    back_arc_chord_length: float
    leg_arc_thickness: float
    back_arc_thickness: float

    @classmethod
    def from_silhouette(cls, silhouette: Silhouette) -> SilhouetteMetrics:
        leg_arc = silhouette.leg_arc
        back_arc = silhouette.back_arc
        return cls(
            leg_tangent_length=silhouette.leg_tangent.length,
            middle_tangent_length=silhouette.middle_tangent.length,
            back_tangent_length=silhouette.back_tangent.length,
            leg_angle=leg_arc.angle,
            back_angle=back_arc.angle,
            leg_arc_length=leg_arc.length,
            back_arc_length=back_arc.length,
            leg_arc_chord_length=leg_arc.chord_length,
            back_arc_chord_length=back_arc.chord_length,
            leg_arc_thickness=leg_arc.sagitta,
            back_arc_thickness=back_arc.sagitta,
        )

    @property
    def leg_angle_degrees(self) -> float:
        return rad2deg(self.leg_angle)

    @property
    def back_angle_degrees(self) -> float:
        return rad2deg(self.back_angle)


def build_silhouette(controls: ControlPrimitives) -> Silhouette:
    """
    Compute the tangents and arcs for the given control primitives.

    Raises:
        InvalidConfigurationError: If a circle radius is not positive.
        DegenerateTangentError: If any of the three tangents does not exist.
        SilhouetteOrientationError: If an arc sweeps against its expected direction.
    """
    controls.validate()

    leg_circle = controls.leg_circle
    back_circle = controls.back_circle

    leg_tangent = geometry.tangent(Circle.point(controls.foot_point), leg_circle, invert=True)
    if leg_tangent is None:
        raise DegenerateTangentError("leg tangent")
    middle_tangent = geometry.tangent(leg_circle, back_circle)
    if middle_tangent is None:
        raise DegenerateTangentError("middle tangent")
    back_tangent = geometry.tangent(back_circle, Circle.point(controls.head_point), invert=True)
    if back_tangent is None:
        raise DegenerateTangentError("back tangent")

    leg_arc = ArcLink(
        circle=leg_circle,
        start_angle=geometry.angle(leg_circle.center, middle_tangent.p1),
        end_angle=geometry.angle(leg_circle.center, leg_tangent.p2),
        counter_clockwise=True,
    )
    back_arc = ArcLink(
        circle=back_circle,
        start_angle=geometry.angle(back_circle.center, back_tangent.p1),
        end_angle=geometry.angle(back_circle.center, middle_tangent.p2),
        counter_clockwise=False,
    )

    if leg_arc.sweep > 0.0:
        raise SilhouetteOrientationError(
            f"Leg arc sweeps clockwise ({leg_arc.sweep:.3f} rad); the foot point must stay below the leg circle."
        )
    if back_arc.sweep < 0.0:
        raise SilhouetteOrientationError(
            f"Back arc sweeps counter-clockwise ({back_arc.sweep:.3f} rad); "
            f"the head point must stay above the back circle."
        )

    silhouette = Silhouette(
        leg_tangent=leg_tangent,
        leg_arc=leg_arc,
        middle_tangent=middle_tangent,
        back_arc=back_arc,
        back_tangent=back_tangent,
    )
    logger.debug(f"Silhouette built, total length {silhouette.length:.1f} mm.")
    return silhouette
