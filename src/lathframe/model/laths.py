"""
Lath Layout
===========
Distributes laths of a fixed width, separated by a fixed gap, along the links
of a silhouette.

Why is this file needed?
------------------------
The laths must form one continuous pattern over the whole path. Each link
returns the signed length it could not fill (`leftover`), and the next link
starts with that length negated as its offset, so a lath or a gap that
straddles a joint is accounted for exactly once.

Conventions:
    offset > 0: the pattern starts `offset` millimeters into the link (the rest
        of a gap that began on the previous link).
    offset < 0: the first lath started `-offset` millimeters before the link.
    leftover: length between the end of the last lath plus its gap and the end
        of the link. It lies in [-gap, width) for straight links.

Arc links convert lengths to angles with `asin(length / radius)`, which treats a
lath as a chord of the circle. This is an approximation of exact arc-length
spacing that holds while the lath width is small compared to the radius.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
import math
from typing import Optional

from lathframe.config import LayoutConfig
from lathframe.errors import InvalidConfigurationError
from lathframe.model import geometry
from lathframe.model.geometry_primitives import Segment
from lathframe.model.silhouette import ArcLink, PathLink, Silhouette, StraightLink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinkLayout:
    """Laths placed on a single link."""
    link: PathLink
    offset: float
    count: int
    leftover: float
    laths: tuple[Segment, ...] = field(default_factory=tuple)
    remaining_angle: Optional[float] = None


@dataclass(frozen=True)
class LathLayout:
    """Laths placed on a whole silhouette, head to foot."""
    links: tuple[LinkLayout, ...]
    lath_gap: float

    @property
    def count(self) -> int:
        return sum(link.count for link in self.links)

    @property
    def leftover(self) -> float:
        return self.links[-1].leftover if self.links else 0.0

    @property
    def remaining_length(self) -> float:
        """Unused stock at the foot end, including the gap after the last lath."""
        return self.leftover + self.lath_gap

    @property
    def laths(self) -> list[Segment]:
        return [lath for link in self.links for lath in link.laths]


def _check_pattern(lath_width: float, lath_gap: float) -> None:
    if not lath_width > 0.0:
        raise InvalidConfigurationError(f"'lath_width' must be positive, got {lath_width!r}.")
    if not lath_gap > 0.0:
        raise InvalidConfigurationError(f"'lath_gap' must be positive, got {lath_gap!r}.")


def _chord_angle(length: float, radius: float) -> Optional[float]:
    """Angle subtended by a chord-like length, or None when asin is undefined."""
    ratio = length / radius
    if abs(ratio) > 1.0:
        return None
    return math.asin(ratio)


def layout_straight(link: StraightLink, lath_width: float, lath_gap: float, offset: float = 0.0) -> LinkLayout:
    """
    Place laths along a straight link.

    Args:
        link: The link, oriented in traversal direction.
        lath_width: Width of one lath.
        lath_gap: Gap between two neighboring laths.
        offset: Signed start of the pattern, measured from the link start.

    Returns:
        The placed laths, their count and the signed leftover.
    """
    _check_pattern(lath_width, lath_gap)
    pitch = lath_width + lath_gap
    length = link.length

    count = max(0, math.floor((length - offset + lath_gap) / pitch))
    leftover = length - count * pitch - offset

    laths = []
    for index in range(count):
        start = offset + pitch * index
        laths.append(Segment(p1=link.point_at(start), p2=link.point_at(start + lath_width)))

    return LinkLayout(link=link, offset=offset, count=count, leftover=leftover, laths=tuple(laths))


def layout_arc(link: ArcLink, lath_width: float, lath_gap: float, offset: float = 0.0) -> LinkLayout:
    """
    Place laths as chords along an arc link.

    Lengths are converted to angles with `asin(length / radius)` and laid in the
    sweep direction of the link. When a length exceeds the radius no angle
    exists; the link then carries no lath and its whole chord is reported as
    leftover.

    The count subtracts the offset angle exactly like the straight rule does
    with its length offset, so an offset carried over from the previous link
    can cost this arc a lath.
    """
    _check_pattern(lath_width, lath_gap)
    radius = link.radius
    direction = link.direction
    arc_angle = link.sweep * direction

    offset_angle = _chord_angle(offset, radius)
    lath_angle = _chord_angle(lath_width, radius)
    gap_angle = _chord_angle(lath_gap, radius)
    if offset_angle is None or lath_angle is None or gap_angle is None:
        logger.warning(
            f"Invalid pattern geometry on arc of radius {radius:.1f}: "
            f"lath {lath_width}, gap {lath_gap}, offset {offset:.1f}. No laths placed."
        )
        leftover = geometry.arc_chord_length(radius, arc_angle) - offset
        return LinkLayout(
            link=link, offset=offset, count=0, leftover=leftover, remaining_angle=arc_angle
        )

    pitch_angle = lath_angle + gap_angle
    count = max(0, math.trunc((arc_angle - offset_angle + gap_angle) / pitch_angle))
    remaining_angle = arc_angle - count * pitch_angle - offset_angle
    leftover = geometry.arc_chord_length(radius, remaining_angle)

    laths = []
    first_angle = link.start_angle + offset_angle * direction
    for index in range(count):
        start_angle = first_angle + pitch_angle * index * direction
        end_angle = start_angle + lath_angle * direction
        laths.append(Segment(p1=link.point_at_angle(start_angle), p2=link.point_at_angle(end_angle)))

    return LinkLayout(
        link=link,
        offset=offset,
        count=count,
        leftover=leftover,
        laths=tuple(laths),
        remaining_angle=remaining_angle,
    )


def layout_link(link: PathLink, lath_width: float, lath_gap: float, offset: float = 0.0) -> LinkLayout:
    if isinstance(link, ArcLink):
        return layout_arc(link, lath_width, lath_gap, offset)
    return layout_straight(link, lath_width, lath_gap, offset)


def layout_silhouette(silhouette: Silhouette, config: LayoutConfig) -> LathLayout:
    """
    Lay laths from the head point to the foot point.

    The head end is the fixed anchor (offset 0); each link starts where the
    previous one left off, so the remainder accrues at the foot end.
    """
    config.validate()
    offset = 0.0
    layouts = []
    for link in silhouette.links(head_first=True):
        link_layout = layout_link(link, config.lath_width, config.lath_gap, offset)
        layouts.append(link_layout)
        offset = -link_layout.leftover

    layout = LathLayout(links=tuple(layouts), lath_gap=config.lath_gap)
    logger.debug(
        f"Placed {layout.count} laths, remaining length {layout.remaining_length:.1f} mm."
    )
    return layout
