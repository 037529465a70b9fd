"""
Control Primitives
==================
The four user-adjustable primitives the silhouette is derived from.

A `ControlPrimitives` value is an immutable snapshot: the interaction layer
produces a fresh one for every pointer move and the recompute pass never
mutates it.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

from lathframe.errors import InvalidConfigurationError
from lathframe.model.geometry_primitives import Circle, Point


class Handle(StrEnum):
    """Draggable handles, in the order they are hit-tested."""
    FOOT = "foot"
    LEG = "leg"
    BACK = "back"
    HEAD = "head"


class CircleKey(StrEnum):
    """Resizable circles."""
    LEG = "leg"
    BACK = "back"


@dataclass(frozen=True)
class ControlPrimitives:
    leg_circle: Circle
    back_circle: Circle
    foot_point: Point
    head_point: Point

    def validate(self) -> None:
        for name in ("leg_circle", "back_circle"):
            radius = getattr(self, name).radius
            if not radius > 0.0:
                raise InvalidConfigurationError(f"'{name}' radius must be positive, got {radius!r}.")

    def position(self, handle: Handle) -> Point:
        match handle:
            case Handle.FOOT:
                return self.foot_point
            case Handle.LEG:
                return self.leg_circle.center
            case Handle.BACK:
                return self.back_circle.center
            case Handle.HEAD:
                return self.head_point
        raise KeyError(handle)

    def circle(self, key: CircleKey) -> Circle:
        return self.leg_circle if key == CircleKey.LEG else self.back_circle

    def handles(self) -> dict[Handle, Point]:
        return {handle: self.position(handle) for handle in Handle}

    def circles(self) -> dict[CircleKey, Circle]:
        return {key: self.circle(key) for key in CircleKey}

    def moved(self, handle: Handle, position: Point) -> ControlPrimitives:
        """Return a snapshot with `handle` placed at `position`."""
        match handle:
            case Handle.FOOT:
                return replace(self, foot_point=position)
            case Handle.LEG:
                return replace(self, leg_circle=self.leg_circle.with_center(position))
            case Handle.BACK:
                return replace(self, back_circle=self.back_circle.with_center(position))
            case Handle.HEAD:
                return replace(self, head_point=position)
        raise KeyError(handle)

    def resized(self, key: CircleKey, radius: float) -> ControlPrimitives:
        """Return a snapshot with the circle `key` set to `radius`."""
        if key == CircleKey.LEG:
            return replace(self, leg_circle=self.leg_circle.with_radius(radius))
        return replace(self, back_circle=self.back_circle.with_radius(radius))
