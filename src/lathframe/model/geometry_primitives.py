"""
Geometric Primitives for the silhouette and the blueprints.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A displacement in the drawing plane.
    """
    dx: float
    dy: float

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.dx + other.dx, self.dy + other.dy)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.dx - other.dx, self.dy - other.dy)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.dx * scalar, self.dy * scalar)

    def __neg__(self) -> Vector:
        return Vector(-self.dx, -self.dy)

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def dot(self, other: Vector) -> float:
        return self.dx * other.dx + self.dy * other.dy

    def rotate(self, angle_rad: float) -> Vector:
        """Rotate vector around the origin."""
        cos_a = math.cos(angle_rad)
        sin_a = math.sin(angle_rad)
        return Vector(
            self.dx * cos_a - self.dy * sin_a,
            self.dx * sin_a + self.dy * cos_a,
        )


@dataclass(frozen=True)
class Point:
    """A plane coordinate in millimeters."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.dx, self.y + other.dy)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.dx, self.y - other.dy)
        raise TypeError("Can only subtract a Vector or Point from a Point.")

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def midpoint(self, other: Point) -> Point:
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])


@dataclass(frozen=True)
class Circle:
    """
    A circle in the drawing plane. A zero radius models a point endpoint
    for tangent computations.
    """
    center: Point
    radius: float

    @classmethod
    def point(cls, point: Point) -> Circle:
        return cls(center=point, radius=0.0)

    @property
    def x(self) -> float:
        return self.center.x

    @property
    def y(self) -> float:
        return self.center.y

    def with_center(self, center: Point) -> Circle:
        return Circle(center=center, radius=self.radius)

    def with_radius(self, radius: float) -> Circle:
        return Circle(center=self.center, radius=radius)


@dataclass(frozen=True)
class Segment:
    """An oriented straight link from `p1` to `p2`."""
    p1: Point
    p2: Point

    def reverse(self) -> Segment:
        return Segment(p1=self.p2, p2=self.p1)

    def to_vector(self) -> Vector:
        return self.p2 - self.p1

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.p1.to_array(), self.p2.to_array()])

    @property
    def length(self) -> float:
        return self.p1.distance_to(self.p2)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned extent in drawing units."""
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, xs: Iterable[float], ys: Iterable[float]) -> BoundingBox:
        xs = list(xs)
        ys = list(ys)
        min_x, max_x = min(xs), max(xs)
        min_y, max_y = min(ys), max(ys)
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def contains(self, point: Point, tol: float = 1e-9) -> bool:
        return (self.x - tol) <= point.x <= (self.right + tol) and (self.y - tol) <= point.y <= (self.bottom + tol)

    def contains_box(self, other: BoundingBox, tol: float = 1e-9) -> bool:
        return self.contains(Point(other.x, other.y), tol) and self.contains(Point(other.right, other.bottom), tol)

    def union(self, other: BoundingBox) -> BoundingBox:
        return BoundingBox.from_points(
            (self.x, self.right, other.x, other.right),
            (self.y, self.bottom, other.y, other.bottom),
        )
