"""Shared type definitions: points, vectors, and classification labels."""
import math
from typing import Literal, NamedTuple

from .geometry import vec_angle

AngleType = Literal["acute", "right", "obtuse"]
SideType = Literal["equilateral", "isosceles", "scalene"]
QuadType = Literal["square", "rhombus", "rectangle", "other"]


class Point(NamedTuple):
    x: float; y: float

    def distance(self, to: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(to[0]-self.x, to[1]-self.y)


class Vector(NamedTuple):
    dx: float; dy: float

    @classmethod
    def between(cls, start: Point, end: Point) -> "Vector":
        """Vector from start to end (end - start)."""
        return cls(end[0]-start[0], end[1]-start[1])

    @property
    def magnitude(self) -> float:
        return math.hypot(self.dx, self.dy)

    def dot(self, other: "Vector") -> float:
        return self.dx*other.dx + self.dy*other.dy

    def angle(self, other: "Vector") -> float:
        """Angle to another vector in degrees [0, 180].

        Raises DegenerateGeometryError if either vector has zero length.
        """
        return vec_angle(self, other)

    def __neg__(self) -> "Vector":
        return Vector(-self.dx, -self.dy)
