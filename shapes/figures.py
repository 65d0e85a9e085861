"""Shape records: line, triangle, quadrilateral, and the fixed-label quadrilateral builders.

Every shape is an immutable NamedTuple exposing ``name``, ``vertices``,
``perimeter`` and ``area``. Rhombus, rectangle and square are not separate
types: their builders return a Quadrilateral with computed vertices and a
fixed label.
"""
from typing import NamedTuple, Union

from .types import Point, Vector, AngleType, SideType, QuadType
from .geometry import GeometryError, near, all_near, heron_area, poly_area
from .constants import (
    LINE_NAME, TRIANGLE_NAME, QUAD_NAME,
    RHOMBUS_NAME, RECTANGLE_NAME, SQUARE_NAME,
)

# ============================================================
# Line
# ============================================================
class Line(NamedTuple):
    """Line segment start -> end. Degenerate shape: area is always 0."""
    start: Point; end: Point
    name: str = LINE_NAME

    @property
    def vertices(self) -> tuple[Point, Point]:
        return (self.start, self.end)

    @property
    def perimeter(self) -> float:
        return self.start.distance(self.end)

    @property
    def area(self) -> float:
        return 0.0

    def vector(self) -> Vector:
        return Vector.between(self.start, self.end)

    def angle_between(self, other: "Line") -> float:
        """Angle to another line in degrees [0, 180], by direction.

        Raises DegenerateGeometryError if either line has zero length.
        """
        return self.vector().angle(other.vector())

# ============================================================
# Triangle
# ============================================================
class Triangle(NamedTuple):
    a: Point; b: Point; c: Point
    name: str = TRIANGLE_NAME

    @property
    def vertices(self) -> tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    @property
    def ab(self) -> float: return self.a.distance(self.b)
    @property
    def bc(self) -> float: return self.b.distance(self.c)
    @property
    def ca(self) -> float: return self.c.distance(self.a)

    @property
    def perimeter(self) -> float:
        return self.ab + self.bc + self.ca

    @property
    def area(self) -> float:
        """Heron's formula; collinear vertices give 0."""
        return heron_area(self.ab, self.bc, self.ca)

    @property
    def angle_type(self) -> AngleType:
        """Classify the largest angle by comparing p²+q² against r² (sides sorted ascending)."""
        p, q, r = sorted([self.ab, self.bc, self.ca])
        legs = p**2 + q**2; hyp = r**2
        if near(legs, hyp):
            return "right"
        return "acute" if legs > hyp else "obtuse"

    @property
    def side_type(self) -> SideType:
        ab, bc, ca = self.ab, self.bc, self.ca
        if all_near([ab, bc, ca]):
            return "equilateral"
        if near(ab, bc) or near(bc, ca) or near(ca, ab):
            return "isosceles"
        return "scalene"

# ============================================================
# Quadrilateral
# ============================================================
class Quadrilateral(NamedTuple):
    """Quadrilateral a-b-c-d, vertices in boundary order (simple polygon, not validated)."""
    a: Point; b: Point; c: Point; d: Point
    name: str = QUAD_NAME

    @property
    def vertices(self) -> tuple[Point, Point, Point, Point]:
        return (self.a, self.b, self.c, self.d)

    @property
    def ab(self) -> float: return self.a.distance(self.b)
    @property
    def bc(self) -> float: return self.b.distance(self.c)
    @property
    def cd(self) -> float: return self.c.distance(self.d)
    @property
    def da(self) -> float: return self.d.distance(self.a)

    @property
    def ac(self) -> float: return self.a.distance(self.c)
    @property
    def bd(self) -> float: return self.b.distance(self.d)

    @property
    def perimeter(self) -> float:
        return self.ab + self.bc + self.cd + self.da

    @property
    def area(self) -> float:
        return poly_area(self.vertices)

    @property
    def type(self) -> QuadType:
        """Classify by side and diagonal equality: square, rhombus, rectangle, or other."""
        equal_sides = all_near([self.ab, self.bc, self.cd, self.da])
        equal_diags = near(self.ac, self.bd)
        # square must be tested before rhombus: it satisfies both
        if equal_sides and equal_diags:
            return "square"
        if equal_sides:
            return "rhombus"
        if near(self.ab, self.cd) and near(self.bc, self.da) and equal_diags:
            return "rectangle"
        return "other"


Shape = Union[Line, Triangle, Quadrilateral]

# ============================================================
# Fixed-label Quadrilateral Builders
# ============================================================
def _check_size(**dims: float) -> None:
    for k, v in dims.items():
        if v < 0:
            raise GeometryError(f"Negative {k}: {v}")

def rhombus(center: Point, width: float, height: float) -> Quadrilateral:
    """Axis-aligned diamond centered at *center* with diagonals width (E-W) and height (N-S)."""
    _check_size(width=width, height=height)
    cx, cy = center
    return Quadrilateral(
        Point(cx, cy + height/2), Point(cx + width/2, cy),
        Point(cx, cy - height/2), Point(cx - width/2, cy),
        name=RHOMBUS_NAME,
    )

def rectangle(origin: Point, width: float, height: float) -> Quadrilateral:
    """Axis-aligned rectangle with corner *origin*, counter-clockwise from it."""
    _check_size(width=width, height=height)
    ox, oy = origin
    return Quadrilateral(
        Point(ox, oy), Point(ox + width, oy),
        Point(ox + width, oy + height), Point(ox, oy + height),
        name=RECTANGLE_NAME,
    )

def square(origin: Point, side: float) -> Quadrilateral:
    _check_size(side=side)
    return rectangle(origin, side, side)._replace(name=SQUARE_NAME)
