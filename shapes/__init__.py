"""Planar shapes: points, vectors, shape metrics, and extremal reports."""

from .types import Point, Vector, AngleType, SideType, QuadType
from .geometry import (
    GeometryError, DegenerateGeometryError,
    near, all_near, vec_angle, heron_area, poly_area,
    fmt_value, fmt_deg,
)
from .figures import Line, Triangle, Quadrilateral, Shape, rhombus, rectangle, square
from .report import extremes_lines, triangle_lines, quad_line, angle_line
from .registry import Extremes, ShapeRegistry
