"""Text report lines for extremes and per-shape classifications."""
from typing import TYPE_CHECKING, Optional

from .geometry import fmt_value, fmt_deg
from .constants import (
    EMPTY_REPORT, LBL_MIN_AREA, LBL_MAX_AREA, LBL_MIN_PERIM, LBL_MAX_PERIM,
)

if TYPE_CHECKING:
    from .figures import Line, Triangle, Quadrilateral
    from .registry import Extremes


def extremes_lines(ext: Optional["Extremes"]) -> list[str]:
    """Four "<label>: <name> (<value>)" lines, or the empty-registry message if ext is None."""
    if ext is None:
        return [EMPTY_REPORT]
    return [
        f"{LBL_MIN_AREA}: {ext.min_area.name} ({fmt_value(ext.min_area.area)})",
        f"{LBL_MAX_AREA}: {ext.max_area.name} ({fmt_value(ext.max_area.area)})",
        f"{LBL_MIN_PERIM}: {ext.min_perimeter.name} ({fmt_value(ext.min_perimeter.perimeter)})",
        f"{LBL_MAX_PERIM}: {ext.max_perimeter.name} ({fmt_value(ext.max_perimeter.perimeter)})",
    ]

def triangle_lines(tri: "Triangle") -> list[str]:
    return [
        f"Triangle angle type: {tri.angle_type}",
        f"Triangle side type: {tri.side_type}",
    ]

def quad_line(quad: "Quadrilateral") -> str:
    return f"Quadrilateral type: {quad.type}"

def angle_line(l1: "Line", l2: "Line") -> str:
    """Raises DegenerateGeometryError if either line has zero length."""
    return f"Angle between lines: {fmt_deg(l1.angle_between(l2))}"
