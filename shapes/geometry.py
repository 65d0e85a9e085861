"""Pure geometry functions: tolerant comparison, angles, areas, and formatting."""
import logging
import math
from typing import Sequence

from .constants import REL_TOL, VALUE_DECIMALS

logger = logging.getLogger(__name__)

# ============================================================
# Error Types
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry operations."""

class DegenerateGeometryError(GeometryError):
    """Raised when a result is undefined for degenerate input (zero-length vector, etc.)."""

# ============================================================
# Tolerant Comparison
# ============================================================
def near(a: float, b: float) -> bool:
    """True if a and b are equal relative to the larger magnitude (REL_TOL)."""
    return math.isclose(a, b, rel_tol=REL_TOL)

def all_near(values: Sequence[float]) -> bool:
    """True if every value is near the first one."""
    return all(near(v, values[0]) for v in values[1:])

# ============================================================
# Geometry Utilities
# ============================================================
def vec_angle(d1: tuple[float, float], d2: tuple[float, float]) -> float:
    """Angle in degrees [0, 180] between two direction vectors.

    Raises DegenerateGeometryError if either vector has zero length.
    """
    m1 = math.hypot(d1[0], d1[1]); m2 = math.hypot(d2[0], d2[1])
    if m1 == 0.0 or m2 == 0.0:
        raise DegenerateGeometryError(f"Zero-length vector: |d1|={m1:.2e}, |d2|={m2:.2e}")
    cos_t = (d1[0]*d2[0]+d1[1]*d2[1])/m1/m2
    # rounding can push nearly (anti)parallel vectors just outside [-1, 1]
    cos_t = max(-1.0, min(1.0, cos_t))
    return math.degrees(math.acos(cos_t))

def heron_area(a: float, b: float, c: float) -> float:
    """Triangle area from side lengths via Heron's formula.

    Collinear sides give 0; rounding noise below zero is clamped.
    """
    s = (a+b+c)/2
    rad = s*(s-a)*(s-b)*(s-c)
    if rad < -REL_TOL*s**4:
        raise DegenerateGeometryError(f"Sides {a}, {b}, {c} do not form a triangle: radicand={rad:.2e}")
    if rad < 0:
        logger.debug("Clamped Heron radicand %.2e to zero", rad)
    return math.sqrt(max(0.0, rad))

def poly_area(verts: Sequence[tuple[float, float]]) -> float:
    """Polygon area via the shoelace formula. Works for either winding order."""
    n = len(verts); a = 0.0
    for i in range(n):
        j = (i+1)%n; a += verts[i][0]*verts[j][1]-verts[j][0]*verts[i][1]
    return abs(a)/2

# ============================================================
# Formatting Helpers
# ============================================================
def fmt_value(v: float) -> str:
    """Format a metric with up to VALUE_DECIMALS decimals, e.g. 16.0 -> '16', 8.94427 -> '8.9443'."""
    s = f"{v:.{VALUE_DECIMALS}f}".rstrip('0').rstrip('.')
    return "0" if s == "-0" else s

def fmt_deg(v: float) -> str:
    """Format an angle in degrees, e.g. 45.0 -> '45°'."""
    return f"{fmt_value(v)}°"
