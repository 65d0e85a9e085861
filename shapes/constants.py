"""Named tolerances, default shape labels, and report wording.

Tolerances are unitless; lengths are in whatever unit the caller uses.
"""

# Relative tolerance for side / diagonal / Pythagorean comparisons and the
# Heron radicand check. No absolute floor: classification is scale-free.
REL_TOL = 1e-9

# Report values: up to 4 decimals, trailing zeros dropped
VALUE_DECIMALS = 4

# Default display names
LINE_NAME = "line"
TRIANGLE_NAME = "triangle"
QUAD_NAME = "quadrilateral"
RHOMBUS_NAME = "rhombus"
RECTANGLE_NAME = "rectangle"
SQUARE_NAME = "square"

# Extremal report
EMPTY_REPORT = "No shapes to analyze"
LBL_MIN_AREA = "Smallest area"
LBL_MAX_AREA = "Largest area"
LBL_MIN_PERIM = "Smallest perimeter"
LBL_MAX_PERIM = "Largest perimeter"
