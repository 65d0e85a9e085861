"""Print the extremal shape report and per-shape classifications for a fixed demo set.

Builds one of each shape kind, adds them to a ShapeRegistry, and prints the
min/max area and perimeter lines followed by the triangle, quadrilateral and
line-angle details.
"""
import logging

from shapes.types import Point
from shapes.figures import Line, Triangle, Quadrilateral, rhombus, rectangle, square
from shapes.registry import ShapeRegistry
from shapes.report import triangle_lines, quad_line, angle_line


def build_demo() -> dict:
    """Demo shapes keyed by role, plus the populated registry under "registry"."""
    line = Line(Point(0, 0), Point(3, 0))
    tri = Triangle(Point(0, 0), Point(3, 0), Point(0, 4))
    quad = Quadrilateral(Point(0, 0), Point(4, 0), Point(4, 3), Point(0, 3))
    rh = rhombus(Point(0, 0), 4, 2)
    rect = rectangle(Point(0, 0), 5, 3)
    sq = square(Point(0, 0), 4)

    reg = ShapeRegistry()
    for shape in (line, tri, quad, rh, rect, sq):
        reg.add(shape)
    return {
        "line": line, "triangle": tri, "quad": quad,
        "rhombus": rh, "rectangle": rect, "square": sq,
        "diagonal": Line(Point(0, 0), Point(1, 1)),
        "registry": reg,
    }


def report_text(demo: dict) -> str:
    out = list(demo["registry"].report_lines())
    out.append("")
    out.append("Additional information:")
    out.extend(triangle_lines(demo["triangle"]))
    out.append(quad_line(demo["quad"]))
    out.append(angle_line(demo["line"], demo["diagonal"]))
    return "\n".join(out)


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    print(report_text(build_demo()))


if __name__ == "__main__":
    main()
