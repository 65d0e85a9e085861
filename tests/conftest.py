"""Shared test fixtures for shape metric tests."""
import pytest
from shapes.types import Point
from shapes.figures import Line, Triangle, Quadrilateral, rhombus, rectangle, square
from shapes.registry import ShapeRegistry


@pytest.fixture
def origin():
    return Point(0, 0)


@pytest.fixture
def line(origin):
    """Horizontal line of length 3."""
    return Line(origin, Point(3, 0))


@pytest.fixture
def right_tri(origin):
    """3-4-5 right triangle."""
    return Triangle(origin, Point(3, 0), Point(0, 4))


@pytest.fixture
def quad(origin):
    """4 x 3 axis-aligned quadrilateral given by explicit vertices."""
    return Quadrilateral(origin, Point(4, 0), Point(4, 3), Point(0, 3))


@pytest.fixture
def rh(origin):
    return rhombus(origin, 4, 2)


@pytest.fixture
def rect4(origin):
    """4 x 4 rectangle: same area and perimeter as square(origin, 4)."""
    return rectangle(origin, 4, 4)


@pytest.fixture
def sq(origin):
    return square(origin, 4)


@pytest.fixture
def tied_registry(line, right_tri, quad, rect4, rh, sq):
    """Registry with areas 0, 6, 12, 16, 4, 16 in insertion order."""
    reg = ShapeRegistry()
    for s in (line, right_tri, quad, rect4, rh, sq):
        reg.add(s)
    return reg
