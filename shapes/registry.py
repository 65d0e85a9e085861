"""Insertion-ordered shape collection with extremal (min/max) queries."""
import logging
from operator import attrgetter
from typing import Iterator, NamedTuple, Optional

from .figures import Shape
from .report import extremes_lines

logger = logging.getLogger(__name__)


class Extremes(NamedTuple):
    """Shapes holding the smallest/largest area and perimeter."""
    min_area: Shape
    max_area: Shape
    min_perimeter: Shape
    max_perimeter: Shape


class ShapeRegistry:
    """Ordered collection of shapes.

    Shapes are only appended, never removed. Ties in extremes() go to the
    first-inserted shape, for minima and maxima alike.
    """

    def __init__(self):
        self._shapes: list[Shape] = []

    def add(self, shape: Shape) -> Shape:
        """Append *shape* (no dedup, no validation) and return it."""
        self._shapes.append(shape)
        logger.debug("Added %s (%d shapes)", shape.name, len(self._shapes))
        return shape

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(self._shapes)

    def extremes(self) -> Optional[Extremes]:
        """Min/max area and perimeter shapes, or None if the registry is empty."""
        if not self._shapes:
            logger.debug("extremes() on empty registry")
            return None
        # min()/max() keep the first of equal keys
        by_area = attrgetter("area"); by_perim = attrgetter("perimeter")
        return Extremes(
            min_area=min(self._shapes, key=by_area),
            max_area=max(self._shapes, key=by_area),
            min_perimeter=min(self._shapes, key=by_perim),
            max_perimeter=max(self._shapes, key=by_perim),
        )

    def report_lines(self) -> list[str]:
        """Text report of extremes(); a single informational line when empty."""
        return extremes_lines(self.extremes())
