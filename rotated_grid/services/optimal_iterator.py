"""Scanline iterator over lattice points inside a rotated rectangle.

Works entirely in rotated space: the rectangle is turned by the grid angle so
the lattice becomes axis-aligned, and every lattice row is clipped against
the rotated rectangle's four edges. Only points inside the clipped row spans
are visited.
"""

import logging
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from rotated_grid.constants import SPAN_TOLERANCE
from rotated_grid.models.angle import Angle
from rotated_grid.models.line import Line
from rotated_grid.models.rectangle import Rectangle
from rotated_grid.models.vector import Vector
from rotated_grid.utils.lattice_math import first_lattice_index, rotated_bounding_extent

logger = logging.getLogger(__name__)


class IteratorState(Enum):
    """Cursor state of OptimalIterator."""
    INITIALIZED = 'initialized'
    ROW_ACTIVE = 'row_active'
    ROW_EXHAUSTED = 'row_exhausted'
    DONE = 'done'


class OptimalXIterator:
    """Column cursor: lattice x coordinates within one row span.

    Yields phase_origin + i * dx for every integer i with the result in
    [span_start, span_end], both ends inclusive.
    """

    def __init__(self, span_start: float, span_end: float, phase_origin: float, dx: float):
        self._index = first_lattice_index(span_start, phase_origin, dx)
        self._phase_origin = phase_origin
        self._dx = dx
        self._limit = span_end + SPAN_TOLERANCE * max(1.0, dx)

    def __iter__(self):
        return self

    def __next__(self) -> float:
        x = self._phase_origin + self._index * self._dx
        if x > self._limit:
            raise StopIteration
        self._index += 1
        return x


class OptimalIterator:
    """Iterator for lattice points of a rotated rectangle, in rotated space.

    The rectangle is rotated about its center by angle; the lattice is
    axis-aligned in that rotated frame, spaced (dx, dy) and phase-locked to
    the rotated anchor plus (x0, y0). Produced points are Vectors in the
    rotated frame; GridPositionIterator maps them back.

    Rows are visited top to bottom and every row is clipped to the part
    that lies inside the rotated rectangle, so no rejected candidates are
    generated.
    """

    def __init__(self, rectangle: Rectangle, angle: Angle,
                 dx: float, dy: float, x0: float, y0: float,
                 anchor: Optional[Vector] = None):
        """Prepare the rotated rectangle and the first row.

        Args:
            rectangle: Axis-aligned rectangle in the caller's frame
            angle: Grid rotation, expected already normalized
            dx, dy: Lattice spacing along the rotated axes
            x0, y0: Lattice phase offset along the rotated axes
            anchor: Caller-space lattice anchor (default rectangle center)
        """
        sin, cos = angle.sin_cos()

        self._center = rectangle.center
        self._delta = Vector(dx, dy)

        # Rotate the rectangle and keep its edges as unit lines plus lengths
        self._rotated = rectangle.rotated_around(self._center, sin, cos)
        self._edges = [(segment.normalized(), segment.length)
                       for segment in self._rotated.edges()]

        # Axis-aligned box wrapping the rotated rectangle
        self._extent = rotated_bounding_extent(rectangle.width, rectangle.height, sin, cos)
        top_left = self._center - self._extent * 0.5
        bottom_right = self._center + self._extent * 0.5
        self._min_x = top_left.x
        self._max_y = bottom_right.y + SPAN_TOLERANCE * max(1.0, dy)

        # Lattice phase in rotated space
        if anchor is None:
            anchor = self._center
        rotated_anchor = anchor.rotate_around_with(self._center, sin, cos)
        self._phase = Vector(rotated_anchor.x + x0, rotated_anchor.y + y0)

        self._row = first_lattice_index(top_left.y, self._phase.y, dy)
        self._y = self._row_y(self._row)
        self._x_iter = None
        self._state = IteratorState.INITIALIZED

        logger.debug(
            "Scan prepared: center=(%.6g, %.6g) bounds=%.6g x %.6g first_row=%.6g",
            self._center.x, self._center.y, self._extent.x, self._extent.y, self._y)

    # ========================================
    # Accessors
    # ========================================

    @property
    def center(self) -> Vector:
        return self._center

    @property
    def extent(self) -> Vector:
        """Size of the axis-aligned box enclosing the rotated rectangle."""
        return self._extent

    @property
    def rotated_rectangle(self) -> Rectangle:
        return self._rotated

    @property
    def state(self) -> IteratorState:
        return self._state

    # ========================================
    # Row geometry
    # ========================================

    def _row_y(self, row: int) -> float:
        return self._phase.y + row * self._delta.y

    def _row_span(self, y: float) -> Optional[Tuple[float, float]]:
        """Clip the row at y against the rotated rectangle.

        Returns:
            (x_start, x_end) of the part inside the rectangle, or None when
            fewer than two edges are crossed
        """
        row_start = Vector(self._min_x, y)
        row_end = Vector(self._min_x + self._extent.x, y)
        ray = Line.from_points(row_start, row_end)

        hits = []
        for edge, length in self._edges:
            t = ray.calculate_intersection_t(edge, length)
            if t is not None:
                hits.append(t)

        if len(hits) < 2:
            return None
        return ray.project_out(min(hits)).x, ray.project_out(max(hits)).x

    def row_spans(self) -> List[Tuple[float, float, float]]:
        """All non-empty rows as (y, x_start, x_end), top to bottom.

        Computed independently of the iteration cursor.
        """
        spans = []
        row = first_lattice_index(self._center.y - self._extent.y * 0.5,
                                  self._phase.y, self._delta.y)
        y = self._row_y(row)
        while y <= self._max_y:
            span = self._row_span(y)
            if span is not None:
                spans.append((y, span[0], span[1]))
            row += 1
            y = self._row_y(row)
        return spans

    # ========================================
    # Iteration
    # ========================================

    def __iter__(self) -> Iterator[Vector]:
        return self

    def __next__(self) -> Vector:
        while True:
            if self._state is IteratorState.DONE:
                raise StopIteration

            if self._state is IteratorState.ROW_ACTIVE:
                x = next(self._x_iter, None)
                if x is not None:
                    return Vector(x, self._y)
                self._state = IteratorState.ROW_EXHAUSTED

            if self._state is IteratorState.ROW_EXHAUSTED:
                self._row += 1
                self._y = self._row_y(self._row)

            if self._y > self._max_y:
                self._state = IteratorState.DONE
                self._x_iter = None
                logger.debug("Scan finished after row %d", self._row)
                raise StopIteration

            span = self._row_span(self._y)
            if span is None:
                self._state = IteratorState.ROW_EXHAUSTED
                continue

            self._x_iter = OptimalXIterator(span[0], span[1], self._phase.x, self._delta.x)
            self._state = IteratorState.ROW_ACTIVE
