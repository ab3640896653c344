"""Public iterator over grid positions on a rotated lattice.

Example:
    for name, degrees in HALFTONE_SCREEN_ANGLES.items():
        grid = GridPositionIterator(16, 10, 7.0, 7.0, 0.0, 0.0,
                                    Angle.from_degrees(degrees))
        for x, y in grid:
            ...

Coordinates are produced row by row in the rotated frame, which is not a
top-down order in the caller's frame. Collect and sort (GridCoord sorts by
y, then x) when raster order matters.
"""

import logging
from typing import Iterator, Optional, Tuple

from rotated_grid.errors import InvalidArgumentError
from rotated_grid.models.angle import Angle
from rotated_grid.models.grid_coord import GridCoord
from rotated_grid.models.rectangle import Rectangle
from rotated_grid.models.vector import Vector
from rotated_grid.services.optimal_iterator import IteratorState, OptimalIterator
from rotated_grid.utils.lattice_math import estimate_max_grid_points
from rotated_grid.utils.logger import log_and_raise

logger = logging.getLogger(__name__)


class GridPositionIterator:
    """Iterator for positions on a rotated grid inside a rectangle.

    The iterator is single-use: once exhausted it keeps raising
    StopIteration. Build a new one to scan again.
    """

    def __init__(self, width: float, height: float,
                 dx: float, dy: float, x0: float, y0: float, angle,
                 origin: Optional[Vector] = None,
                 anchor: Optional[Vector] = None):
        """Create the iterator.

        Args:
            width: Width of the rectangle. Must be positive.
            height: Height of the rectangle. Must be positive.
            dx: Spacing of grid points along the rotated X axis.
            dy: Spacing of grid points along the rotated Y axis.
            x0: Lattice phase offset along the rotated X axis.
            y0: Lattice phase offset along the rotated Y axis.
            angle: Grid orientation, an Angle or radians.
            origin: Top-left corner of the rectangle (default (0, 0)).
            anchor: Point the lattice is phase-locked to, in the same frame
                as origin (default the rectangle center). Rectangles that
                share an anchor, angle, spacing and offset share one lattice.

        Raises:
            InvalidArgumentError: If width or height is not positive

        Spacing is not validated; zero or negative dx/dy is undefined input.
        """
        if not width > 0.0:
            log_and_raise(logger, InvalidArgumentError(f"width must be positive, got {width}"))
        if not height > 0.0:
            log_and_raise(logger, InvalidArgumentError(f"height must be positive, got {height}"))

        self._width = width
        self._height = height
        self._dx = dx
        self._dy = dy

        self._angle, half_turns = Angle.coerce(angle).fold()
        # Each removed half turn mirrors the lattice offsets through the anchor
        if half_turns % 2:
            x0, y0 = -x0, -y0
        sin, cos = self._angle.sin_cos()
        # Inverse rotation maps rotated-space points back to the caller's frame
        self._inv_sin = -sin
        self._inv_cos = cos

        self._rectangle = Rectangle.from_size(width, height, origin)
        self._inner = OptimalIterator(self._rectangle, self._angle, dx, dy, x0, y0, anchor)

        logger.debug(
            "Grid %.6g x %.6g spacing=(%.6g, %.6g) offset=(%.6g, %.6g) angle=%.6g deg",
            width, height, dx, dy, x0, y0, self._angle.degrees)

    @property
    def angle(self) -> Angle:
        """Normalized grid angle in [-pi/2, pi/2)."""
        return self._angle

    @property
    def rectangle(self) -> Rectangle:
        return self._rectangle

    @property
    def state(self) -> IteratorState:
        return self._inner.state

    def estimate_max_grid_points(self) -> int:
        """Upper bound on the number of points for this angle and spacing."""
        return estimate_max_grid_points(self._width, self._height, self._dx, self._dy,
                                        self._angle)

    def size_hint(self) -> Tuple[int, int]:
        """Return (lower, upper) bounds on the number of remaining points."""
        return 0, self.estimate_max_grid_points()

    def __length_hint__(self) -> int:
        return self.estimate_max_grid_points()

    def __iter__(self) -> Iterator[GridCoord]:
        return self

    def __next__(self) -> GridCoord:
        point = next(self._inner)
        center = self._inner.center
        x = point.x - center.x
        y = point.y - center.y

        # Un-rotate the point
        unrotated_x = x * self._inv_cos - y * self._inv_sin + center.x
        unrotated_y = x * self._inv_sin + y * self._inv_cos + center.y
        return GridCoord(unrotated_x, unrotated_y)
