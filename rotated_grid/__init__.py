"""Rotated grids for CMYK halftone screens and more.

Produces the lattice points that fall inside an axis-aligned rectangle when
the lattice is rotated by an arbitrary angle, visiting only points inside
the rectangle.

Example:
    from rotated_grid import Angle, GridPositionIterator

    grid = GridPositionIterator(16, 10, 7.0, 7.0, 0.0, 0.0, Angle.from_degrees(45))
    _, upper = grid.size_hint()
    points = list(grid)
    assert len(points) <= upper
"""

from .errors import InvalidArgumentError
from .models import Angle, GridCoord, Line, LineSegment, Rectangle, Vector
from .services import GridPositionIterator, LatticeGenerator, OptimalIterator, grid_positions

__version__ = '0.1.0'

__all__ = [
    'Angle',
    'GridCoord',
    'GridPositionIterator',
    'InvalidArgumentError',
    'LatticeGenerator',
    'Line',
    'LineSegment',
    'OptimalIterator',
    'Rectangle',
    'Vector',
    'grid_positions',
]
