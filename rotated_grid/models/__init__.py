"""Geometry value types: vectors, angles, lines, rectangles and grid coordinates."""

from .vector import Vector
from .angle import Angle
from .line import Line
from .line_segment import LineSegment
from .rectangle import Rectangle
from .grid_coord import GridCoord

__all__ = [
    'Vector',
    'Angle',
    'Line',
    'LineSegment',
    'Rectangle',
    'GridCoord',
]
