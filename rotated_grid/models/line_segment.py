"""Finite line segment used for rectangle edges."""
from dataclasses import dataclass

from rotated_grid.models.line import Line
from rotated_grid.models.vector import Vector


@dataclass(frozen=True)
class LineSegment:
    """Segment from start covering extent (end - start)."""
    start: Vector
    extent: Vector

    @classmethod
    def from_points(cls, a: Vector, b: Vector) -> 'LineSegment':
        return cls(a, b - a)

    @property
    def end(self) -> Vector:
        return self.start + self.extent

    @property
    def length(self) -> float:
        return self.extent.norm()

    def normalized(self) -> Line:
        """Infinite line along the segment, with a unit direction."""
        return Line(self.start, self.extent)
