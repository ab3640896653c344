"""Rectangle described by its four corners."""
from dataclasses import dataclass
from typing import Optional, Tuple

from rotated_grid.constants import CONTAINMENT_TOLERANCE
from rotated_grid.models.line_segment import LineSegment
from rotated_grid.models.vector import Vector


@dataclass(frozen=True)
class Rectangle:
    """Four-corner rectangle.

    Built axis-aligned in the caller's frame; rotated_around() returns the
    same rectangle turned about a pivot, which is no longer axis-aligned.
    Width and height are edge lengths and survive rotation.
    """
    top_left: Vector
    top_right: Vector
    bottom_left: Vector
    bottom_right: Vector

    @classmethod
    def from_size(cls, width: float, height: float,
                  origin: Optional[Vector] = None) -> 'Rectangle':
        """Axis-aligned rectangle with its top-left corner at origin."""
        if origin is None:
            origin = Vector(0.0, 0.0)
        return cls(
            origin,
            Vector(origin.x + width, origin.y),
            Vector(origin.x, origin.y + height),
            Vector(origin.x + width, origin.y + height),
        )

    @property
    def corners(self) -> Tuple[Vector, Vector, Vector, Vector]:
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)

    @property
    def center(self) -> Vector:
        return (self.top_left + self.top_right + self.bottom_left + self.bottom_right) * 0.25

    @property
    def width(self) -> float:
        return (self.top_right - self.top_left).norm()

    @property
    def height(self) -> float:
        return (self.bottom_left - self.top_left).norm()

    @property
    def extent(self) -> Vector:
        return Vector(self.width, self.height)

    def rotated_around(self, pivot: Vector, sin: float, cos: float) -> 'Rectangle':
        return Rectangle(*(corner.rotate_around_with(pivot, sin, cos)
                           for corner in self.corners))

    def edges(self) -> Tuple[LineSegment, LineSegment, LineSegment, LineSegment]:
        """Return the (top, left, bottom, right) edges.

        Each edge starts at a corner and runs to the adjacent one.
        """
        top = LineSegment.from_points(self.top_right, self.top_left)
        left = LineSegment.from_points(self.top_left, self.bottom_left)
        bottom = LineSegment.from_points(self.bottom_left, self.bottom_right)
        right = LineSegment.from_points(self.top_right, self.bottom_right)
        return top, left, bottom, right

    def bounding_box(self) -> Tuple[Vector, Vector]:
        """Axis-aligned (min, max) corners enclosing all four corners."""
        xs = [corner.x for corner in self.corners]
        ys = [corner.y for corner in self.corners]
        return Vector(min(xs), min(ys)), Vector(max(xs), max(ys))

    def contains(self, point: Vector, tolerance: float = CONTAINMENT_TOLERANCE) -> bool:
        """Check whether point lies inside the rectangle (edges included).

        Works for rotated rectangles by projecting onto the two edge axes.
        """
        u_axis = self.top_right - self.top_left
        v_axis = self.bottom_left - self.top_left
        rel = point - self.top_left
        width = u_axis.norm()
        height = v_axis.norm()
        u = rel.dot(u_axis) / width
        v = rel.dot(v_axis) / height
        return (-tolerance <= u <= width + tolerance
                and -tolerance <= v <= height + tolerance)
