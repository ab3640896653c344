"""Infinite line through an origin along a unit direction."""
from typing import Optional

from rotated_grid.constants import PARALLEL_TOLERANCE, SPAN_TOLERANCE
from rotated_grid.models.vector import Vector


class Line:
    """A line determined by a point of origin and a direction.

    The direction is normalized on construction, so parameters along the
    line (t values) are distances from the origin.
    """

    __slots__ = ('_origin', '_direction')

    def __init__(self, origin: Vector, direction: Vector):
        self._origin = origin
        self._direction = direction.normalized()

    @classmethod
    def from_points(cls, a: Vector, b: Vector) -> 'Line':
        """Line through a, pointing towards b."""
        return cls(a, b - a)

    @property
    def origin(self) -> Vector:
        return self._origin

    @property
    def direction(self) -> Vector:
        return self._direction

    def project_out(self, t: float) -> Vector:
        """Point t units from the origin along the direction."""
        return self._origin.project_out(self._direction, t)

    def dot(self, point: Vector) -> float:
        """Signed distance of point's projection onto the line from the origin."""
        return self._direction.dot(point - self._origin)

    def distance(self, point: Vector) -> float:
        """Signed distance from the line to point.

        Positive values lie to the left of the direction of travel.
        """
        return self._direction.cross(point - self._origin)

    def intersect_with_line(self, other: 'Line') -> Optional[Vector]:
        """Intersection point of two infinite lines.

        Returns:
            The intersection point, or None if the lines are parallel or coincide
        """
        det = self._direction.cross(other._direction)
        if det == 0.0:
            return None
        delta = other._origin - self._origin
        t = delta.cross(other._direction) / det
        return self.project_out(t)

    def intersect_with_segment(self, segment) -> Optional[Vector]:
        """Intersection point of this line with a finite segment.

        Returns:
            The intersection point, or None if the line misses the segment
            or runs parallel to it
        """
        t = self.calculate_intersection_t(segment.normalized(), segment.length)
        if t is None:
            return None
        return self.project_out(t)

    def calculate_intersection_t(self, other: 'Line', max_u: float) -> Optional[float]:
        """Distance along this line to where it crosses other.

        The crossing must lie within [0, max_u] along other's own
        parametrization, which lets a normalized Line stand in for a segment
        of length max_u starting at other's origin.

        Args:
            other: Line to intersect with
            max_u: Extent of other, measured from its origin

        Returns:
            t such that origin + t * direction lies on other, or None when
            the lines are parallel or the crossing is outside other's extent
        """
        det = self._direction.cross(other._direction)
        if abs(det) < PARALLEL_TOLERANCE:
            return None

        delta = other._origin - self._origin
        t = delta.cross(other._direction) / det

        # Position along other, relative to its origin
        crossing = self._origin.project_out(self._direction, t) - other._origin
        u = crossing.dot(other._direction)

        slack = SPAN_TOLERANCE * max(1.0, max_u)
        if u < -slack or u > max_u + slack:
            return None
        return t

    def __neg__(self) -> 'Line':
        """Same line travelled in the opposite direction."""
        return Line(self._origin, -self._direction)

    def __mul__(self, t: float) -> Vector:
        return self.project_out(t)

    def __repr__(self):
        return f"Line(origin={self._origin!r}, direction={self._direction!r})"
