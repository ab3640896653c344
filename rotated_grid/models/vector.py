"""Vector data structure for points and directions in the plane."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """2D vector used both as a point and as a direction.

    Rotations follow the math convention (counterclockwise for positive
    angles when the y axis points up). Use rotate_around_screenspace() for
    the y-down image convention.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vector"""
        return iter((self.x, self.y))

    # ========================================
    # Arithmetic
    # ========================================

    def __add__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector') -> 'Vector':
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> 'Vector':
        return Vector(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> 'Vector':
        return Vector(self.x / scalar, self.y / scalar)

    def __neg__(self) -> 'Vector':
        return Vector(-self.x, -self.y)

    # ========================================
    # Products and norms
    # ========================================

    def dot(self, other: 'Vector') -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: 'Vector') -> float:
        """Z component of the 3D cross product (signed parallelogram area)."""
        return self.x * other.y - self.y * other.x

    def norm_sq(self) -> float:
        return self.x * self.x + self.y * self.y

    def norm(self) -> float:
        return math.sqrt(self.norm_sq())

    def normalized(self) -> 'Vector':
        """Return the unit vector pointing the same way.

        The zero vector has no direction; dividing by its zero norm yields
        NaN components. Callers must never normalize a zero-length edge.
        """
        norm = self.norm()
        if norm == 0.0:
            return Vector(math.nan, math.nan)
        return self / norm

    def orthogonal(self) -> 'Vector':
        """Vector rotated 90 degrees counterclockwise."""
        return Vector(-self.y, self.x)

    def project_out(self, direction: 'Vector', t: float) -> 'Vector':
        """Move t units along direction from this point."""
        return Vector(self.x + direction.x * t, self.y + direction.y * t)

    # ========================================
    # Rotation
    # ========================================

    def rotate(self, angle) -> 'Vector':
        """Rotate counterclockwise around the origin by an Angle."""
        sin, cos = angle.sin_cos()
        return self.rotate_with(sin, cos)

    def rotate_with(self, sin: float, cos: float) -> 'Vector':
        """Rotate around the origin by an angle given as its sine and cosine."""
        return Vector(self.x * cos - self.y * sin,
                      self.x * sin + self.y * cos)

    def rotate_around(self, pivot: 'Vector', angle) -> 'Vector':
        """Rotate counterclockwise around pivot by an Angle."""
        sin, cos = angle.sin_cos()
        return self.rotate_around_with(pivot, sin, cos)

    def rotate_around_with(self, pivot: 'Vector', sin: float, cos: float) -> 'Vector':
        """Rotate around pivot by an angle given as its sine and cosine.

        Args:
            pivot: Center of rotation
            sin: Sine of the rotation angle
            cos: Cosine of the rotation angle

        Returns:
            The rotated point
        """
        x0 = self.x - pivot.x
        y0 = self.y - pivot.y
        return Vector(x0 * cos - y0 * sin + pivot.x,
                      x0 * sin + y0 * cos + pivot.y)

    def rotate_around_screenspace(self, pivot: 'Vector', angle) -> 'Vector':
        """Rotate around pivot using the y-down screen convention.

        Applies the transposed rotation matrix, so a positive angle turns
        clockwise in math coordinates (counterclockwise on screen).
        """
        sin, cos = angle.sin_cos()
        return self.rotate_around_with(pivot, -sin, cos)

    # ========================================
    # Comparison helpers
    # ========================================

    def round(self, decimals: int) -> 'Vector':
        """Round both coordinates; simplifies comparisons in tests."""
        return Vector(round(self.x, decimals), round(self.y, decimals))

    def is_close(self, other: 'Vector', tolerance: float = 1e-9) -> bool:
        return (math.isclose(self.x, other.x, abs_tol=tolerance)
                and math.isclose(self.y, other.y, abs_tol=tolerance))
