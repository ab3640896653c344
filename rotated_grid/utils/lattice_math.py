"""
Rotated Grid - Lattice Math Utilities

Pure functions shared by the grid iterators and by the reference oracle:
- Phase-locked lattice coordinates along one axis
- Bounding extent of a rotated rectangle
- Upper bound on the number of produced grid points
- Brute-force lattice enumeration with rejection (test oracle)

These functions carry no iterator state and can be called from anywhere.
"""

import math
from typing import Optional, Tuple

import numpy as np

from rotated_grid.constants import CONTAINMENT_TOLERANCE, SPAN_TOLERANCE
from rotated_grid.models.angle import Angle
from rotated_grid.models.vector import Vector


def first_lattice_index(bound, phase_origin, spacing, tolerance=SPAN_TOLERANCE):
    """Index of the first lattice coordinate at or after bound.

    Lattice coordinates along the axis are phase_origin + k * spacing for
    integer k. The returned k is the smallest with
    phase_origin + k * spacing >= bound, allowing tolerance (in units of
    spacing) so that a coordinate sitting on the bound up to rounding error
    is not skipped.

    Args:
        bound: Lower bound along the axis
        phase_origin: Any coordinate known to lie on the lattice
        spacing: Distance between neighbouring lattice coordinates (> 0)
        tolerance: Slack in multiples of spacing

    Returns:
        Integer lattice index k
    """
    return int(math.ceil((bound - phase_origin) / spacing - tolerance))


def rotated_bounding_extent(width, height, sin, cos):
    """Size of the axis-aligned box enclosing a rotated width x height rectangle.

    Same corner-spread result as rotating all four corners and taking
    min/max, without touching the corners.

    Returns:
        Vector of (bounding_width, bounding_height)
    """
    abs_sin = abs(sin)
    abs_cos = abs(cos)
    return Vector(width * abs_cos + height * abs_sin,
                  width * abs_sin + height * abs_cos)


def estimate_max_grid_points(width, height, dx, dy, angle=None):
    """Cheap upper bound on the number of produced grid points.

    Counts lattice rows and columns across the axis-aligned box that wraps
    the rectangle in the rotated frame, where the lattice is axis-aligned.
    For an unrotated grid this is ceil((width + dx) / dx) * ceil((height + dy) / dy).

    Args:
        width, height: Rectangle size
        dx, dy: Lattice spacing along the rotated axes
        angle: Grid rotation, an Angle or radians (default unrotated)

    Returns:
        Upper bound on the point count
    """
    if angle is None:
        extent = Vector(width, height)
    else:
        sin, cos = Angle.coerce(angle).sin_cos()
        extent = rotated_bounding_extent(width, height, sin, cos)
    num_points_x = math.ceil((extent.x + dx) / dx)
    num_points_y = math.ceil((extent.y + dy) / dy)
    return int(num_points_x * num_points_y)


def brute_force_positions(width, height, dx, dy, x0, y0, angle,
                          origin: Optional[Vector] = None,
                          anchor: Optional[Vector] = None,
                          tolerance=CONTAINMENT_TOLERANCE) -> np.ndarray:
    """Enumerate every lattice point near the rectangle and keep those inside.

    Reference oracle for the scanline iterators. Uses the same lattice
    definition (anchor plus rotated offsets and spacing) but no edge
    intersections: every candidate in a disc around the rectangle is
    generated and rejected by a plain containment test.

    Args:
        width, height: Rectangle size (> 0)
        dx, dy: Lattice spacing along the rotated axes
        x0, y0: Lattice phase offset along the rotated axes
        angle: Angle or radians
        origin: Top-left corner of the rectangle (default (0, 0))
        anchor: Lattice anchor in caller space (default rectangle center)
        tolerance: Containment slack

    Returns:
        (N, 2) float array of [x, y] positions in no particular order
    """
    if origin is None:
        origin = Vector(0.0, 0.0)
    center = Vector(origin.x + width * 0.5, origin.y + height * 0.5)
    if anchor is None:
        anchor = center

    # Angle as given, unfolded
    sin, cos = Angle.coerce(angle).sin_cos()

    # Every point of the rectangle lies within this distance of the anchor
    reach = (anchor - center).norm() + math.hypot(width, height) * 0.5

    i_min, i_max = _index_range(reach, x0, dx)
    j_min, j_max = _index_range(reach, y0, dy)
    ii, jj = np.meshgrid(np.arange(i_min, i_max + 1), np.arange(j_min, j_max + 1))

    # Lattice offsets in the rotated frame, turned back by -angle
    u = x0 + ii.ravel() * dx
    v = y0 + jj.ravel() * dy
    xs = anchor.x + u * cos + v * sin
    ys = anchor.y - u * sin + v * cos

    inside = ((xs >= origin.x - tolerance) & (xs <= origin.x + width + tolerance)
              & (ys >= origin.y - tolerance) & (ys <= origin.y + height + tolerance))
    return np.column_stack((xs[inside], ys[inside]))


def _index_range(reach, offset, spacing) -> Tuple[int, int]:
    return (int(math.floor((-reach - offset) / spacing)) - 1,
            int(math.ceil((reach - offset) / spacing)) + 1)


def sort_positions(positions: np.ndarray) -> np.ndarray:
    """Sort an (N, 2) position array top-down: by y, then by x."""
    if len(positions) == 0:
        return positions
    order = np.lexsort((positions[:, 0], positions[:, 1]))
    return positions[order]
