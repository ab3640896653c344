"""
Tests for GridPositionIterator.

Covers:
- Hand-checked point sets for small rectangles
- Containment, upper bound and agreement with the brute-force oracle
- Quarter-turn idempotence and shrinkage under rotation
- Half turns with nonzero phase offsets
- Degenerate spacing, exhaustion and argument validation
- Seamless tiling of abutting rectangles that share an anchor
"""
import math
import operator

import numpy as np
import pytest

from rotated_grid import Angle, GridCoord, GridPositionIterator, InvalidArgumentError, Vector
from rotated_grid.services import IteratorState
from rotated_grid.utils.lattice_math import brute_force_positions


SAMPLE_ANGLES_DEGREES = [0.0, 5.0, 15.0, 30.0, 45.0, 60.0, 75.0, 89.0, 90.0,
                         120.0, 180.0, 270.0, -33.3, 400.0]


def _grid(grid, degrees, **kwargs):
    return GridPositionIterator(*grid, Angle.from_degrees(degrees), **kwargs)


# ══════════════════════════════════════════════════════════════════════════
# Hand-checked scenarios
# ══════════════════════════════════════════════════════════════════════════

class TestScenarios:

    def test_center_anchor_axis_aligned(self, small_grid, assert_same_points):
        assert_same_points(_grid(small_grid, 0.0), [(1.0, 5.0), (8.0, 5.0), (15.0, 5.0)])

    def test_corner_anchor_axis_aligned(self, small_grid, corner_anchor, assert_same_points):
        points = _grid(small_grid, 0.0, anchor=corner_anchor)
        expected = [(x, y) for y in (0.0, 7.0) for x in (0.0, 7.0, 14.0)]
        assert_same_points(points, expected)

    def test_corner_anchor_45_degrees(self, small_grid, corner_anchor, assert_same_points):
        r = 7.0 / math.sqrt(2.0)
        expected = [(0.0, 0.0), (r, r), (2 * r, 0.0), (2 * r, 2 * r),
                    (0.0, 2 * r), (3 * r, r)]
        points = _grid(small_grid, 45.0, anchor=corner_anchor)
        assert_same_points(points, expected)

    def test_coordinates_are_grid_coords(self, small_grid):
        coords = list(_grid(small_grid, 0.0))
        assert all(isinstance(c, GridCoord) for c in coords)

    def test_angle_accepts_radians(self, small_grid, assert_same_points):
        by_angle = list(_grid(small_grid, 30.0))
        by_radians = list(GridPositionIterator(*small_grid, math.radians(30.0)))
        assert_same_points(by_radians, by_angle)

    def test_angle_property_is_normalized(self, small_grid):
        grid = _grid(small_grid, 135.0)
        assert math.isclose(grid.angle.degrees, -45.0)


# ══════════════════════════════════════════════════════════════════════════
# Invariants
# ══════════════════════════════════════════════════════════════════════════

class TestInvariants:

    @pytest.mark.parametrize("degrees", SAMPLE_ANGLES_DEGREES)
    def test_points_inside_rectangle(self, large_grid, degrees):
        width, height = large_grid[0], large_grid[1]
        for x, y in _grid(large_grid, degrees):
            assert -1e-9 <= x <= width + 1e-9
            assert -1e-9 <= y <= height + 1e-9

    @pytest.mark.parametrize("degrees", SAMPLE_ANGLES_DEGREES)
    def test_count_within_upper_bound(self, small_grid, large_grid, degrees):
        for grid_args in (small_grid, large_grid):
            grid = _grid(grid_args, degrees)
            upper = grid.estimate_max_grid_points()
            assert grid.size_hint() == (0, upper)
            assert len(list(grid)) <= upper

    @pytest.mark.parametrize("degrees", SAMPLE_ANGLES_DEGREES)
    def test_count_within_upper_bound_unequal_spacing(self, skewed_grid, degrees):
        for grid_args in (skewed_grid, (100.0, 1.0, 10.0, 1.0, 0.0, 0.0)):
            grid = _grid(grid_args, degrees)
            assert len(list(grid)) <= grid.size_hint()[1]

    def test_quarter_turn_swaps_spacing_in_upper_bound(self):
        grid = GridPositionIterator(100.0, 1.0, 10.0, 1.0, 0.0, 0.0, Angle.from_degrees(90.0))
        upper = grid.size_hint()[1]
        assert len(list(grid)) == 101
        assert upper >= 101

    def test_length_hint(self, small_grid):
        grid = _grid(small_grid, 0.0)
        assert operator.length_hint(grid) == 12

    @pytest.mark.parametrize("degrees", [0.0, 90.0, 180.0, 270.0])
    def test_quarter_turn_idempotence(self, small_grid, corner_anchor, assert_same_points, degrees):
        """Square spacing with zero offset maps onto itself every quarter turn."""
        reference = list(_grid(small_grid, 0.0))
        assert_same_points(_grid(small_grid, degrees), reference)

        reference = list(_grid(small_grid, 0.0, anchor=corner_anchor))
        assert_same_points(_grid(small_grid, degrees, anchor=corner_anchor), reference)

    def test_rotation_shrinks_square(self, square_grid):
        assert len(list(_grid(square_grid, 0.0))) == 9
        assert len(list(_grid(square_grid, 45.0))) == 5

    def test_no_duplicates(self, large_grid):
        points = np.array([c.to_tuple() for c in _grid(large_grid, 37.0)])
        rounded = {(round(x, 6), round(y, 6)) for x, y in points}
        assert len(rounded) == len(points)


# ══════════════════════════════════════════════════════════════════════════
# Agreement with the brute-force oracle
# ══════════════════════════════════════════════════════════════════════════

class TestMatchesBruteForce:

    @pytest.mark.parametrize("grid_name", ["small_grid", "large_grid", "skewed_grid"])
    @pytest.mark.parametrize("degrees", SAMPLE_ANGLES_DEGREES)
    def test_center_anchor(self, request, assert_same_points, grid_name, degrees):
        grid_args = request.getfixturevalue(grid_name)
        angle = Angle.from_degrees(degrees)
        expected = brute_force_positions(*grid_args, angle)
        assert_same_points(GridPositionIterator(*grid_args, angle), expected)

    @pytest.mark.parametrize("anchor", [Vector(0.0, 0.0), Vector(3.3, -1.7), Vector(250.0, 90.0)])
    @pytest.mark.parametrize("degrees", [0.0, 15.0, 45.0, 75.0, -33.3])
    def test_custom_anchor(self, large_grid, assert_same_points, anchor, degrees):
        angle = Angle.from_degrees(degrees)
        expected = brute_force_positions(*large_grid, angle, anchor=anchor)
        assert_same_points(GridPositionIterator(*large_grid, angle, anchor=anchor), expected)

    @pytest.mark.parametrize("degrees", [0.0, 22.5, -60.0])
    def test_shifted_origin(self, large_grid, assert_same_points, degrees):
        origin = Vector(-40.0, 12.5)
        angle = Angle.from_degrees(degrees)
        expected = brute_force_positions(*large_grid, angle, origin=origin)
        assert_same_points(GridPositionIterator(*large_grid, angle, origin=origin), expected)


# ══════════════════════════════════════════════════════════════════════════
# Half turns with phase offsets
# ══════════════════════════════════════════════════════════════════════════

class TestHalfTurnOffsets:

    def test_half_turn_rotates_offsets(self, assert_same_points):
        grid = GridPositionIterator(10.0, 10.0, 3.0, 3.0, 1.0, 0.0, math.pi)
        expected = [(x, y) for y in (2.0, 5.0, 8.0) for x in (1.0, 4.0, 7.0, 10.0)]
        assert_same_points(grid, expected)

    @pytest.mark.parametrize("degrees", [90.0, 135.0, 180.0, 200.0, 270.0, 300.0,
                                         -100.0, -150.0, 540.0, 765.0])
    def test_unfolded_angles_match_brute_force(self, skewed_grid, assert_same_points, degrees):
        angle = Angle.from_degrees(degrees)
        expected = brute_force_positions(*skewed_grid, angle)
        assert_same_points(GridPositionIterator(*skewed_grid, angle), expected)

    def test_full_turn_keeps_offsets(self, skewed_grid, assert_same_points):
        reference = list(_grid(skewed_grid, 20.0))
        assert_same_points(_grid(skewed_grid, 380.0), reference)

    def test_half_turn_mirrors_phase_through_anchor(self, skewed_grid, points_array):
        # Anchor (21, 8.5), offsets (0.6, 0.9), spacing (2.5, 4.0)
        unrotated = points_array(_grid(skewed_grid, 0.0))
        half_turn = points_array(_grid(skewed_grid, 180.0))
        assert np.allclose(unrotated[:, 0] % 2.5, 1.6)
        assert np.allclose(unrotated[:, 1] % 4.0, 1.4)
        assert np.allclose(half_turn[:, 0] % 2.5, 0.4)
        assert np.allclose(half_turn[:, 1] % 4.0, 3.6)


# ══════════════════════════════════════════════════════════════════════════
# Tiling
# ══════════════════════════════════════════════════════════════════════════

class TestTiling:

    @pytest.mark.parametrize("degrees", [15.0, 30.0, 75.0])
    def test_abutting_tiles_share_lattice(self, assert_same_points, degrees):
        angle = Angle.from_degrees(degrees)
        anchor = Vector(0.0, 0.0)
        left = list(GridPositionIterator(20.0, 12.0, 3.7, 3.7, 0.0, 0.0, angle, anchor=anchor))
        right = list(GridPositionIterator(20.0, 12.0, 3.7, 3.7, 0.0, 0.0, angle,
                                          origin=Vector(20.0, 0.0), anchor=anchor))
        whole = list(GridPositionIterator(40.0, 12.0, 3.7, 3.7, 0.0, 0.0, angle, anchor=anchor))
        assert_same_points(left + right, whole)


# ══════════════════════════════════════════════════════════════════════════
# Degenerate spacing
# ══════════════════════════════════════════════════════════════════════════

class TestDegenerateSpacing:

    def test_spacing_equals_dimensions(self, assert_same_points):
        grid = GridPositionIterator(16.0, 10.0, 16.0, 10.0, 0.0, 0.0, Angle.from_degrees(0.0))
        assert_same_points(grid, [(8.0, 5.0)])

    @pytest.mark.parametrize("degrees", [0.0, 17.0, 45.0, 83.0])
    def test_spacing_larger_than_diagonal(self, degrees):
        grid = GridPositionIterator(16.0, 10.0, 20.0, 20.0, 0.0, 0.0, Angle.from_degrees(degrees))
        assert len(list(grid)) <= 1

    def test_center_point_always_present(self):
        grid = GridPositionIterator(16.0, 10.0, 20.0, 20.0, 0.0, 0.0, Angle.from_degrees(33.0))
        points = list(grid)
        assert len(points) == 1
        assert math.isclose(points[0].x, 8.0)
        assert math.isclose(points[0].y, 5.0)


# ══════════════════════════════════════════════════════════════════════════
# Exhaustion
# ══════════════════════════════════════════════════════════════════════════

class TestExhaustion:

    def test_not_restartable(self, small_grid):
        grid = _grid(small_grid, 0.0)
        assert len(list(grid)) == 3
        assert list(grid) == []
        with pytest.raises(StopIteration):
            next(grid)
        assert grid.state is IteratorState.DONE

    def test_iter_returns_self(self, small_grid):
        grid = _grid(small_grid, 0.0)
        assert iter(grid) is grid


# ══════════════════════════════════════════════════════════════════════════
# Validation
# ══════════════════════════════════════════════════════════════════════════

class TestValidation:

    @pytest.mark.parametrize("width, height", [
        (0.0, 10.0),
        (16.0, 0.0),
        (-1.0, 10.0),
        (16.0, -5.0),
        (float('nan'), 10.0),
    ])
    def test_invalid_size_raises(self, width, height):
        with pytest.raises(InvalidArgumentError):
            GridPositionIterator(width, height, 7.0, 7.0, 0.0, 0.0, 0.0)

    def test_invalid_size_is_value_error(self):
        with pytest.raises(ValueError, match="width must be positive"):
            GridPositionIterator(0.0, 10.0, 7.0, 7.0, 0.0, 0.0, 0.0)

    def test_invalid_size_is_logged(self, caplog):
        with pytest.raises(InvalidArgumentError):
            GridPositionIterator(16.0, -2.0, 7.0, 7.0, 0.0, 0.0, 0.0)
        assert "height must be positive" in caplog.text


# ══════════════════════════════════════════════════════════════════════════
# Ordering
# ══════════════════════════════════════════════════════════════════════════

class TestGridCoordOrdering:

    def test_sorted_raster_order(self, small_grid, corner_anchor):
        coords = sorted(GridCoord(round(c.x, 9), round(c.y, 9))
                        for c in _grid(small_grid, 90.0, anchor=corner_anchor))
        assert [c.to_tuple() for c in coords] == [(0.0, 0.0), (7.0, 0.0), (14.0, 0.0),
                                                  (0.0, 7.0), (7.0, 7.0), (14.0, 7.0)]

    def test_compares_y_first(self):
        assert GridCoord(5.0, 1.0) < GridCoord(0.0, 2.0)
        assert GridCoord(1.0, 2.0) < GridCoord(3.0, 2.0)
        assert GridCoord(1.0, 2.0) >= GridCoord(1.0, 2.0)

    def test_tuple_round_trip(self):
        coord = GridCoord(1.5, -2.0)
        assert GridCoord.from_tuple(coord.to_tuple()) == coord
        assert tuple(coord) == (1.5, -2.0)
