"""
Shared fixtures for rotated grid tests.

Provides reference rectangles, halftone angle sets and point-set comparison
helpers.
"""
import numpy as np
import pytest

from rotated_grid import Vector


# ── Reference grids ─────────────────────────────────────────────────────

# (width, height, dx, dy, x0, y0)
SMALL_GRID = (16.0, 10.0, 7.0, 7.0, 0.0, 0.0)
SQUARE_GRID = (14.0, 14.0, 7.0, 7.0, 0.0, 0.0)
LARGE_GRID = (100.0, 60.0, 3.7, 3.7, 0.3, 1.1)
SKEWED_GRID = (42.0, 17.0, 2.5, 4.0, 0.6, 0.9)


@pytest.fixture
def small_grid():
    """16 x 10 rectangle with spacing 7 and no offset"""
    return SMALL_GRID


@pytest.fixture
def square_grid():
    """14 x 14 rectangle with spacing 7 and no offset"""
    return SQUARE_GRID


@pytest.fixture
def large_grid():
    """100 x 60 rectangle with a fractional spacing and offsets"""
    return LARGE_GRID


@pytest.fixture
def skewed_grid():
    """42 x 17 rectangle with unequal spacing and offsets"""
    return SKEWED_GRID


@pytest.fixture
def corner_anchor():
    """Lattice anchor on the default rectangle's top-left corner"""
    return Vector(0.0, 0.0)


# ── Point-set helpers ───────────────────────────────────────────────────

def _to_array(points):
    return np.array([tuple(p) for p in points], dtype=float).reshape(-1, 2)


def _nearest_distances(a, b):
    if len(b) == 0:
        return np.full(len(a), np.inf)
    diff = a[:, None, :] - b[None, :, :]
    return np.sqrt((diff ** 2).sum(axis=2)).min(axis=1)


@pytest.fixture
def points_array():
    """Convert an iterable of coordinates into an (N, 2) array"""
    return _to_array


@pytest.fixture
def assert_same_points():
    """Assert two point collections are equal as sets, within tolerance"""
    def check(actual, expected, tolerance=1e-7):
        actual = _to_array(actual)
        expected = _to_array(expected)
        assert len(actual) == len(expected), \
            f"expected {len(expected)} points, got {len(actual)}"
        if len(actual) == 0:
            return
        assert _nearest_distances(actual, expected).max() < tolerance
        assert _nearest_distances(expected, actual).max() < tolerance
    return check
