"""Lattice generator - rotated grid positions as numpy arrays."""

import logging
from typing import Any, Dict, Optional

import numpy as np

from rotated_grid.constants import (
    DEFAULT_ANGLE_DEGREES,
    DEFAULT_HEIGHT,
    DEFAULT_OFFSET_X,
    DEFAULT_OFFSET_Y,
    DEFAULT_SPACING_X,
    DEFAULT_SPACING_Y,
    DEFAULT_WIDTH,
    HALFTONE_SCREEN_ANGLES,
    POSITION_COLUMNS,
)
from rotated_grid.models.angle import Angle
from rotated_grid.models.vector import Vector
from rotated_grid.services.grid_position_iterator import GridPositionIterator
from rotated_grid.utils.lattice_math import sort_positions

logger = logging.getLogger(__name__)


def grid_positions(width, height, dx, dy, x0, y0, angle,
                   origin: Optional[Vector] = None,
                   anchor: Optional[Vector] = None,
                   sort: bool = False) -> np.ndarray:
    """Collect the positions of a rotated grid into an array.

    Args:
        width, height, dx, dy, x0, y0, angle, origin, anchor:
            See GridPositionIterator
        sort: Return positions top-down (by y, then x) instead of scan order

    Returns:
        (N, 2) float array [[x, y], ...]
    """
    grid = GridPositionIterator(width, height, dx, dy, x0, y0, angle,
                                origin=origin, anchor=anchor)
    coords = [coord.to_tuple() for coord in grid]
    positions = np.array(coords, dtype=float).reshape(-1, POSITION_COLUMNS)
    if sort:
        positions = sort_positions(positions)
    return positions


class LatticeGenerator:
    """Generate rotated lattice positions from a settings dictionary.

    Settings keys: width, height, spacing_x, spacing_y, offset_x, offset_y,
    angle (degrees). Keyword arguments to generate_positions() override
    the stored settings for a single call. Settings belong to the instance.
    """

    def __init__(self):
        self.settings = {
            'width': DEFAULT_WIDTH,
            'height': DEFAULT_HEIGHT,
            'spacing_x': DEFAULT_SPACING_X,
            'spacing_y': DEFAULT_SPACING_Y,
            'offset_x': DEFAULT_OFFSET_X,
            'offset_y': DEFAULT_OFFSET_Y,
            'angle': DEFAULT_ANGLE_DEGREES,
        }

    def get_title(self) -> str:
        return "Rotated Lattice"

    def get_settings(self) -> Dict[str, Any]:
        """Get current generator settings.

        Returns:
            Dictionary of parameter name -> value
        """
        return self.settings.copy()

    def set_settings(self, settings: Dict[str, Any]):
        """Update generator settings.

        Args:
            settings: Dictionary of parameter name -> value

        Raises:
            KeyError: If a key is not a known setting
        """
        unknown = set(settings) - set(self.settings)
        if unknown:
            raise KeyError(f"Unknown lattice settings: {', '.join(sorted(unknown))}")
        self.settings.update(settings)

    def generate_positions(self, origin: Optional[Vector] = None,
                           anchor: Optional[Vector] = None,
                           sort: bool = True, **kwargs) -> np.ndarray:
        """Generate lattice positions.

        Args:
            origin: Top-left corner of the rectangle (default (0, 0))
            anchor: Lattice anchor (default rectangle center)
            sort: Return positions top-down
            **kwargs: Per-call overrides of the stored settings

        Returns:
            (N, 2) float array [[x, y], ...]
        """
        params = self.settings.copy()
        params.update(kwargs)

        positions = grid_positions(
            params['width'], params['height'],
            params['spacing_x'], params['spacing_y'],
            params['offset_x'], params['offset_y'],
            Angle.from_degrees(params['angle']),
            origin=origin, anchor=anchor, sort=sort,
        )
        logger.debug("Generated %d positions at %.6g deg", len(positions), params['angle'])
        return positions

    def generate_screens(self, angles: Optional[Dict[str, float]] = None,
                         origin: Optional[Vector] = None,
                         anchor: Optional[Vector] = None) -> Dict[str, np.ndarray]:
        """Generate one lattice per halftone screen.

        Args:
            angles: Screen name -> angle in degrees (default CMYK screens)
            origin: Top-left corner of the rectangle
            anchor: Lattice anchor shared by all screens

        Returns:
            Screen name -> (N, 2) position array
        """
        if angles is None:
            angles = HALFTONE_SCREEN_ANGLES
        return {name: self.generate_positions(origin=origin, anchor=anchor, angle=degrees)
                for name, degrees in angles.items()}
