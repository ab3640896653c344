"""Grid position producers.

The scanline iterators visit only lattice points inside the rectangle; the
generator wraps them into numpy position arrays.
"""

from .optimal_iterator import IteratorState, OptimalIterator, OptimalXIterator
from .grid_position_iterator import GridPositionIterator
from .lattice_generator import LatticeGenerator, grid_positions

__all__ = [
    'IteratorState',
    'OptimalIterator',
    'OptimalXIterator',
    'GridPositionIterator',
    'LatticeGenerator',
    'grid_positions',
]
