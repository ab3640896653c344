"""Output coordinate of the grid iterators."""
from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple


@total_ordering
@dataclass(frozen=True)
class GridCoord:
    """A grid position in the caller's (unrotated) coordinate frame.

    Ordered by y first, then x, so sorting a batch of coordinates gives the
    top-down raster order. The iterators themselves do not emit in that order.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = coord"""
        return iter((self.x, self.y))

    def __lt__(self, other):
        if not isinstance(other, GridCoord):
            return NotImplemented
        return (self.y, self.x) < (other.y, other.x)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, xy: Tuple[float, float]) -> 'GridCoord':
        x, y = xy
        return cls(x, y)
