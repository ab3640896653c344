"""Angle value object with memoized trigonometry."""
import math
from typing import Tuple

from rotated_grid.constants import ANGLE_FOLD_PERIOD_DEGREES, ANGLE_RANGE_MIN_DEGREES


class Angle:
    """An angle expressed in radians.

    Sine and cosine are computed once on first use and reused afterwards,
    so rotating many points by the same Angle costs a single sin/cos pair.
    """

    __slots__ = ('_radians', '_sin_cos')

    def __init__(self, radians: float = 0.0):
        self._radians = float(radians)
        self._sin_cos = None

    @classmethod
    def from_radians(cls, radians: float) -> 'Angle':
        return cls(radians)

    @classmethod
    def from_degrees(cls, degrees: float) -> 'Angle':
        return cls(math.radians(degrees))

    @property
    def radians(self) -> float:
        return self._radians

    @property
    def degrees(self) -> float:
        return math.degrees(self._radians)

    def sin_cos(self) -> Tuple[float, float]:
        """Return (sin, cos) of the angle."""
        if self._sin_cos is None:
            self._sin_cos = (math.sin(self._radians), math.cos(self._radians))
        return self._sin_cos

    def normalized(self) -> 'Angle':
        """Fold the angle into [-pi/2, pi/2) (see fold())."""
        return self.fold()[0]

    def fold(self) -> Tuple['Angle', int]:
        """Fold the angle into [-pi/2, pi/2) by whole half turns.

        A lattice turned by a further half turn about its anchor is the same
        lattice with its phase offsets negated, so callers that fold must
        negate their offsets when an odd number of half turns was removed.

        Returns:
            (folded Angle, number of half turns removed)
        """
        period = math.radians(ANGLE_FOLD_PERIOD_DEGREES)
        low = math.radians(ANGLE_RANGE_MIN_DEGREES)
        folded = (self._radians - low) % period + low
        # Float modulo can land exactly on the open upper bound
        if folded >= low + period:
            folded = low
        half_turns = int(round((self._radians - folded) / period))
        return Angle(folded), half_turns

    def __neg__(self) -> 'Angle':
        return Angle(-self._radians)

    def __eq__(self, other):
        if not isinstance(other, Angle):
            return NotImplemented
        return self._radians == other._radians

    def __hash__(self):
        return hash(self._radians)

    def __repr__(self):
        return f"Angle({self._radians!r})"

    @staticmethod
    def coerce(value) -> 'Angle':
        """Accept an Angle or a plain number of radians."""
        if isinstance(value, Angle):
            return value
        return Angle(value)
