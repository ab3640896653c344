"""Exceptions raised by rotated_grid."""


class InvalidArgumentError(ValueError):
    """A grid was requested for a rectangle with non-positive width or height."""
