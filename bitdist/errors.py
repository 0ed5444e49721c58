# bitdist/errors.py
from __future__ import annotations


class BitmapError(ValueError):
    """Base class for every error raised by the bitmap core."""


class InvalidDimensionError(BitmapError):
    """count, width or height is not a positive integer."""


class InvalidInputError(BitmapError):
    """Supplied cell values have the wrong length or hold something other than 0/1."""


class InvariantViolationError(BitmapError):
    """A bitmap without any 1-cell reached the distance transform."""
