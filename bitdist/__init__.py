"""
Binary bitmaps and nearest-1 Manhattan distance grids.
"""

from .entities import Cell, Bitmap, DistanceGrid
from .errors import BitmapError, InvalidDimensionError, InvalidInputError, InvariantViolationError
from .factory import Random, Supplied, create_bitmap, create_bitmaps
from .distance import compute_distances, reference_distances

__all__ = [
    "Cell",
    "Bitmap",
    "DistanceGrid",
    "BitmapError",
    "InvalidDimensionError",
    "InvalidInputError",
    "InvariantViolationError",
    "Random",
    "Supplied",
    "create_bitmap",
    "create_bitmaps",
    "compute_distances",
    "reference_distances",
]
