# bitdist/factory.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

import numpy as np

from .entities import Bitmap
from .errors import InvalidDimensionError, InvalidInputError


@dataclass(frozen=True)
class Random:
    """Draw every cell uniformly from {0,1}. A fixed seed reproduces the whole batch."""
    seed: Optional[int] = None


@dataclass(frozen=True)
class Supplied:
    """Cell values for all bitmaps, column-major, one width*height slice per bitmap."""
    values: Sequence[int]


Source = Union[Random, Supplied]


def _check_positive_int(name: str, v) -> int:
    if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
        raise InvalidDimensionError(f"{name} must be a positive integer, got {v!r}")
    if v < 1:
        raise InvalidDimensionError(f"{name} must be >= 1, got {v}")
    return int(v)


def _as_bits(values: Sequence[int], width: int, height: int) -> np.ndarray:
    arr = np.asarray(values)
    if arr.size and not np.isin(arr, (0, 1)).all():
        bad = [v for v in values if v not in (0, 1)][:3]
        raise InvalidInputError(f"cell values must be 0 or 1, got {bad}")
    return arr.astype(np.uint8).reshape(width, height)


def create_bitmap(
    width: int,
    height: int,
    values: Sequence[int] | None = None,
    rng: np.random.Generator | None = None,
) -> Bitmap:
    """
    Builds one bitmap. With 'values' they are laid out column-major
    (columns outer, rows inner); otherwise cells are sampled from 'rng'.
    If no cell ends up as 1, cell (1,1) is forced to 1.
    """
    width = _check_positive_int("width", width)
    height = _check_positive_int("height", height)

    if values is not None:
        if len(values) != width * height:
            raise InvalidInputError(
                f"expected {width * height} values for a {width}x{height} bitmap, got {len(values)}")
        grid = _as_bits(values, width, height)
    else:
        rng = rng if rng is not None else np.random.default_rng()
        grid = rng.integers(0, 2, size=(width, height), dtype=np.uint8)

    repaired = False
    if not grid.any():
        grid[0, 0] = 1
        repaired = True

    grid.flags.writeable = False
    return Bitmap(width=width, height=height, values=grid, repaired=repaired)


def create_bitmaps(count: int, width: int, height: int, source: Source | None = None) -> List[Bitmap]:
    """
    Builds 'count' independent bitmaps of width x height.

    source=Random(seed): one child SeedSequence per bitmap, spawned from the seed.
    source=Supplied(values): exactly count*width*height values, consumed in order.
    Dimensions are checked before anything is allocated.
    """
    count = _check_positive_int("count", count)
    width = _check_positive_int("width", width)
    height = _check_positive_int("height", height)
    source = source if source is not None else Random()
    n = width * height

    if isinstance(source, Supplied):
        values = list(source.values)
        if len(values) != count * n:
            raise InvalidInputError(
                f"expected {count * n} values ({count} x {width}x{height}), got {len(values)}")
        return [create_bitmap(width, height, values[k * n:(k + 1) * n]) for k in range(count)]

    if isinstance(source, Random):
        seed = source.seed
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, np.integer)) or seed < 0):
            raise InvalidInputError(f"seed must be a non-negative integer or None, got {seed!r}")
        children = np.random.SeedSequence(None if seed is None else int(seed)).spawn(count)
        return [create_bitmap(width, height, rng=np.random.default_rng(ss)) for ss in children]

    raise InvalidInputError(f"unknown source {source!r}")
