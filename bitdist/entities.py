# bitdist/entities.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List

import numpy as np


@dataclass(frozen=True)
class Cell:
    col: int
    row: int
    value: int


@dataclass(frozen=True, eq=False)
class Bitmap:
    """
    width x height grid of 0/1 cells.
    values[c, r] holds the cell at (col=c+1, row=r+1), so a C-order ravel
    walks columns outer and rows inner.
    """
    width: int
    height: int
    values: np.ndarray          # (width, height) uint8, read-only
    repaired: bool = False      # True if (1,1) was forced to 1

    def __len__(self) -> int:
        return self.width * self.height

    def cells(self) -> Iterator[Cell]:
        for c in range(self.width):
            for r in range(self.height):
                yield Cell(col=c + 1, row=r + 1, value=int(self.values[c, r]))

    def flat(self) -> List[int]:
        return [int(v) for v in self.values.ravel()]

    def ones(self) -> int:
        return int(self.values.sum())

    def __eq__(self, other):
        if not isinstance(other, Bitmap):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and np.array_equal(self.values, other.values)


@dataclass(frozen=True, eq=False)
class DistanceGrid:
    width: int
    height: int
    distances: np.ndarray       # (width, height) int32, same indexing as Bitmap.values

    def __len__(self) -> int:
        return self.width * self.height

    def flat(self) -> List[int]:
        return [int(d) for d in self.distances.ravel()]

    def max(self) -> int:
        return int(self.distances.max())

    def __eq__(self, other):
        if not isinstance(other, DistanceGrid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and np.array_equal(self.distances, other.distances)
