# bitdist/distance.py
from __future__ import annotations
from collections import deque

import numpy as np

from .entities import Bitmap, DistanceGrid
from .errors import InvariantViolationError

UNSET = -1
OFFS4 = [(-1, 0), (1, 0), (0, -1), (0, 1)]  # 4 neighbours, one Manhattan step each


def _require_one(bitmap: Bitmap) -> None:
    if not bitmap.values.any():
        raise InvariantViolationError(
            f"{bitmap.width}x{bitmap.height} bitmap has no cell with value 1")


def compute_distances(bitmap: Bitmap) -> DistanceGrid:
    """
    Multi-source BFS: every 1-cell starts at distance 0 and the frontier grows
    one Manhattan step at a time, so the first visit of a cell is its distance
    to the nearest 1-cell.
    """
    _require_one(bitmap)
    W, H = bitmap.width, bitmap.height
    grid = bitmap.values
    dist = np.full((W, H), UNSET, dtype=np.int32)

    q = deque()
    for c, r in zip(*np.nonzero(grid)):
        dist[c, r] = 0
        q.append((int(c), int(r)))

    while q:
        c, r = q.popleft()
        for dc, dr in OFFS4:
            nc, nr = c + dc, r + dr
            if 0 <= nc < W and 0 <= nr < H and dist[nc, nr] == UNSET:
                dist[nc, nr] = dist[c, r] + 1
                q.append((nc, nr))

    return DistanceGrid(width=W, height=H, distances=dist)


def reference_distances(bitmap: Bitmap) -> DistanceGrid:
    """All-pairs definition: min |dc| + |dr| over every 1-cell. O((W*H)^2)."""
    _require_one(bitmap)
    W, H = bitmap.width, bitmap.height
    sources = [(cell.col, cell.row) for cell in bitmap.cells() if cell.value == 1]

    out = []
    for cell in bitmap.cells():
        if cell.value == 1:
            out.append(0)
            continue
        out.append(min(abs(cell.col - sc) + abs(cell.row - sr) for sc, sr in sources))

    return DistanceGrid(width=W, height=H, distances=np.asarray(out, dtype=np.int32).reshape(W, H))


METHODS = {
    "bfs": compute_distances,
    "brute": reference_distances,
}
