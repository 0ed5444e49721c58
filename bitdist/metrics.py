# bitdist/metrics.py
from __future__ import annotations
from typing import Any, Dict

import numpy as np

from .entities import Bitmap, DistanceGrid


def ones_density(bitmap: Bitmap) -> float:
    """Fraction of cells holding 1."""
    return bitmap.ones() / max(len(bitmap), 1)


def distance_histogram(distances: DistanceGrid) -> Dict[int, int]:
    vals, counts = np.unique(distances.distances, return_counts=True)
    return {int(v): int(c) for v, c in zip(vals, counts)}


def summarize_bitmap(bitmap: Bitmap, distances: DistanceGrid) -> Dict[str, Any]:
    d = distances.distances
    return {
        "W": bitmap.width,
        "H": bitmap.height,
        "ones": bitmap.ones(),
        "density": ones_density(bitmap),
        "repaired": bool(bitmap.repaired),
        "max_distance": int(d.max()),
        "mean_distance": float(d.mean()),
        "histogram": distance_histogram(distances),
    }
