# bitdist/display.py
from __future__ import annotations
from typing import Callable, List, Sequence

from .entities import Bitmap, DistanceGrid


def slice_rows(flat: Sequence[int], height: int) -> List[List[int]]:
    """Cuts a flat column-major sequence into rows of 'height' values (one row per column)."""
    return [list(flat[i:i + height]) for i in range(0, len(flat), height)]


def format_grid(flat: Sequence[int], height: int) -> str:
    rows = slice_rows(flat, height)
    cell_w = max(len(str(v)) for v in flat) if len(flat) else 1
    return "\n".join(" ".join(str(v).rjust(cell_w) for v in row) for row in rows)


def render_result(bitmap: Bitmap, distances: DistanceGrid) -> str:
    return (
        "Bitmap data:\n"
        f"{format_grid(bitmap.flat(), bitmap.height)}\n\n"
        "Bitmap distances:\n"
        f"{format_grid(distances.flat(), distances.height)}\n"
    )


def show_result(bitmap: Bitmap, distances: DistanceGrid, write: Callable[[str], None] = print):
    write(render_result(bitmap, distances))
