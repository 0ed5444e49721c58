import numpy as np
import pytest

from bitdist.entities import Bitmap
from bitdist.errors import InvariantViolationError
from bitdist.factory import Random, Supplied, create_bitmap, create_bitmaps
from bitdist.distance import compute_distances, reference_distances


def test_corner_2x2(corner_bitmap):
    assert compute_distances(corner_bitmap).flat() == [0, 1, 1, 2]


def test_repaired_bitmap_distances():
    [bm] = create_bitmaps(1, 2, 2, Supplied([0, 0, 0, 0]))
    assert compute_distances(bm).flat() == [0, 1, 1, 2]


def test_center_one(center_bitmap):
    dg = compute_distances(center_bitmap)
    assert dg.flat() == [2, 1, 1, 0, 2, 1]
    assert dg.distances.shape == (3, 2)
    assert dg.max() == 2


def test_two_sources_take_the_nearest():
    # 1 column x 5 rows: 1 0 0 0 1
    bm = create_bitmap(1, 5, [1, 0, 0, 0, 1])
    assert compute_distances(bm).flat() == [0, 1, 2, 1, 0]


def test_zero_at_every_source(rng):
    bm = create_bitmap(7, 5, rng=rng)
    flat = compute_distances(bm).flat()
    for v, d in zip(bm.flat(), flat):
        if v == 1:
            assert d == 0
        else:
            assert d > 0


@pytest.mark.parametrize("w,h", [(1, 1), (1, 7), (7, 1), (5, 3), (8, 8), (12, 4)])
def test_bfs_matches_brute_force(w, h):
    for bm in create_bitmaps(10, w, h, Random(seed=w * 100 + h)):
        fast = compute_distances(bm)
        slow = reference_distances(bm)
        assert fast.flat() == slow.flat()
        assert len(fast) == w * h
        assert min(fast.flat()) == 0


def test_sparse_large_grid_matches_brute_force():
    values = [0] * (20 * 15)
    values[137] = 1
    bm = create_bitmap(20, 15, values)
    assert compute_distances(bm).flat() == reference_distances(bm).flat()


def test_idempotent_and_no_mutation(center_bitmap):
    before = center_bitmap.flat()
    a = compute_distances(center_bitmap)
    b = compute_distances(center_bitmap)
    assert a.flat() == b.flat()
    assert center_bitmap.flat() == before


@pytest.mark.parametrize("fn", [compute_distances, reference_distances])
def test_all_zero_bitmap_is_rejected(fn):
    bm = Bitmap(width=2, height=2, values=np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(InvariantViolationError):
        fn(bm)


def test_distance_grids_compare_by_content(corner_bitmap, center_bitmap):
    assert compute_distances(corner_bitmap) == compute_distances(corner_bitmap)
    assert compute_distances(corner_bitmap) == reference_distances(corner_bitmap)
    assert compute_distances(corner_bitmap) != compute_distances(center_bitmap)
