from bitdist.display import format_grid, render_result, show_result, slice_rows
from bitdist.distance import compute_distances
from bitdist.metrics import distance_histogram, ones_density, summarize_bitmap


def test_slice_rows_uses_height():
    assert slice_rows([1, 2, 3, 4, 5, 6], 2) == [[1, 2], [3, 4], [5, 6]]
    assert slice_rows([1, 2, 3, 4, 5, 6], 3) == [[1, 2, 3], [4, 5, 6]]


def test_format_grid_pads_wide_values():
    assert format_grid([2, 1, 1, 0, 2, 1], 2) == "2 1\n1 0\n2 1"
    assert format_grid([10, 2], 2) == "10  2"


def test_render_result(corner_bitmap):
    out = render_result(corner_bitmap, compute_distances(corner_bitmap))
    assert out == "Bitmap data:\n1 0\n0 0\n\nBitmap distances:\n0 1\n1 2\n"


def test_show_result_writes_once(center_bitmap):
    lines = []
    show_result(center_bitmap, compute_distances(center_bitmap), write=lines.append)
    assert len(lines) == 1
    assert "Bitmap distances:\n2 1\n1 0\n2 1" in lines[0]


def test_summarize_bitmap(corner_bitmap):
    dg = compute_distances(corner_bitmap)
    s = summarize_bitmap(corner_bitmap, dg)
    assert s["ones"] == 1
    assert s["density"] == ones_density(corner_bitmap) == 0.25
    assert s["max_distance"] == 2
    assert s["mean_distance"] == 1.0
    assert s["repaired"] is False
    assert s["histogram"] == distance_histogram(dg) == {0: 1, 1: 2, 2: 1}
