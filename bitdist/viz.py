# bitdist/viz.py
from __future__ import annotations
import matplotlib.pyplot as plt

from .entities import Bitmap, DistanceGrid


def plot_bitmap_distances(bitmap: Bitmap, distances: DistanceGrid, *, title: str = "", savepath: str | None = None):
    """
    Side-by-side view: cell values (1=black) and distance heatmap.
    Rows of the figure are bitmap columns, matching the console layout.
    If savepath is given the figure is written there and closed, otherwise plt.show().
    """
    W, H = bitmap.width, bitmap.height
    fig, (ax0, ax1) = plt.subplots(1, 2, figsize=(max(2 * H / 3, 6), max(W / 3, 3)))

    ax0.imshow(bitmap.values, cmap="gray_r", vmin=0, vmax=1, interpolation="nearest")
    ax0.set_title("Bitmap data")

    im = ax1.imshow(distances.distances, cmap="viridis", interpolation="nearest")
    ax1.set_title("Bitmap distances")
    if W * H <= 400:
        for c in range(W):
            for r in range(H):
                ax1.text(r, c, str(int(distances.distances[c, r])), ha="center", va="center",
                         color="white", fontsize=7)

    for ax in (ax0, ax1):
        ax.set_xticks([]); ax.set_yticks([])
    cb = plt.colorbar(im, ax=ax1, shrink=0.8, pad=0.02)
    cb.set_label("Distance (cells)", rotation=270, labelpad=10)
    if title:
        fig.suptitle(title)
    fig.tight_layout()
    if savepath:
        fig.savefig(savepath, dpi=150); plt.close(fig)
    else:
        plt.show()
    return fig
