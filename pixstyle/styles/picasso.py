"""Block posterization with dark outlines ("picasso").

The image is cut into a grid of square blocks, each block is filled with
the fill colour nearest to its mean, and strong Sobel edges are painted over
in a near-black outline colour.
"""
from __future__ import annotations

import logging

import numpy as np

from ..utils.raster import REC601, luminance, sobel_magnitude

Array = np.ndarray

log = logging.getLogger(__name__)

# Vibrant palette; the last entry is reserved for outlines
PALETTE = np.array(
    [
        [230, 57, 70],  # red
        [29, 53, 87],  # navy
        [69, 123, 157],  # teal-blue
        [42, 157, 143],  # teal-green
        [233, 196, 106],  # yellow
        [244, 162, 97],  # orange
        [239, 71, 111],  # pink-red
        [87, 117, 144],  # slate
        [250, 250, 250],  # white
        [15, 15, 20],  # near-black
    ],
    dtype=np.uint8,
)
FILL_COLORS = PALETTE[:9]
OUTLINE_COLOR = PALETTE[9]

MIN_BLOCK = 10
BLOCKS_PER_MIN_SIDE = 40
EDGE_RATIO = 0.35
EDGE_FLOOR = 60.0


def block_size(width: int, height: int) -> int:
    return max(MIN_BLOCK, min(width, height) // BLOCKS_PER_MIN_SIDE)


def nearest_palette(color, palette: Array = FILL_COLORS) -> Array:
    """Return the palette entry with the smallest squared RGB distance.

    Ties go to the earliest entry.
    """
    c = np.asarray(color, dtype=np.int64)[:3]
    d2 = ((palette.astype(np.int64) - c) ** 2).sum(axis=1)
    return palette[int(np.argmin(d2))]


def stylize_picasso(arr: Array) -> Array:
    """Apply block posterization and edge outlines.

    Parameters
    ----------
    arr : np.ndarray
        Source RGBA image (H, W, 4), dtype=uint8. Alpha is ignored.

    Returns
    -------
    np.ndarray
        New RGBA image whose RGB values are all palette entries; alpha is 255.
    """
    H, W, _ = arr.shape
    rgb = arr[..., :3]

    edge = sobel_magnitude(luminance(rgb, REC601))

    block = block_size(W, H)
    out = np.empty_like(arr)
    out[..., 3] = 255
    for by in range(0, H, block):
        for bx in range(0, W, block):
            tile = rgb[by:by + block, bx:bx + block].reshape(-1, 3)
            # Integer mean, truncated like the per-channel sums it comes from
            avg = tile.sum(axis=0, dtype=np.int64) // tile.shape[0]
            out[by:by + block, bx:bx + block, :3] = nearest_palette(avg)

    max_edge = float(edge.max())
    thresh = max(max_edge * EDGE_RATIO, EDGE_FLOOR)
    log.debug("picasso: %dx%d block=%d max_edge=%.2f thresh=%.2f", W, H, block, max_edge, thresh)
    if W > 2 and H > 2:
        mask = np.zeros((H, W), dtype=bool)
        mask[1:-1, 1:-1] = edge[1:-1, 1:-1] >= thresh
        out[mask, :3] = OUTLINE_COLOR
    return out
