"""Neon teal/magenta colour grade ("cyberpunk").

Pipeline: tonal regrade -> saturation -> bloom around bright pixels ->
edge glow -> light chromatic offset on edges. The source alpha channel is
passed through unchanged.
"""
from __future__ import annotations

import logging

import numpy as np
from numba import njit

from ..utils.raster import REC709, gradient_magnitude, luminance, quantize_unit, to_unit

Array = np.ndarray

log = logging.getLogger(__name__)

SATURATION = 1.35
BLOOM_THRESHOLD = 0.70
BLOOM_RADIUS = 2
BLOOM_MIX = np.array([0.35, 0.20, 0.45], dtype=np.float32)
EDGE_LOW = 0.08
EDGE_RANGE = 0.5


def tonal_weights(lum: Array) -> tuple[Array, Array, Array]:
    """Shadow/mid/highlight weights. They are not normalised."""
    shadows = np.maximum(0.0, 1.0 - lum) ** 2
    highlights = lum * lum
    mids = np.maximum(0.0, 1.0 - shadows - highlights)
    return shadows, mids, highlights


@njit(cache=True)
def _bloom_impl(rgb: np.ndarray, lum: np.ndarray, threshold: float, radius: int, out: np.ndarray) -> None:
    # Writes the remapped bloom colour for bright pixels; others stay 0.
    H, W, _ = rgb.shape
    for y in range(H):
        for x in range(W):
            if lum[y, x] <= threshold:
                continue
            sr = 0.0
            sg = 0.0
            sb = 0.0
            wsum = 0.0
            for dy in range(-radius, radius + 1):
                yy = y + dy
                if yy < 0 or yy >= H:
                    continue
                for dx in range(-radius, radius + 1):
                    xx = x + dx
                    if xx < 0 or xx >= W:
                        continue
                    if lum[yy, xx] <= threshold:
                        continue
                    w = 1.0 / (1.0 + dx * dx + dy * dy)
                    sr += w * rgb[yy, xx, 0]
                    sg += w * rgb[yy, xx, 1]
                    sb += w * rgb[yy, xx, 2]
                    wsum += w
            if wsum <= 0.0:
                continue
            out[y, x, 0] = (sr / wsum) * 0.9 + 0.1
            out[y, x, 1] = (sg / wsum) * 0.4 + 0.05
            out[y, x, 2] = (sb / wsum) * 1.1 + 0.2


def bloom(rgb: Array, lum: Array, threshold: float = BLOOM_THRESHOLD) -> Array:
    """Remapped bloom colour per pixel, zero where ``lum <= threshold``."""
    out = np.zeros(rgb.shape[:2] + (3,), dtype=np.float32)
    _bloom_impl(np.ascontiguousarray(rgb), np.ascontiguousarray(lum), threshold, BLOOM_RADIUS, out)
    return out


def edge_factor(lum: Array) -> Array:
    return np.clip((gradient_magnitude(lum) - EDGE_LOW) / EDGE_RANGE, 0.0, 1.0)


def stylize_cyberpunk(arr: Array) -> Array:
    """Apply the neon grade.

    Parameters
    ----------
    arr : np.ndarray
        Source RGBA image (H, W, 4), dtype=uint8. Not modified.

    Returns
    -------
    np.ndarray
        New RGBA image of the same shape with the source alpha.
    """
    H, W, _ = arr.shape
    rgb = to_unit(arr[..., :3])
    lum = luminance(rgb, REC709)
    shadows, mids, highlights = tonal_weights(lum)

    work = np.empty_like(rgb)
    work[..., 0] = rgb[..., 0] * 1.05 + 0.10 * mids + 0.08 * highlights
    work[..., 1] = rgb[..., 1] * 0.85 - 0.05 * mids
    work[..., 2] = rgb[..., 2] * 1.25 + 0.20 * shadows + 0.06 * mids
    work = np.clip(work, 0.0, 1.0)

    avg = work.mean(axis=2, keepdims=True)
    work = np.clip(avg + (work - avg) * SATURATION, 0.0, 1.0)

    work = np.clip(work + bloom(rgb, lum) * BLOOM_MIX, 0.0, 1.0)

    edge = edge_factor(lum)
    work[..., 0] += edge * 0.15
    work[..., 2] += edge * 0.25
    work = np.clip(work, 0.0, 1.0)

    # Chromatic offset: red pulled from the right, blue from the left
    on_edge = edge > 0.0
    red_right = np.concatenate([work[:, 1:, 0], work[:, -1:, 0]], axis=1)
    blue_left = np.concatenate([work[:, :1, 2], work[:, :-1, 2]], axis=1)
    shifted = work.copy()
    shifted[..., 0] = np.where(on_edge, (work[..., 0] + red_right) * 0.5 / 1.5, work[..., 0])
    shifted[..., 2] = np.where(on_edge, (work[..., 2] + blue_left) * 0.5 / 1.5, work[..., 2])
    log.debug("cyberpunk: %dx%d bright=%d edges=%d", W, H, int((lum > BLOOM_THRESHOLD).sum()), int(on_edge.sum()))

    out = np.empty_like(arr)
    out[..., :3] = quantize_unit(shifted)
    out[..., 3] = arr[..., 3]
    return out
