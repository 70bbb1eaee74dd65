import io

import numpy as np
import pytest
from PIL import Image


def png_bytes(arr: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(arr).save(buf, format="PNG")
    return buf.getvalue()


def decode_png(data: bytes) -> np.ndarray:
    with Image.open(io.BytesIO(data)) as im:
        return np.array(im.convert("RGBA"))


@pytest.fixture
def gradient_rgba() -> np.ndarray:
    """32x24 RGBA image: horizontal red ramp, vertical green ramp, varying alpha."""
    h, w = 24, 32
    arr = np.zeros((h, w, 4), dtype=np.uint8)
    arr[..., 0] = (np.arange(w) * 255 // (w - 1))[None, :]
    arr[..., 1] = (np.arange(h) * 255 // (h - 1))[:, None]
    arr[..., 2] = 128
    arr[..., 3] = ((np.arange(w)[None, :] + np.arange(h)[:, None]) * 4 % 256).astype(np.uint8)
    return arr


@pytest.fixture
def checker_rgba() -> np.ndarray:
    """40x40 black/white checkerboard with 10px squares, fully opaque."""
    yy, xx = np.mgrid[0:40, 0:40]
    on = ((yy // 10 + xx // 10) % 2).astype(bool)
    arr = np.zeros((40, 40, 4), dtype=np.uint8)
    arr[on, :3] = 255
    arr[..., 3] = 255
    return arr


@pytest.fixture
def gradient_png(gradient_rgba) -> bytes:
    return png_bytes(gradient_rgba)
