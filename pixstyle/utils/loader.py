"""Image decoding/encoding using Pillow, with NumPy arrays.

All processing in this project occurs on NumPy arrays. These helpers only
convert between encoded image bytes (or files) and RGBA ``uint8`` arrays.
"""
from __future__ import annotations

import io
from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image

from ..errors import DecodeError, EncodeError
from .raster import check_rgba

Array = np.ndarray


def _to_rgba_array(im: Image.Image) -> Array:
    if im.mode != "RGBA":
        im = im.convert("RGBA")
    return np.array(im, dtype=np.uint8)


def decode_image(data: bytes) -> Array:
    """Decode encoded image bytes into an RGBA array.

    Parameters
    ----------
    data : bytes
        Any container Pillow can read (PNG, JPEG, GIF, BMP, WebP, ...).

    Returns
    -------
    np.ndarray
        Array of shape (H, W, 4), dtype=uint8.

    Raises
    ------
    DecodeError
        If the bytes are empty, truncated or not a supported image.
    """
    if not data:
        raise DecodeError("empty image data")
    try:
        with Image.open(io.BytesIO(data)) as im:
            im.load()
            return _to_rgba_array(im)
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(str(e) or type(e).__name__) from e


def encode_png(arr: Array) -> bytes:
    """Encode an RGBA array as lossless PNG bytes.

    Raises
    ------
    EncodeError
        If the array is not a valid RGBA image or Pillow fails to write it.
    """
    try:
        check_rgba(arr)
    except (TypeError, ValueError) as e:
        raise EncodeError(str(e)) from e

    buf = io.BytesIO()
    try:
        Image.fromarray(np.ascontiguousarray(arr)).save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise EncodeError(str(e) or type(e).__name__) from e
    return buf.getvalue()


def load_image(path: Union[str, Path]) -> Array:
    """Load an image file into an RGBA NumPy array (uint8)."""
    p = Path(path)
    with Image.open(p) as im:
        return _to_rgba_array(im)


def save_image(arr: Array, path: Union[str, Path]) -> None:
    """Save an RGBA NumPy array (uint8) to an image file via Pillow.

    The format is inferred from the extension.
    """
    check_rgba(arr)
    p = Path(path)
    Image.fromarray(np.ascontiguousarray(arr)).save(p)
