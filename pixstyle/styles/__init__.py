"""Stylization filters and a unified entry-point for application.

Exported API
------------
- apply_style(image_array, style, stream=None)
- STYLES / available_styles()

Supported styles
----------------
- "vangogh"  : painterly strokes following the local isophote direction
- "picasso"  : block posterization to a fixed palette with dark outlines
- "cyberpunk": neon teal/magenta grade with bloom, edge glow and chroma offset

Implementation notes
--------------------
All filters operate on RGBA ``uint8`` NumPy arrays of shape (H, W, 4). They
never modify their input and always return a new array of the same shape.
Only "vangogh" draws from the dither stream.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..errors import UnsupportedStyleError
from ..utils.raster import check_rgba
from ..utils.xorshift import XorShiftStream
from .cyberpunk import stylize_cyberpunk
from .picasso import stylize_picasso
from .vangogh import stylize_vangogh

Array = np.ndarray

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class StyleInfo:
    id: str
    name: str
    description: str


STYLES: dict[str, StyleInfo] = {
    s.id: s
    for s in (
        StyleInfo("vangogh", "Van Gogh", "Impressionist style with vibrant yellows and blues"),
        StyleInfo("picasso", "Picasso", "Cubist style with geometric shapes and high contrast"),
        StyleInfo("cyberpunk", "Cyberpunk", "Futuristic style with neon colors and digital effects"),
    )
}


def available_styles() -> list[str]:
    return list(STYLES)


def apply_style(image_array: Array, style: str, stream: Optional[XorShiftStream] = None) -> Array:
    """Apply the selected style to an image array.

    Parameters
    ----------
    image_array : np.ndarray
        RGBA image array of shape (H, W, 4), dtype=uint8.
    style : str
        One of ``available_styles()``; case and surrounding whitespace are
        ignored.
    stream : XorShiftStream | None
        Dither byte stream. A fresh stream with the default seed is used
        when omitted.

    Returns
    -------
    np.ndarray
        Stylized RGBA image array, dtype=uint8, same shape as the input.

    Raises
    ------
    UnsupportedStyleError
        If ``style`` is not a known style id.
    """
    s = style.strip().lower() if isinstance(style, str) else ""
    if s not in STYLES:
        raise UnsupportedStyleError(str(style), available_styles())
    check_rgba(image_array)

    log.info("Applying %s to %dx%d image", s, image_array.shape[1], image_array.shape[0])
    if s == "vangogh":
        return stylize_vangogh(image_array, stream if stream is not None else XorShiftStream())
    if s == "picasso":
        return stylize_picasso(image_array)
    return stylize_cyberpunk(image_array)


__all__ = ["STYLES", "StyleInfo", "apply_style", "available_styles"]
