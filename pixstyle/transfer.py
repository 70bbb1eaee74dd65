"""Bytes-in, bytes-out style transfer.

``process_image_style`` is the single operation exposed to callers: it
decodes the input, runs the requested filter and re-encodes the result as
PNG. Every expected failure (bad bytes, unknown style, encoder error) comes
back as a failed ``StyleResult`` rather than an exception.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .errors import DecodeError, EncodeError, UnsupportedStyleError
from .styles import apply_style
from .utils.datauri import to_data_uri
from .utils.loader import decode_image, encode_png
from .utils.xorshift import DEFAULT_SEED, XorShiftStream

log = logging.getLogger(__name__)


@dataclass
class StyleResult:
    success: bool
    message: str
    payload: Optional[bytes] = None

    def to_dict(self) -> dict[str, Any]:
        """Text-only envelope; the PNG payload becomes a data URI."""
        return {
            "success": self.success,
            "message": self.message,
            "processed_image_data": to_data_uri(self.payload) if self.payload is not None else None,
        }


def process_image_style(image_data: bytes, style: str, seed: int = DEFAULT_SEED) -> StyleResult:
    """Apply ``style`` to encoded image bytes.

    Parameters
    ----------
    image_data : bytes
        Encoded source image in any format Pillow reads.
    style : str
        "vangogh", "picasso" or "cyberpunk".
    seed : int
        Seed for the dither stream. The same bytes, style and seed always
        give byte-identical output. A zero seed yields a failed result.

    Returns
    -------
    StyleResult
        On success ``payload`` holds PNG bytes; on failure it is None.
    """
    try:
        img = decode_image(image_data)
    except DecodeError as e:
        log.warning("Decode failed: %s", e)
        return StyleResult(False, f"Failed to load image: {e}")

    try:
        stream = XorShiftStream(seed)
    except ValueError as e:
        log.warning("Bad seed: %s", e)
        return StyleResult(False, f"Invalid seed: {e}")

    try:
        out = apply_style(img, style, stream)
    except UnsupportedStyleError as e:
        log.warning("%s", e)
        return StyleResult(False, str(e))

    try:
        png = encode_png(out)
    except EncodeError as e:
        log.warning("Encode failed: %s", e)
        return StyleResult(False, f"Failed to encode processed image: {e}")

    log.info("Applied %s: %d bytes in, %d bytes out", style, len(image_data), len(png))
    return StyleResult(True, f"Successfully applied {style} style", png)


__all__ = ["StyleResult", "process_image_style"]
