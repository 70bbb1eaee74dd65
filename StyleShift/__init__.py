from __future__ import annotations

# Alias package: re-export public API from the existing implementation.
from pixstyle.styles import STYLES, apply_style, available_styles  # noqa: F401
from pixstyle.transfer import StyleResult, process_image_style  # noqa: F401
from pixstyle.errors import DecodeError, EncodeError, UnsupportedStyleError  # noqa: F401
from pixstyle.utils.loader import decode_image, encode_png, load_image, save_image  # noqa: F401
from pixstyle.utils.xorshift import DEFAULT_SEED, XorShiftStream  # noqa: F401

__all__ = [
    "STYLES",
    "apply_style",
    "available_styles",
    "StyleResult",
    "process_image_style",
    "DecodeError",
    "EncodeError",
    "UnsupportedStyleError",
    "decode_image",
    "encode_png",
    "load_image",
    "save_image",
    "DEFAULT_SEED",
    "XorShiftStream",
]
