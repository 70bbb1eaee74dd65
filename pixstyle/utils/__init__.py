"""Utility functions for pixstyle.

Modules:
- loader: Pillow <-> NumPy decode/encode and file IO.
- raster: luminance, gradients, Sobel, bilinear sampling, quantization.
- xorshift: deterministic byte stream for dithering.
- datauri: data URI transport envelope.
"""
from .loader import decode_image, encode_png, load_image, save_image
from .raster import (
    REC601,
    REC709,
    bilinear_sample,
    central_gradient,
    gradient_magnitude,
    luminance,
    quantize_unit,
    sobel_magnitude,
    to_unit,
)
from .xorshift import DEFAULT_SEED, XorShiftStream
from .datauri import from_data_uri, to_data_uri

__all__ = [
    "decode_image",
    "encode_png",
    "load_image",
    "save_image",
    "REC601",
    "REC709",
    "bilinear_sample",
    "central_gradient",
    "gradient_magnitude",
    "luminance",
    "quantize_unit",
    "sobel_magnitude",
    "to_unit",
    "DEFAULT_SEED",
    "XorShiftStream",
    "from_data_uri",
    "to_data_uri",
]
