"""Error types raised by the pixstyle pipeline.

All of them derive from ``ValueError`` so callers that only care about bad
input can catch a single builtin. ``process_image_style`` turns every one of
these into a failed ``StyleResult`` instead of letting it escape.
"""
from __future__ import annotations


class StyleError(ValueError):
    """Base class for recoverable, input-determined failures."""


class DecodeError(StyleError):
    """Input bytes could not be decoded into an image."""


class EncodeError(StyleError):
    """A processed image could not be serialized."""


class UnsupportedStyleError(StyleError):
    def __init__(self, style: str, available: list[str] | tuple[str, ...] = ()) -> None:
        self.style = style
        msg = f"Unknown style: {style}"
        if available:
            msg += f". Available: {', '.join(available)}"
        super().__init__(msg)
