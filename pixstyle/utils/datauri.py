"""Text-safe transport envelope for encoded images (RFC 2397 data URIs)."""
from __future__ import annotations

import base64
import binascii


def to_data_uri(payload: bytes, mime: str = "image/png") -> str:
    return f"data:{mime};base64,{base64.b64encode(payload).decode('ascii')}"


def from_data_uri(uri: str) -> tuple[str, bytes]:
    """Split a base64 data URI into ``(mime, payload)``."""
    if not uri.startswith("data:"):
        raise ValueError("not a data URI")
    header, sep, body = uri[5:].partition(",")
    if not sep or not header.endswith(";base64"):
        raise ValueError("only base64 data URIs are supported")
    mime = header[: -len(";base64")] or "text/plain"
    try:
        return mime, base64.b64decode(body, validate=True)
    except binascii.Error as e:
        raise ValueError(f"invalid base64 payload: {e}") from e
