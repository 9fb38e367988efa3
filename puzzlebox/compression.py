"""Text compression codec: the identity encoding."""

from __future__ import annotations


def _ensure_text(value: object, operation: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{operation} expects str, got {type(value).__name__}")
    return value


def encode(s: str) -> str:
    """Encode ``s``; the encoding is the text itself."""
    return _ensure_text(s, "encode")


def decode(s: str) -> str:
    """Decode text produced by :func:`encode`."""
    return _ensure_text(s, "decode")