"""Base64 transport encoding for audio payloads."""

from __future__ import annotations

import base64
import binascii

from src.errors import ProtocolError


def encode_audio(audio: bytes) -> str:
    return base64.b64encode(audio).decode("ascii")


def decode_audio(encoded: str) -> bytes:
    """Decode a base64 audio field strictly; raises ProtocolError on bad input."""
    s = (encoded or "").strip()
    if not s:
        return b""
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ProtocolError(f"audio is not valid base64: {exc}") from exc


__all__ = ["decode_audio", "encode_audio"]
