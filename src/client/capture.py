"""Audio capture interface and captured-utterance container."""

from __future__ import annotations

from typing import Protocol
from dataclasses import dataclass

from src.config.websocket import DEFAULT_AUDIO_MIME_TYPE


@dataclass(frozen=True, slots=True)
class CapturedAudio:
    audio: bytes
    mime_type: str = DEFAULT_AUDIO_MIME_TYPE


def normalize_mime_type(mime_type: str | None) -> str:
    """Drop codec parameters: ``audio/webm;codecs=opus`` -> ``audio/webm``."""
    base = (mime_type or "").split(";", 1)[0].strip()
    return base or DEFAULT_AUDIO_MIME_TYPE


class CaptureSource(Protocol):
    async def start(self) -> None: ...

    async def stop(self) -> CapturedAudio: ...


__all__ = ["CaptureSource", "CapturedAudio", "normalize_mime_type"]
