"""Validated client frame."""

from __future__ import annotations

from dataclasses import dataclass

from src.config.websocket import DEFAULT_AUDIO_MIME_TYPE


@dataclass(frozen=True, slots=True)
class ClientMessage:
    msg_type: str
    audio: str = ""
    mime_type: str = DEFAULT_AUDIO_MIME_TYPE


__all__ = ["ClientMessage"]
