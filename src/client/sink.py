"""Playback interface used by the relay client."""

from __future__ import annotations

from typing import Protocol


class AudioSink(Protocol):
    async def play(self, audio: bytes, mime_type: str, *, volume: int) -> None:
        """Play remote-synthesized audio; returns when playback ends."""

    async def speak(self, text: str, *, volume: int) -> None:
        """Fallback: synthesize ``text`` locally when no audio was returned."""

    async def set_volume(self, volume: int) -> None:
        """Apply a new 0-100 volume to playback in progress."""

    async def stop(self) -> None:
        """Stop any playback or local speech in progress."""


__all__ = ["AudioSink"]
