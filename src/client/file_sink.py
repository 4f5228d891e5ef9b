"""Sink that stores remote audio as files and hands text to an optional local speaker."""

from __future__ import annotations

import time
import asyncio
import logging
from pathlib import Path
from collections.abc import Callable

logger = logging.getLogger(__name__)

SpeakFn = Callable[[str, int], None]

_EXTENSIONS = {"audio/mp3": ".mp3", "audio/mpeg": ".mp3", "audio/wav": ".wav", "audio/webm": ".webm"}


class FileAudioSink:
    def __init__(self, out_dir: Path, *, speak_fn: SpeakFn | None = None) -> None:
        self._out_dir = out_dir
        self._speak_fn = speak_fn
        self.saved: list[Path] = []

    async def play(self, audio: bytes, mime_type: str, *, volume: int) -> None:
        self._out_dir.mkdir(parents=True, exist_ok=True)
        suffix = _EXTENSIONS.get(mime_type, ".bin")
        path = self._out_dir / f"response_{int(time.time() * 1000)}{suffix}"
        await asyncio.to_thread(path.write_bytes, audio)
        self.saved.append(path)
        logger.info("saved response audio to %s (volume=%d)", path, volume)

    async def speak(self, text: str, *, volume: int) -> None:
        if self._speak_fn is None or not text.strip():
            return
        await asyncio.to_thread(self._speak_fn, text, volume)

    async def set_volume(self, volume: int) -> None:
        # Saved files carry no volume; it only matters for the next local speech.
        logger.debug("volume set to %d", volume)

    async def stop(self) -> None:
        return None


__all__ = ["FileAudioSink"]
