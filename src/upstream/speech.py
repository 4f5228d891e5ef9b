"""Speech synthesizer: text in, MP3 bytes out via gTTS and a scoped temp artifact."""

from __future__ import annotations

import os
import asyncio
import logging
import tempfile
import contextlib
from typing import Any
from pathlib import Path
from collections.abc import Callable, Iterator

from gtts import gTTS, gTTSError

from src.errors import SynthesisError
from src.state.settings import SpeechSettings
from src.config.speech import TTS_ARTIFACT_PREFIX, TTS_ARTIFACT_SUFFIX

logger = logging.getLogger(__name__)

TtsFactory = Callable[[str, str], Any]


def _default_tts_factory(text: str, lang: str) -> gTTS:
    return gTTS(text=text, lang=lang)


@contextlib.contextmanager
def temp_artifact(directory: Path) -> Iterator[Path]:
    """Reserve a unique artifact path and remove it on every exit path."""
    fd, raw_path = tempfile.mkstemp(prefix=TTS_ARTIFACT_PREFIX, suffix=TTS_ARTIFACT_SUFFIX, dir=directory)
    os.close(fd)
    path = Path(raw_path)
    try:
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError:
            logger.warning("could not remove speech artifact %s", path, exc_info=True)


class SpeechSynthesizer:
    def __init__(self, settings: SpeechSettings, *, tts_factory: TtsFactory | None = None) -> None:
        self._settings = settings
        self._tts_factory = tts_factory or _default_tts_factory

    @property
    def temp_dir(self) -> Path:
        return self._settings.temp_dir

    def ensure_temp_dir(self) -> None:
        self._settings.temp_dir.mkdir(parents=True, exist_ok=True)

    def _synthesize_blocking(self, text: str) -> bytes:
        self.ensure_temp_dir()
        with temp_artifact(self._settings.temp_dir) as path:
            logger.debug("generating speech file: %s", path)
            try:
                self._tts_factory(text, self._settings.language).save(str(path))
            except (gTTSError, AssertionError, ValueError, OSError) as exc:
                raise SynthesisError(f"speech generation failed: {exc}") from exc
            try:
                audio = path.read_bytes()
            except OSError as exc:
                raise SynthesisError(f"speech artifact could not be read: {exc}") from exc
        if not audio:
            raise SynthesisError("speech artifact is empty")
        return audio

    async def synthesize(self, text: str) -> bytes:
        if not text.strip():
            # Nothing to say; the client falls back to local speech.
            return b""
        return await asyncio.to_thread(self._synthesize_blocking, text)


__all__ = ["SpeechSynthesizer", "temp_artifact"]
