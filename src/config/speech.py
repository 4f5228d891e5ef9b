"""Speech synthesis configuration (env names and defaults only)."""

from __future__ import annotations

from pathlib import Path

ENV_TTS_LANGUAGE = "TTS_LANGUAGE"
ENV_TTS_TEMP_DIR = "TTS_TEMP_DIR"
ENV_SPEECH_TEXT_FALLBACK = "SPEECH_TEXT_FALLBACK"

DEFAULT_TTS_LANGUAGE = "en"
DEFAULT_TTS_TEMP_DIR: Path = Path("temp")
DEFAULT_SPEECH_TEXT_FALLBACK: bool = False

TTS_ARTIFACT_PREFIX = "speech_"
TTS_ARTIFACT_SUFFIX = ".mp3"
TTS_OUTPUT_MIME_TYPE = "audio/mp3"

__all__ = [
    "DEFAULT_SPEECH_TEXT_FALLBACK",
    "DEFAULT_TTS_LANGUAGE",
    "DEFAULT_TTS_TEMP_DIR",
    "ENV_SPEECH_TEXT_FALLBACK",
    "ENV_TTS_LANGUAGE",
    "ENV_TTS_TEMP_DIR",
    "TTS_ARTIFACT_PREFIX",
    "TTS_ARTIFACT_SUFFIX",
    "TTS_OUTPUT_MIME_TYPE",
]
