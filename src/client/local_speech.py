"""On-device speech fallback powered by ``pyttsx3``."""

from __future__ import annotations

import threading

import pyttsx3


class Pyttsx3Speaker:
    """Speak text through a local pyttsx3 engine; volume is 0-100."""

    def __init__(self, *, voice_id: str | None = None, rate: int | None = None) -> None:
        self._engine = pyttsx3.init()
        self._lock = threading.Lock()
        if voice_id:
            self._engine.setProperty("voice", voice_id)
        if rate is not None:
            self._engine.setProperty("rate", rate)

    def __call__(self, text: str, volume: int) -> None:
        text = text.strip()
        if not text:
            return
        with self._lock:
            self._engine.setProperty("volume", max(0.0, min(1.0, volume / 100)))
            self._engine.say(text)
            self._engine.runAndWait()


__all__ = ["Pyttsx3Speaker"]
