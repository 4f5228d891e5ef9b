"""Builders for the flat JSON frames exchanged over the relay socket."""

from __future__ import annotations

from typing import Any

import orjson

from src.config.websocket import (
    MSG_AUDIO,
    MSG_ERROR,
    WS_KEY_TEXT,
    WS_KEY_TYPE,
    WS_KEY_AUDIO,
    MSG_INTERRUPT,
    WS_KEY_MESSAGE,
    WS_KEY_MIME_TYPE,
    MSG_AUDIO_RESPONSE,
    MSG_START_SESSION,
    MSG_SESSION_STARTED,
)

from .codec import encode_audio


def build_frame(msg_type: str, **fields: Any) -> dict[str, Any]:
    frame: dict[str, Any] = {WS_KEY_TYPE: msg_type}
    frame.update(fields)
    return frame


def start_session_frame() -> dict[str, Any]:
    return build_frame(MSG_START_SESSION)


def session_started_frame() -> dict[str, Any]:
    return build_frame(MSG_SESSION_STARTED)


def audio_frame(audio: bytes, mime_type: str) -> dict[str, Any]:
    return build_frame(MSG_AUDIO, **{WS_KEY_AUDIO: encode_audio(audio), WS_KEY_MIME_TYPE: mime_type})


def audio_response_frame(text: str, audio: bytes | None) -> dict[str, Any]:
    return build_frame(MSG_AUDIO_RESPONSE, **{WS_KEY_TEXT: text, WS_KEY_AUDIO: encode_audio(audio or b"")})


def interrupt_frame() -> dict[str, Any]:
    return build_frame(MSG_INTERRUPT)


def error_frame(message: str) -> dict[str, Any]:
    return build_frame(MSG_ERROR, **{WS_KEY_MESSAGE: message})


def dumps_frame(frame: dict[str, Any]) -> str:
    return orjson.dumps(frame).decode("utf-8")


__all__ = [
    "audio_frame",
    "audio_response_frame",
    "build_frame",
    "dumps_frame",
    "error_frame",
    "interrupt_frame",
    "session_started_frame",
    "start_session_frame",
]
