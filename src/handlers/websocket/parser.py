"""Client frame parsing/validation for the relay protocol."""

from __future__ import annotations

import json
from typing import Any

from src.errors import ProtocolError
from src.protocol.inbound import ClientMessage
from src.config.websocket import (
    MSG_AUDIO,
    WS_KEY_TYPE,
    WS_KEY_AUDIO,
    WS_KEY_MIME_TYPE,
    DEFAULT_AUDIO_MIME_TYPE,
)


def _optional_str(msg: dict[str, Any], key: str) -> str:
    value = msg.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ProtocolError(f"message '{key}' must be a string")
    return value.strip()


def parse_client_message(raw: str) -> ClientMessage:
    try:
        msg = json.loads(raw)
    except Exception as exc:
        raise ProtocolError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise ProtocolError("message must be a JSON object")

    msg_type = msg.get(WS_KEY_TYPE)
    if not isinstance(msg_type, str) or not msg_type.strip():
        raise ProtocolError("message missing non-empty 'type'")
    msg_type = msg_type.strip()

    if msg_type != MSG_AUDIO:
        return ClientMessage(msg_type=msg_type)

    return ClientMessage(
        msg_type=msg_type,
        audio=_optional_str(msg, WS_KEY_AUDIO),
        mime_type=_optional_str(msg, WS_KEY_MIME_TYPE) or DEFAULT_AUDIO_MIME_TYPE,
    )


__all__ = ["parse_client_message"]
