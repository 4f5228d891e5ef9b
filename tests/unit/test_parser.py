from __future__ import annotations

import json

import pytest

from src.errors import ProtocolError
from src.handlers.websocket.parser import parse_client_message


def test_parse_audio_message() -> None:
    raw = json.dumps({"type": "audio", "audio": "AAEC", "mimeType": "audio/ogg"})
    msg = parse_client_message(raw)
    assert msg.msg_type == "audio"
    assert msg.audio == "AAEC"
    assert msg.mime_type == "audio/ogg"


def test_parse_audio_defaults_mime_type() -> None:
    msg = parse_client_message(json.dumps({"type": "audio", "audio": "AAEC"}))
    assert msg.mime_type == "audio/webm"


def test_parse_control_message_ignores_extra_fields() -> None:
    msg = parse_client_message(json.dumps({"type": " start_session ", "audio": 5}))
    assert msg.msg_type == "start_session"
    assert msg.audio == ""


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        json.dumps([]),
        json.dumps({"audio": "AAEC"}),
        json.dumps({"type": ""}),
        json.dumps({"type": 3}),
        json.dumps({"type": "audio", "audio": 123}),
        json.dumps({"type": "audio", "audio": "AAEC", "mimeType": ["audio/webm"]}),
    ],
)
def test_parse_client_message_invalid(raw: str) -> None:
    with pytest.raises(ProtocolError):
        parse_client_message(raw)


def test_protocol_error_is_value_error() -> None:
    with pytest.raises(ValueError):
        parse_client_message("{")
