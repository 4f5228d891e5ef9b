from .codec import decode_audio, encode_audio
from .inbound import ClientMessage
from .messages import (
    dumps_frame,
    error_frame,
    audio_frame,
    interrupt_frame,
    audio_response_frame,
    start_session_frame,
    session_started_frame,
)

__all__ = [
    "ClientMessage",
    "audio_frame",
    "audio_response_frame",
    "decode_audio",
    "dumps_frame",
    "encode_audio",
    "error_frame",
    "interrupt_frame",
    "session_started_frame",
    "start_session_frame",
]
