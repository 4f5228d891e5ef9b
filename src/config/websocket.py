"""WebSocket protocol configuration and constants."""

from __future__ import annotations

import os

WS_ENDPOINT_PATH: str = (os.getenv("WS_ENDPOINT_PATH") or "").strip() or "/"

# Frame keys
WS_KEY_TYPE = "type"
WS_KEY_AUDIO = "audio"
WS_KEY_MIME_TYPE = "mimeType"
WS_KEY_TEXT = "text"
WS_KEY_MESSAGE = "message"

# Message types
MSG_START_SESSION = "start_session"
MSG_SESSION_STARTED = "session_started"
MSG_AUDIO = "audio"
MSG_AUDIO_RESPONSE = "audio_response"
MSG_INTERRUPT = "interrupt"
MSG_ERROR = "error"

DEFAULT_AUDIO_MIME_TYPE = "audio/webm"

# Close codes
WS_CLOSE_IDLE_CODE = 4000
WS_CLOSE_BUSY_CODE = 4002
WS_CLOSE_MAX_DURATION_CODE = 4003

WS_CLOSE_IDLE_REASON = "idle timeout"
WS_CLOSE_MAX_DURATION_REASON = "max connection duration reached"

# Lifecycle watchdog (0 disables a limit)
ENV_WS_IDLE_TIMEOUT_S = "WS_IDLE_TIMEOUT_S"
ENV_WS_WATCHDOG_TICK_S = "WS_WATCHDOG_TICK_S"
ENV_WS_MAX_CONNECTION_DURATION_S = "WS_MAX_CONNECTION_DURATION_S"

DEFAULT_WS_IDLE_TIMEOUT_S: float = 0.0
DEFAULT_WS_WATCHDOG_TICK_S: float = 5.0
DEFAULT_WS_MAX_CONNECTION_DURATION_S: float = 0.0

# Client-visible error text. Internal detail never crosses the socket.
WS_ERROR_PROCESSING_MESSAGE = "Error processing your request. Please try again."
WS_ERROR_GENERIC_MESSAGE = "An error occurred. Please refresh and try again."
WS_ERROR_AT_CAPACITY_MESSAGE = "Server cannot accept new connections. Please try again later."

__all__ = [
    "DEFAULT_AUDIO_MIME_TYPE",
    "DEFAULT_WS_IDLE_TIMEOUT_S",
    "DEFAULT_WS_MAX_CONNECTION_DURATION_S",
    "DEFAULT_WS_WATCHDOG_TICK_S",
    "ENV_WS_IDLE_TIMEOUT_S",
    "ENV_WS_MAX_CONNECTION_DURATION_S",
    "ENV_WS_WATCHDOG_TICK_S",
    "MSG_AUDIO",
    "MSG_AUDIO_RESPONSE",
    "MSG_ERROR",
    "MSG_INTERRUPT",
    "MSG_SESSION_STARTED",
    "MSG_START_SESSION",
    "WS_CLOSE_BUSY_CODE",
    "WS_CLOSE_IDLE_CODE",
    "WS_CLOSE_IDLE_REASON",
    "WS_CLOSE_MAX_DURATION_CODE",
    "WS_CLOSE_MAX_DURATION_REASON",
    "WS_ENDPOINT_PATH",
    "WS_ERROR_AT_CAPACITY_MESSAGE",
    "WS_ERROR_GENERIC_MESSAGE",
    "WS_ERROR_PROCESSING_MESSAGE",
    "WS_KEY_AUDIO",
    "WS_KEY_MESSAGE",
    "WS_KEY_MIME_TYPE",
    "WS_KEY_TEXT",
    "WS_KEY_TYPE",
]
