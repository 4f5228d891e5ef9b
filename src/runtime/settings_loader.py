"""Environment parsing for runtime settings."""

from __future__ import annotations

import os
from pathlib import Path

from src.config.secrets import get_gemini_api_key
from src.config.server import ENV_HOST, ENV_PORT, DEFAULT_HOST, DEFAULT_PORT
from src.state.settings import (
    AppSettings,
    LimitsSettings,
    SpeechSettings,
    ServerSettings,
    UpstreamSettings,
    WebSocketSettings,
)
from src.config.limits import ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS
from src.config.speech import (
    ENV_TTS_LANGUAGE,
    ENV_TTS_TEMP_DIR,
    DEFAULT_TTS_LANGUAGE,
    DEFAULT_TTS_TEMP_DIR,
    ENV_SPEECH_TEXT_FALLBACK,
    DEFAULT_SPEECH_TEXT_FALLBACK,
)
from src.config.models import (
    ENV_GEMINI_API_URL,
    ENV_GEMINI_MODEL_ID,
    ENV_GEMINI_TIMEOUT_S,
    DEFAULT_GEMINI_API_URL,
    DEFAULT_GEMINI_MODEL_ID,
    DEFAULT_GEMINI_TIMEOUT_S,
    ENV_GEMINI_SYSTEM_INSTRUCTIONS,
    DEFAULT_GEMINI_SYSTEM_INSTRUCTIONS,
)
from src.config.websocket import (
    ENV_WS_IDLE_TIMEOUT_S,
    ENV_WS_WATCHDOG_TICK_S,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    DEFAULT_WS_WATCHDOG_TICK_S,
    ENV_WS_MAX_CONNECTION_DURATION_S,
    DEFAULT_WS_MAX_CONNECTION_DURATION_S,
)

_DISABLED_VALUES = {"0", "none", "null", "disabled", "disable", "off"}


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    if raw.strip().lower() in _DISABLED_VALUES:
        return 0.0
    try:
        return float(raw)
    except Exception:
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _load_upstream_settings() -> UpstreamSettings:
    return UpstreamSettings(
        api_key=get_gemini_api_key(),
        api_url=_str_env(ENV_GEMINI_API_URL, DEFAULT_GEMINI_API_URL),
        model_id=_str_env(ENV_GEMINI_MODEL_ID, DEFAULT_GEMINI_MODEL_ID),
        system_instructions=_str_env(ENV_GEMINI_SYSTEM_INSTRUCTIONS, DEFAULT_GEMINI_SYSTEM_INSTRUCTIONS),
        timeout_s=max(0.0, _float_env(ENV_GEMINI_TIMEOUT_S, DEFAULT_GEMINI_TIMEOUT_S)),
    )


def _load_speech_settings() -> SpeechSettings:
    temp_dir_raw = os.getenv(ENV_TTS_TEMP_DIR)
    temp_dir = Path(temp_dir_raw).expanduser() if temp_dir_raw and temp_dir_raw.strip() else DEFAULT_TTS_TEMP_DIR
    return SpeechSettings(
        language=_str_env(ENV_TTS_LANGUAGE, DEFAULT_TTS_LANGUAGE),
        temp_dir=temp_dir,
        text_fallback=_bool_env(ENV_SPEECH_TEXT_FALLBACK, DEFAULT_SPEECH_TEXT_FALLBACK),
    )


def _load_limits_settings() -> LimitsSettings:
    max_connections = _int_env(ENV_MAX_CONCURRENT_CONNECTIONS, DEFAULT_MAX_CONCURRENT_CONNECTIONS)
    return LimitsSettings(max_concurrent_connections=max(1, max_connections))


def _load_websocket_settings() -> WebSocketSettings:
    watchdog_tick = _float_env(ENV_WS_WATCHDOG_TICK_S, DEFAULT_WS_WATCHDOG_TICK_S)
    if watchdog_tick <= 0:
        watchdog_tick = DEFAULT_WS_WATCHDOG_TICK_S
    return WebSocketSettings(
        idle_timeout_s=max(0.0, _float_env(ENV_WS_IDLE_TIMEOUT_S, DEFAULT_WS_IDLE_TIMEOUT_S)),
        watchdog_tick_s=watchdog_tick,
        max_connection_duration_s=max(
            0.0, _float_env(ENV_WS_MAX_CONNECTION_DURATION_S, DEFAULT_WS_MAX_CONNECTION_DURATION_S)
        ),
    )


def _load_server_settings() -> ServerSettings:
    port = _int_env(ENV_PORT, DEFAULT_PORT)
    if port <= 0 or port > 65535:
        raise ValueError(f"{ENV_PORT} must be between 1 and 65535")
    return ServerSettings(host=_str_env(ENV_HOST, DEFAULT_HOST), port=port)


def load_settings() -> AppSettings:
    return AppSettings(
        upstream=_load_upstream_settings(),
        speech=_load_speech_settings(),
        limits=_load_limits_settings(),
        websocket=_load_websocket_settings(),
        server=_load_server_settings(),
    )


__all__ = ["load_settings"]
