"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    api_key: str
    api_url: str
    model_id: str
    system_instructions: str
    timeout_s: float


@dataclass(frozen=True, slots=True)
class SpeechSettings:
    language: str
    temp_dir: Path
    text_fallback: bool


@dataclass(frozen=True, slots=True)
class LimitsSettings:
    max_concurrent_connections: int


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    idle_timeout_s: float
    watchdog_tick_s: float
    max_connection_duration_s: float


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    upstream: UpstreamSettings
    speech: SpeechSettings
    limits: LimitsSettings
    websocket: WebSocketSettings
    server: ServerSettings


__all__ = [
    "AppSettings",
    "LimitsSettings",
    "ServerSettings",
    "SpeechSettings",
    "UpstreamSettings",
    "WebSocketSettings",
]
