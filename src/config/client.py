"""Peer client configuration (reconnect, capture and playback constants)."""

from __future__ import annotations

import os

# Reconnect: delay grows linearly (base * attempt) up to a fixed ceiling of attempts.
RECONNECT_MAX_ATTEMPTS: int = 5
RECONNECT_BASE_DELAY_S: float = 2.0

# Hard ceiling on a single capture.
CAPTURE_MAX_SECONDS: float = 5.0

DEFAULT_VOLUME: int = 100

ENV_RELAY_SERVER = "RELAY_SERVER"


def derive_default_server() -> str:
    return (os.getenv(ENV_RELAY_SERVER) or "localhost:3000").strip()


__all__ = [
    "CAPTURE_MAX_SECONDS",
    "DEFAULT_VOLUME",
    "ENV_RELAY_SERVER",
    "RECONNECT_BASE_DELAY_S",
    "RECONNECT_MAX_ATTEMPTS",
    "derive_default_server",
]
