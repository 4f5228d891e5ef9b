"""Session lifecycle phases."""

from __future__ import annotations

from enum import Enum


class SessionPhase(str, Enum):
    UNINITIALIZED = "uninitialized"
    IDLE = "idle"
    PROCESSING = "processing"


__all__ = ["SessionPhase"]
