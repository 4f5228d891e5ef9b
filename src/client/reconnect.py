"""Bounded linear-backoff reconnect bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass

from src.config.client import RECONNECT_BASE_DELAY_S, RECONNECT_MAX_ATTEMPTS


@dataclass(frozen=True, slots=True)
class ReconnectPolicy:
    max_attempts: int = RECONNECT_MAX_ATTEMPTS
    base_delay_s: float = RECONNECT_BASE_DELAY_S

    def delay_for(self, attempt: int) -> float:
        return self.base_delay_s * attempt


class ReconnectTracker:
    """Counts consecutive closes without a successful open.

    ``record_close`` returns the delay before the next attempt, or None once
    the ceiling is reached. ``record_open`` resets the count.
    """

    def __init__(self, policy: ReconnectPolicy | None = None) -> None:
        self.policy = policy or ReconnectPolicy()
        self.attempts = 0

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.policy.max_attempts

    def record_open(self) -> None:
        self.attempts = 0

    def record_close(self) -> float | None:
        if self.exhausted:
            return None
        self.attempts += 1
        return self.policy.delay_for(self.attempts)


__all__ = ["ReconnectPolicy", "ReconnectTracker"]
