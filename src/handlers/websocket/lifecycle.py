"""Per-connection watchdog: idle timeout and maximum connection age.

Both limits are disabled when set to 0. The idle limit never fires while the
session is processing an utterance, since a slow upstream is not client idleness.
"""

from __future__ import annotations

import time
import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable

from src.config.websocket import (
    WS_CLOSE_IDLE_CODE,
    WS_CLOSE_IDLE_REASON,
    DEFAULT_WS_IDLE_TIMEOUT_S,
    WS_CLOSE_MAX_DURATION_CODE,
    DEFAULT_WS_WATCHDOG_TICK_S,
    WS_CLOSE_MAX_DURATION_REASON,
    DEFAULT_WS_MAX_CONNECTION_DURATION_S,
)

logger = logging.getLogger(__name__)


class ConnectionLifecycle:
    def __init__(
        self,
        websocket: Any,
        *,
        is_busy_fn: Callable[[], bool] | None = None,
        idle_timeout_s: float = DEFAULT_WS_IDLE_TIMEOUT_S,
        watchdog_tick_s: float = DEFAULT_WS_WATCHDOG_TICK_S,
        max_connection_duration_s: float = DEFAULT_WS_MAX_CONNECTION_DURATION_S,
        now_fn: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ws = websocket
        self._is_busy_fn = is_busy_fn or (lambda: False)
        self._idle_timeout_s = max(0.0, float(idle_timeout_s))
        self._watchdog_tick_s = max(0.01, float(watchdog_tick_s))
        self._max_connection_duration_s = max(0.0, float(max_connection_duration_s))
        self._now = now_fn
        self._connection_start = self._now()
        self._last_activity = self._connection_start
        self._stop_event = asyncio.Event()
        self._task: asyncio.Task | None = None

    @property
    def enabled(self) -> bool:
        return self._idle_timeout_s > 0 or self._max_connection_duration_s > 0

    @property
    def tick_s(self) -> float:
        return self._watchdog_tick_s

    def touch(self) -> None:
        self._last_activity = self._now()

    def should_close(self) -> bool:
        return self._stop_event.is_set()

    def start(self) -> asyncio.Task | None:
        if not self.enabled:
            return None
        if self._task is None:
            self._task = asyncio.create_task(self._watchdog_loop())
        return self._task

    async def stop(self) -> None:
        self._stop_event.set()
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(Exception, asyncio.CancelledError):
            await self._task
        self._task = None

    def _expired_reason(self) -> tuple[int, str] | None:
        now = self._now()
        if self._max_connection_duration_s > 0 and (now - self._connection_start) >= self._max_connection_duration_s:
            return WS_CLOSE_MAX_DURATION_CODE, WS_CLOSE_MAX_DURATION_REASON
        if self._is_busy_fn():
            return None
        if self._idle_timeout_s > 0 and (now - self._last_activity) >= self._idle_timeout_s:
            return WS_CLOSE_IDLE_CODE, WS_CLOSE_IDLE_REASON
        return None

    async def _watchdog_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                await asyncio.sleep(self._watchdog_tick_s)
                if self._stop_event.is_set():
                    break
                expired = self._expired_reason()
                if expired is None:
                    continue
                code, reason = expired
                logger.info("WebSocket %s; closing connection", reason)
                self._stop_event.set()
                with contextlib.suppress(Exception):
                    await self._ws.close(code=code, reason=reason)
                break
        except asyncio.CancelledError:
            return
        except Exception:
            logger.debug("watchdog exiting due to unexpected error", exc_info=True)


__all__ = ["ConnectionLifecycle"]
