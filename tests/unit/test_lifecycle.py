from __future__ import annotations

import asyncio

import pytest

from src.handlers.websocket.lifecycle import ConnectionLifecycle
from src.config.websocket import WS_CLOSE_IDLE_CODE, WS_CLOSE_MAX_DURATION_CODE


class _FakeWebSocket:
    def __init__(self) -> None:
        self.closed: list[tuple[int, str]] = []

    async def close(self, code: int = 1000, reason: str = "") -> None:
        self.closed.append((code, reason))


class _Clock:
    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


def test_disabled_when_both_limits_are_zero() -> None:
    lifecycle = ConnectionLifecycle(_FakeWebSocket(), idle_timeout_s=0, max_connection_duration_s=0)
    assert lifecycle.enabled is False


@pytest.mark.asyncio
async def test_start_is_noop_when_disabled() -> None:
    lifecycle = ConnectionLifecycle(_FakeWebSocket())
    assert lifecycle.start() is None
    await lifecycle.stop()


@pytest.mark.asyncio
async def test_max_duration_closes_connection() -> None:
    ws = _FakeWebSocket()
    clock = _Clock()
    lifecycle = ConnectionLifecycle(ws, watchdog_tick_s=0.01, max_connection_duration_s=60, now_fn=clock)
    task = lifecycle.start()
    clock.now = 61.0
    await asyncio.wait_for(task, timeout=1.0)
    assert ws.closed[0][0] == WS_CLOSE_MAX_DURATION_CODE
    assert lifecycle.should_close()


@pytest.mark.asyncio
async def test_idle_timeout_waits_while_busy() -> None:
    ws = _FakeWebSocket()
    clock = _Clock()
    busy = {"value": True}
    lifecycle = ConnectionLifecycle(
        ws,
        is_busy_fn=lambda: busy["value"],
        idle_timeout_s=10,
        watchdog_tick_s=0.01,
        now_fn=clock,
    )
    task = lifecycle.start()
    clock.now = 100.0
    await asyncio.sleep(0.05)
    assert ws.closed == []

    busy["value"] = False
    await asyncio.wait_for(task, timeout=1.0)
    assert ws.closed[0][0] == WS_CLOSE_IDLE_CODE


@pytest.mark.asyncio
async def test_touch_defers_idle_close() -> None:
    ws = _FakeWebSocket()
    clock = _Clock()
    lifecycle = ConnectionLifecycle(ws, idle_timeout_s=10, watchdog_tick_s=0.01, now_fn=clock)
    lifecycle.start()
    clock.now = 9.0
    lifecycle.touch()
    clock.now = 15.0
    await asyncio.sleep(0.05)
    assert ws.closed == []
    await lifecycle.stop()
