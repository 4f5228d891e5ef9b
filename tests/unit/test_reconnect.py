from __future__ import annotations

import asyncio

import pytest
from websockets.frames import Close
from websockets.exceptions import ConnectionClosedError

from src.client import RelayClient, ReconnectPolicy, ReconnectTracker


class _NullSink:
    async def play(self, audio: bytes, mime_type: str, *, volume: int) -> None:
        return None

    async def speak(self, text: str, *, volume: int) -> None:
        return None

    async def set_volume(self, volume: int) -> None:
        return None

    async def stop(self) -> None:
        return None


class _ClosingWebSocket:
    """Delivers ``session_started`` and then ends the stream."""

    def __init__(self) -> None:
        self.sent: list[str] = []

    async def send(self, data: str) -> None:
        self.sent.append(data)

    async def close(self) -> None:
        return None

    def __aiter__(self):
        return self._frames()

    async def _frames(self):
        yield '{"type": "session_started"}'


def test_tracker_linear_schedule_and_ceiling() -> None:
    tracker = ReconnectTracker(ReconnectPolicy(max_attempts=5, base_delay_s=2.0))
    delays = [tracker.record_close() for _ in range(6)]
    assert delays == [2.0, 4.0, 6.0, 8.0, 10.0, None]
    assert tracker.exhausted


def test_tracker_resets_on_open() -> None:
    tracker = ReconnectTracker()
    tracker.record_close()
    tracker.record_close()
    tracker.record_open()
    assert tracker.attempts == 0
    assert tracker.record_close() == 2.0


@pytest.mark.asyncio
async def test_client_gives_up_after_five_failed_reconnects() -> None:
    connects: list[str] = []
    sleeps: list[float] = []

    async def connect(url: str):
        connects.append(url)
        raise OSError("connection refused")

    async def sleep(delay: float) -> None:
        sleeps.append(delay)

    client = RelayClient("ws://relay.test/", _NullSink(), connect=connect, sleep=sleep)
    await asyncio.wait_for(client.run(), timeout=1.0)

    assert len(connects) == 6
    assert sleeps == [2.0, 4.0, 6.0, 8.0, 10.0]
    assert client.ui.status == "Connection failed. Please refresh the page."
    assert client.ui.start_enabled is False


@pytest.mark.asyncio
async def test_successful_open_starts_session_then_reconnects_after_close() -> None:
    sockets: list[_ClosingWebSocket] = []
    sleeps: list[float] = []
    statuses: list[str] = []

    async def connect(url: str):
        if sockets:
            raise OSError("server went away")
        ws = _ClosingWebSocket()
        sockets.append(ws)
        return ws

    async def sleep(delay: float) -> None:
        statuses.append(client.ui.status)
        sleeps.append(delay)

    client = RelayClient("ws://relay.test/", _NullSink(), connect=connect, sleep=sleep)
    await asyncio.wait_for(client.run(), timeout=1.0)

    assert sockets[0].sent == ['{"type":"start_session"}']
    assert sleeps == [2.0, 4.0, 6.0, 8.0, 10.0]
    assert statuses[0] == "Reconnecting... (1/5)"
    assert statuses[-1] == "Reconnecting... (5/5)"


class _DroppedDuringSetupWebSocket:
    """Handshake succeeded but the server closed before ``start_session`` went out."""

    def __init__(self) -> None:
        self.closed = False

    async def send(self, data: str) -> None:
        raise ConnectionClosedError(Close(4002, "full"), None)

    async def close(self) -> None:
        self.closed = True

    def __aiter__(self):
        return self._frames()

    async def _frames(self):
        return
        yield


@pytest.mark.asyncio
async def test_close_during_session_setup_keeps_reconnecting() -> None:
    sockets: list[_DroppedDuringSetupWebSocket] = []
    sleeps: list[float] = []

    async def connect(url: str):
        if sockets:
            raise OSError("connection refused")
        ws = _DroppedDuringSetupWebSocket()
        sockets.append(ws)
        return ws

    async def sleep(delay: float) -> None:
        sleeps.append(delay)

    client = RelayClient("ws://relay.test/", _NullSink(), connect=connect, sleep=sleep)
    await asyncio.wait_for(client.run(), timeout=1.0)

    assert sleeps == [2.0, 4.0, 6.0, 8.0, 10.0]
    assert sockets[0].closed is True
    assert client.ui.status == "Connection failed. Please refresh the page."
