"""Peer client for the relay: connection continuity, responses, playback, interrupt."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable

import orjson
import websockets
from websockets.exceptions import ConnectionClosed, WebSocketException

from src.errors import ProtocolError, TransportError
from src.config.client import DEFAULT_VOLUME
from src.config.speech import TTS_OUTPUT_MIME_TYPE
from src.protocol.codec import decode_audio
from src.protocol.messages import dumps_frame, audio_frame, interrupt_frame, start_session_frame
from src.config.websocket import (
    MSG_ERROR,
    WS_KEY_TEXT,
    WS_KEY_TYPE,
    WS_KEY_AUDIO,
    WS_KEY_MESSAGE,
    MSG_AUDIO_RESPONSE,
    MSG_SESSION_STARTED,
)

from .ui import ClientUiState
from .sink import AudioSink
from .reconnect import ReconnectPolicy, ReconnectTracker

logger = logging.getLogger(__name__)

ConnectFn = Callable[[str], Awaitable[Any]]
SleepFn = Callable[[float], Awaitable[None]]

_CONNECT_ERRORS = (OSError, TimeoutError, WebSocketException)


async def _default_connect(url: str) -> Any:
    # Utterances travel as whole base64 blobs; lift the default 1 MiB frame cap.
    return await websockets.connect(url, max_size=None)


class RelayClient:
    def __init__(
        self,
        url: str,
        sink: AudioSink,
        *,
        policy: ReconnectPolicy | None = None,
        connect: ConnectFn | None = None,
        sleep: SleepFn = asyncio.sleep,
        volume: int = DEFAULT_VOLUME,
    ) -> None:
        self.url = url
        self.ui = ClientUiState()
        self.reconnect = ReconnectTracker(policy)
        self.session_started = asyncio.Event()
        self._sink = sink
        self._connect = connect or _default_connect
        self._sleep = sleep
        self._volume = volume
        self._ws: Any = None
        self._awaiting_response = False
        self._playback_task: asyncio.Task | None = None

    @property
    def volume(self) -> int:
        return self._volume

    async def set_volume(self, volume: int) -> None:
        """Clamp to 0-100; a reply that is already playing picks it up too."""
        self._volume = max(0, min(100, int(volume)))
        if self.ui.playing:
            await self._sink.set_volume(self._volume)

    async def run(self) -> None:
        """Connect and keep reconnecting until the attempt ceiling is hit."""
        while True:
            try:
                ws = await self._connect(self.url)
            except _CONNECT_ERRORS as exc:
                logger.warning("connect to %s failed: %s", self.url, exc)
            else:
                await self._run_connection(ws)

            self._on_close()
            delay = self.reconnect.record_close()
            if delay is None:
                self.ui.on_connection_failed()
                logger.error("giving up after %d reconnect attempts", self.reconnect.attempts)
                return
            self.ui.on_reconnecting(self.reconnect.attempts, self.reconnect.policy.max_attempts)
            logger.info(
                "reconnecting in %.1fs (%d/%d)",
                delay,
                self.reconnect.attempts,
                self.reconnect.policy.max_attempts,
            )
            await self._sleep(delay)

    async def close(self) -> None:
        self._stop_playback()
        ws = self._ws
        self._ws = None
        if ws is not None:
            with contextlib.suppress(Exception):
                await ws.close()

    async def send_audio(self, audio: bytes, mime_type: str) -> None:
        await self._send(audio_frame(audio, mime_type))
        self._awaiting_response = True

    async def interrupt(self) -> bool:
        """Stop local playback and tell the server to release its session."""
        if not (self.ui.playing or self._awaiting_response):
            return False
        self._stop_playback()
        with contextlib.suppress(Exception):
            await self._sink.stop()
        self._awaiting_response = False
        self.ui.on_interrupted()
        await self._send(interrupt_frame())
        return True

    async def wait_for_playback(self) -> None:
        task = self._playback_task
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _send(self, frame: dict[str, Any]) -> None:
        ws = self._ws
        if ws is None:
            raise TransportError("not connected")
        try:
            await ws.send(dumps_frame(frame))
        except ConnectionClosed as exc:
            raise TransportError(f"connection closed: {exc}") from exc

    async def _run_connection(self, ws: Any) -> None:
        # A socket that drops while the session is being set up is just another close.
        try:
            await self._on_open(ws)
            await self._recv_until_closed(ws)
        except TransportError as exc:
            logger.warning("connection lost: %s", exc)
        finally:
            self._ws = None
            with contextlib.suppress(Exception):
                await ws.close()

    async def _on_open(self, ws: Any) -> None:
        self._ws = ws
        self.reconnect.record_open()
        self.ui.on_connected()
        logger.info("connected to %s", self.url)
        await self._send(start_session_frame())

    def _on_close(self) -> None:
        self._ws = None
        self._awaiting_response = False
        self.session_started.clear()
        self.ui.on_disconnected()

    async def _recv_until_closed(self, ws: Any) -> None:
        try:
            async for raw in ws:
                await self.handle_frame(raw)
        except ConnectionClosed as exc:
            logger.info("connection closed: %s", exc)

    async def handle_frame(self, raw: str | bytes) -> None:
        try:
            msg = orjson.loads(raw)
        except orjson.JSONDecodeError:
            logger.warning("ignoring unparseable frame from server")
            return
        if not isinstance(msg, dict):
            return

        msg_type = msg.get(WS_KEY_TYPE)
        if msg_type == MSG_SESSION_STARTED:
            logger.info("session started")
            self.session_started.set()
        elif msg_type == MSG_AUDIO_RESPONSE:
            self._on_audio_response(msg)
        elif msg_type == MSG_ERROR:
            message = msg.get(WS_KEY_MESSAGE)
            self._awaiting_response = False
            self.ui.on_error(message if isinstance(message, str) else "")
        else:
            logger.debug("ignoring frame type %r", msg_type)

    def _on_audio_response(self, msg: dict[str, Any]) -> None:
        self._awaiting_response = False
        text = msg.get(WS_KEY_TEXT)
        text = text if isinstance(text, str) else ""
        self.ui.add_message("assistant", text)

        audio = b""
        raw_audio = msg.get(WS_KEY_AUDIO)
        if isinstance(raw_audio, str) and raw_audio:
            try:
                audio = decode_audio(raw_audio)
            except ProtocolError:
                logger.warning("response audio is not valid base64; using local speech")

        self._stop_playback()
        self.ui.begin_playback()
        self._playback_task = asyncio.create_task(self._play(audio, text))

    async def _play(self, audio: bytes, text: str) -> None:
        try:
            if audio:
                await self._sink.play(audio, TTS_OUTPUT_MIME_TYPE, volume=self._volume)
            else:
                await self._sink.speak(text, volume=self._volume)
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("playback failed")
        finally:
            if self._playback_task is asyncio.current_task():
                self._playback_task = None
                self.ui.end_playback()

    def _stop_playback(self) -> None:
        task = self._playback_task
        self._playback_task = None
        if task is not None and not task.done():
            task.cancel()


__all__ = ["RelayClient"]
