"""Capture control with a hard per-utterance ceiling."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from collections.abc import Callable, Awaitable

from src.errors import TransportError
from src.config.client import CAPTURE_MAX_SECONDS

from .ui import ClientUiState
from .capture import CaptureSource, normalize_mime_type

logger = logging.getLogger(__name__)

UtteranceFn = Callable[[bytes, str], Awaitable[None]]


class CaptureRecorder:
    def __init__(
        self,
        source: CaptureSource,
        ui: ClientUiState,
        on_utterance: UtteranceFn,
        *,
        max_seconds: float = CAPTURE_MAX_SECONDS,
    ) -> None:
        self._source = source
        self._ui = ui
        self._on_utterance = on_utterance
        self._max_seconds = float(max_seconds)
        self._ceiling_task: asyncio.Task | None = None

    async def start(self) -> bool:
        if self._ui.recording or self._ui.playing:
            return False
        await self._source.start()
        self._ui.begin_recording()
        self._ceiling_task = asyncio.create_task(self._stop_at_ceiling())
        return True

    async def stop(self) -> bool:
        if not self._ui.recording:
            return False
        self._ui.end_recording()
        self._cancel_ceiling()
        captured = await self._source.stop()
        await self._on_utterance(captured.audio, normalize_mime_type(captured.mime_type))
        return True

    async def toggle(self) -> bool:
        if self._ui.recording:
            return await self.stop()
        return await self.start()

    async def close(self) -> None:
        task = self._ceiling_task
        self._cancel_ceiling()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    def _cancel_ceiling(self) -> None:
        task = self._ceiling_task
        self._ceiling_task = None
        if task is not None and task is not asyncio.current_task() and not task.done():
            task.cancel()

    async def _stop_at_ceiling(self) -> None:
        await asyncio.sleep(self._max_seconds)
        if not self._ui.recording:
            return
        logger.info("capture ceiling of %.1fs reached; stopping", self._max_seconds)
        try:
            await self.stop()
        except TransportError as exc:
            # No caller is waiting on this task, so the failure goes to the UI.
            logger.warning("could not send capture: %s", exc)
            self._ui.on_error(str(exc))


__all__ = ["CaptureRecorder"]
