"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from src.state.settings import AppSettings
    from src.upstream.speech import SpeechSynthesizer
    from src.upstream.generation import UtteranceProcessor
    from src.handlers.connections import ConnectionRegistry


@dataclass(slots=True)
class RuntimeDeps:
    connections: ConnectionRegistry
    processor: UtteranceProcessor
    synthesizer: SpeechSynthesizer
    settings: AppSettings
    _http_client: Any = None

    async def shutdown(self) -> None:
        busy = await self.connections.cancel_all_pipelines()
        if busy:
            logger.info("runtime shutdown: cancelled %d in-flight utterance(s)", busy)
        if self._http_client is None:
            return
        try:
            await self._http_client.aclose()
        except Exception:
            logger.exception("runtime shutdown failed")


__all__ = ["RuntimeDeps"]
