"""Runtime dependency construction (upstream clients + admission control)."""

from __future__ import annotations

import logging

import httpx

from src.state import RuntimeDeps
from src.state.settings import AppSettings
from src.upstream.speech import SpeechSynthesizer
from src.upstream.generation import UtteranceProcessor
from src.handlers.connections import ConnectionRegistry

from .settings_loader import load_settings

logger = logging.getLogger(__name__)


def build_http_client(settings: AppSettings) -> httpx.AsyncClient:
    timeout_s = settings.upstream.timeout_s
    return httpx.AsyncClient(timeout=timeout_s if timeout_s > 0 else None)


async def build_runtime_deps(settings: AppSettings | None = None) -> RuntimeDeps:
    settings = settings or load_settings()
    if not settings.upstream.api_key:
        logger.warning("GEMINI_API_KEY is not set; generation requests will be rejected upstream")

    http_client = build_http_client(settings)
    synthesizer = SpeechSynthesizer(settings.speech)
    synthesizer.ensure_temp_dir()

    return RuntimeDeps(
        connections=ConnectionRegistry(max_connections=settings.limits.max_concurrent_connections),
        processor=UtteranceProcessor(settings.upstream, http_client),
        synthesizer=synthesizer,
        settings=settings,
        _http_client=http_client,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
