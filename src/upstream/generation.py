"""Utterance processor: one captured audio blob in, one text reply out."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from src.errors import UpstreamError
from src.protocol.codec import encode_audio
from src.state.settings import UpstreamSettings
from src.config.models import GEMINI_RESPONSE_MODALITIES

logger = logging.getLogger(__name__)


def build_generation_request(audio_b64: str, mime_type: str, system_instructions: str) -> dict[str, Any]:
    return {
        "contents": [
            {
                "role": "user",
                "parts": [{"inlineData": {"mimeType": mime_type, "data": audio_b64}}],
            }
        ],
        "systemInstruction": {"parts": [{"text": system_instructions}]},
        "generationConfig": {"responseModalities": list(GEMINI_RESPONSE_MODALITIES)},
    }


def extract_reply_text(data: Any) -> str:
    """Return the first text part of the first candidate, or "" when there is none."""
    if not isinstance(data, dict):
        return ""
    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        return ""
    first = candidates[0]
    content = first.get("content") if isinstance(first, dict) else None
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list):
        return ""
    for part in parts:
        if isinstance(part, dict) and isinstance(part.get("text"), str) and part["text"]:
            return part["text"]
    return ""


class UtteranceProcessor:
    """Wraps a single ``generateContent`` call. No retries at this layer."""

    def __init__(self, settings: UpstreamSettings, client: httpx.AsyncClient) -> None:
        self._settings = settings
        self._client = client

    @property
    def endpoint(self) -> str:
        base = self._settings.api_url.rstrip("/")
        return f"{base}/{self._settings.model_id}:generateContent"

    async def process(self, audio: bytes, mime_type: str) -> str:
        body = build_generation_request(encode_audio(audio), mime_type, self._settings.system_instructions)
        logger.debug("generation request: model=%s mime=%s bytes=%d", self._settings.model_id, mime_type, len(audio))
        try:
            resp = await self._client.post(
                self.endpoint,
                params={"key": self._settings.api_key},
                json=body,
            )
        except httpx.HTTPError as exc:
            raise UpstreamError(f"generation request failed: {exc.__class__.__name__}") from exc

        if not resp.is_success:
            logger.error("generation API error: status=%s body=%s", resp.status_code, resp.text)
            raise UpstreamError(
                f"generation API returned {resp.status_code}",
                status_code=resp.status_code,
                body=resp.text,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise UpstreamError(
                "generation API returned a non-JSON body",
                status_code=resp.status_code,
                body=resp.text,
            ) from exc

        text = extract_reply_text(data)
        if not text:
            logger.info("generation API returned no text part")
        return text


__all__ = ["UtteranceProcessor", "build_generation_request", "extract_reply_text"]
