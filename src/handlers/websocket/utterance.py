"""Background pipeline for one accepted utterance: audio -> text -> speech."""

from __future__ import annotations

import logging
from typing import Any

from src.errors import RelayError, SynthesisError
from src.state import RuntimeDeps, ConnectionContext
from src.protocol.codec import decode_audio
from src.protocol.inbound import ClientMessage
from src.protocol.messages import error_frame, audio_response_frame
from src.config.websocket import WS_ERROR_PROCESSING_MESSAGE

from .errors import safe_send_frame

logger = logging.getLogger(__name__)


async def _produce_response(runtime_deps: RuntimeDeps, msg: ClientMessage, connection_id: str) -> dict[str, Any]:
    audio = decode_audio(msg.audio)
    text = await runtime_deps.processor.process(audio, msg.mime_type)
    logger.info("connection %s: reply text (%d chars)", connection_id, len(text))
    try:
        speech = await runtime_deps.synthesizer.synthesize(text)
    except SynthesisError:
        if not runtime_deps.settings.speech.text_fallback:
            raise
        logger.warning("connection %s: speech failed; replying with text only", connection_id, exc_info=True)
        speech = b""
    return audio_response_frame(text, speech)


async def run_utterance(
    ctx: ConnectionContext,
    runtime_deps: RuntimeDeps,
    msg: ClientMessage,
    generation: int,
) -> None:
    """Run one pipeline and release the processing phase before replying."""
    frame: dict[str, Any]
    try:
        frame = await _produce_response(runtime_deps, msg, ctx.connection_id)
    except RelayError as exc:
        logger.warning("connection %s: utterance failed: %s", ctx.connection_id, exc)
        frame = error_frame(WS_ERROR_PROCESSING_MESSAGE)
    except Exception:
        logger.exception("connection %s: unexpected error processing utterance", ctx.connection_id)
        frame = error_frame(WS_ERROR_PROCESSING_MESSAGE)
    finally:
        current = ctx.session.finish(generation)

    if not current:
        logger.info("connection %s: discarding result of interrupted utterance %d", ctx.connection_id, generation)
        return
    await safe_send_frame(ctx.ws, frame)


__all__ = ["run_utterance"]
