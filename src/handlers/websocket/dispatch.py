"""Dispatch handlers for relay protocol frames."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Awaitable

from src.state import RuntimeDeps, ConnectionContext
from src.protocol.inbound import ClientMessage
from src.protocol.messages import session_started_frame
from src.config.websocket import MSG_AUDIO, MSG_INTERRUPT, MSG_START_SESSION

from .errors import safe_send_frame
from .utterance import run_utterance

logger = logging.getLogger(__name__)

HandlerFn = Callable[[ConnectionContext, RuntimeDeps, ClientMessage], Awaitable[None]]


async def _handle_start_session(ctx: ConnectionContext, _runtime_deps: RuntimeDeps, _msg: ClientMessage) -> None:
    if ctx.session.start():
        logger.info("connection %s: session started", ctx.connection_id)
    else:
        logger.info("connection %s: session re-started (phase=%s)", ctx.connection_id, ctx.session.phase.value)
    await safe_send_frame(ctx.ws, session_started_frame())


async def _handle_audio(ctx: ConnectionContext, runtime_deps: RuntimeDeps, msg: ClientMessage) -> None:
    generation = ctx.session.try_begin()
    if generation is None:
        # Single flight: dropped, never queued.
        logger.debug("connection %s: dropping audio (phase=%s)", ctx.connection_id, ctx.session.phase.value)
        return
    logger.info("connection %s: processing audio mime=%s", ctx.connection_id, msg.mime_type)
    task = asyncio.create_task(run_utterance(ctx, runtime_deps, msg, generation))
    ctx.track(task)


async def _handle_interrupt(ctx: ConnectionContext, _runtime_deps: RuntimeDeps, _msg: ClientMessage) -> None:
    if ctx.session.interrupt():
        logger.info("connection %s: interrupt released in-flight utterance", ctx.connection_id)
    else:
        logger.debug("connection %s: interrupt with nothing in flight", ctx.connection_id)


HANDLERS: dict[str, HandlerFn] = {
    MSG_START_SESSION: _handle_start_session,
    MSG_AUDIO: _handle_audio,
    MSG_INTERRUPT: _handle_interrupt,
}

__all__ = ["HANDLERS", "HandlerFn"]
