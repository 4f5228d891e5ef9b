"""WebSocket message loop for the relay session coordinator."""

from __future__ import annotations

import asyncio
import logging

from fastapi import WebSocket, WebSocketDisconnect

from src.errors import ProtocolError
from src.state import RuntimeDeps, ConnectionContext
from src.config.websocket import WS_ERROR_GENERIC_MESSAGE

from .parser import parse_client_message
from .dispatch import HANDLERS
from .errors import send_error
from .lifecycle import ConnectionLifecycle

logger = logging.getLogger(__name__)


async def _recv_text(ws: WebSocket) -> str:
    message = await ws.receive()
    if message.get("type") == "websocket.disconnect":
        raise WebSocketDisconnect(code=message.get("code", 1000), reason=message.get("reason"))
    text = message.get("text")
    if text is None:
        raise ProtocolError("binary frames are not supported")
    return text


async def _recv_text_with_watchdog(ws: WebSocket, lifecycle: ConnectionLifecycle) -> tuple[str | None, bool]:
    if not lifecycle.enabled:
        return await _recv_text(ws), False
    try:
        message = await asyncio.wait_for(_recv_text(ws), timeout=lifecycle.tick_s * 2)
        return message, False
    except TimeoutError:
        return None, lifecycle.should_close()


async def _handle_frame(ctx: ConnectionContext, runtime_deps: RuntimeDeps, raw: str) -> None:
    msg = parse_client_message(raw)
    handler = HANDLERS.get(msg.msg_type)
    if handler is None:
        raise ProtocolError(f"message type '{msg.msg_type}' is not supported")
    await handler(ctx, runtime_deps, msg)


async def run_message_loop(
    ctx: ConnectionContext,
    lifecycle: ConnectionLifecycle,
    runtime_deps: RuntimeDeps,
) -> None:
    ws = ctx.ws
    try:
        while True:
            try:
                raw, should_exit = await _recv_text_with_watchdog(ws, lifecycle)
            except ProtocolError as exc:
                logger.warning("connection %s: rejected frame: %s", ctx.connection_id, exc)
                await send_error(ws, WS_ERROR_GENERIC_MESSAGE)
                continue
            if should_exit:
                return
            if raw is None:
                continue

            lifecycle.touch()

            try:
                await _handle_frame(ctx, runtime_deps, raw)
            except ProtocolError as exc:
                logger.warning("connection %s: rejected frame: %s", ctx.connection_id, exc)
                await send_error(ws, WS_ERROR_GENERIC_MESSAGE)
            except Exception:
                logger.exception("connection %s: error handling message", ctx.connection_id)
                await send_error(ws, WS_ERROR_GENERIC_MESSAGE)
    except WebSocketDisconnect:
        return
    finally:
        await ctx.cancel_tasks()


__all__ = ["run_message_loop"]
