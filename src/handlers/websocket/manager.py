"""Primary WebSocket connection handler orchestration."""

from __future__ import annotations

import logging
import contextlib

from fastapi import WebSocket

from src.state import RuntimeDeps, ConnectionContext
from src.config.websocket import WS_CLOSE_BUSY_CODE, WS_ERROR_AT_CAPACITY_MESSAGE

from .errors import reject_connection
from .lifecycle import ConnectionLifecycle
from .message_loop import run_message_loop

logger = logging.getLogger(__name__)


async def _admit(ctx: ConnectionContext, runtime_deps: RuntimeDeps) -> bool:
    if not await runtime_deps.connections.admit(ctx):
        await reject_connection(ctx.ws, message=WS_ERROR_AT_CAPACITY_MESSAGE, close_code=WS_CLOSE_BUSY_CODE)
        return False

    try:
        await ctx.ws.accept()
    except Exception:
        with contextlib.suppress(Exception):
            await runtime_deps.connections.release(ctx)
        raise
    return True


def _build_lifecycle(ctx: ConnectionContext, runtime_deps: RuntimeDeps) -> ConnectionLifecycle:
    settings = runtime_deps.settings.websocket
    return ConnectionLifecycle(
        ctx.ws,
        is_busy_fn=lambda: ctx.session.processing,
        idle_timeout_s=settings.idle_timeout_s,
        watchdog_tick_s=settings.watchdog_tick_s,
        max_connection_duration_s=settings.max_connection_duration_s,
    )


async def handle_websocket_connection(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    ctx = ConnectionContext(ws=ws)
    if not await _admit(ctx, runtime_deps):
        return

    lifecycle = _build_lifecycle(ctx, runtime_deps)
    try:
        lifecycle.start()
        logger.info("WebSocket connection %s accepted. Active: %s", ctx.connection_id, len(runtime_deps.connections))
        await run_message_loop(ctx, lifecycle, runtime_deps)
    finally:
        with contextlib.suppress(Exception):
            await lifecycle.stop()
        with contextlib.suppress(Exception):
            await runtime_deps.connections.release(ctx)
        logger.info("WebSocket connection %s closed. Active: %s", ctx.connection_id, len(runtime_deps.connections))


__all__ = ["handle_websocket_connection"]
