"""Send and error helpers for the relay WebSocket."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import WebSocket, WebSocketDisconnect

from src.protocol.messages import dumps_frame, error_frame

logger = logging.getLogger(__name__)


async def safe_send_text(ws: WebSocket, text: str) -> bool:
    try:
        await ws.send_text(text)
    except WebSocketDisconnect:
        return False
    except Exception:
        logger.debug("WebSocket send failed", exc_info=True)
        return False
    return True


async def safe_send_frame(ws: WebSocket, frame: dict[str, Any]) -> bool:
    return await safe_send_text(ws, dumps_frame(frame))


async def send_error(ws: WebSocket, message: str) -> bool:
    return await safe_send_frame(ws, error_frame(message))


async def reject_connection(ws: WebSocket, *, message: str, close_code: int) -> None:
    # Accept so we can send an error frame, then close.
    try:
        await ws.accept()
    except Exception:
        # If accept fails, nothing else to do.
        return
    await send_error(ws, message)
    try:
        await ws.close(code=close_code, reason=message)
    except Exception:
        return


__all__ = [
    "reject_connection",
    "safe_send_frame",
    "safe_send_text",
    "send_error",
]
