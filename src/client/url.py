"""Relay WebSocket URL helpers."""

from __future__ import annotations

from src.config.websocket import WS_ENDPOINT_PATH


def build_ws_url(server: str, *, secure: bool = False, path: str = WS_ENDPOINT_PATH) -> str:
    s = (server or "").strip()
    if s.startswith(("ws://", "wss://")):
        return s
    if s.startswith(("http://", "https://")):
        scheme = "wss" if s.startswith("https://") or secure else "ws"
        s = s.split("://", 1)[1]
    else:
        scheme = "wss" if secure else "ws"
    host = s.rstrip("/")
    return f"{scheme}://{host}{path if path.startswith('/') else '/' + path}"


__all__ = ["build_ws_url"]
