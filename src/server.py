"""Main FastAPI server for the voice relay."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import Callable, Awaitable

from fastapi import FastAPI, WebSocket
from fastapi.responses import ORJSONResponse

from src.state import RuntimeDeps
from src.config.websocket import WS_ENDPOINT_PATH
from src.runtime.logging import configure_logging
from src.runtime.dependencies import build_runtime_deps
from src.handlers.websocket.manager import handle_websocket_connection

logger = logging.getLogger(__name__)

DepsFactory = Callable[[], Awaitable[RuntimeDeps]]


def build_app(deps_factory: DepsFactory = build_runtime_deps) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        runtime_deps = await deps_factory()
        app.state.runtime_deps = runtime_deps
        logger.info("runtime: ready")
        try:
            yield
        finally:
            deps = getattr(app.state, "runtime_deps", None)
            if deps is not None:
                await deps.shutdown()

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.websocket(WS_ENDPOINT_PATH)
    async def websocket_endpoint(websocket: WebSocket) -> None:
        runtime_deps = getattr(app.state, "runtime_deps", None)
        if runtime_deps is None:
            raise RuntimeError("Runtime dependencies are not initialized")
        await handle_websocket_connection(websocket, runtime_deps)

    return app


configure_logging()

app = build_app()

__all__ = ["app", "build_app"]
