"""Registry of live relay connections, bounded by the admission limit."""

from __future__ import annotations

import asyncio
import logging

from src.state.connection import ConnectionContext

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    """Live ``ConnectionContext`` objects keyed by ``connection_id``.

    Admission happens before the socket is accepted, so a full registry can
    still reject the peer with an error frame.
    """

    def __init__(self, *, max_connections: int) -> None:
        self._capacity = max(1, int(max_connections))
        self._lock = asyncio.Lock()
        self._live: dict[str, ConnectionContext] = {}

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._live)

    def __contains__(self, connection_id: object) -> bool:
        return connection_id in self._live

    async def admit(self, ctx: ConnectionContext) -> bool:
        async with self._lock:
            if len(self._live) >= self._capacity:
                logger.warning(
                    "connection %s refused: %d/%d live", ctx.connection_id, len(self._live), self._capacity
                )
                return False
            self._live[ctx.connection_id] = ctx
            return True

    async def release(self, ctx: ConnectionContext) -> None:
        async with self._lock:
            self._live.pop(ctx.connection_id, None)

    async def cancel_all_pipelines(self) -> int:
        """Cancel in-flight utterances on every live connection; returns how many sessions were busy."""
        async with self._lock:
            contexts = list(self._live.values())
        busy = sum(1 for ctx in contexts if ctx.session.processing)
        for ctx in contexts:
            await ctx.cancel_tasks()
        return busy


__all__ = ["ConnectionRegistry"]
