"""Per-connection context owned by the WebSocket handler."""

from __future__ import annotations

import uuid
import asyncio
import logging
import contextlib
from typing import Any
from dataclasses import field, dataclass

from .session import Session

logger = logging.getLogger(__name__)


def _new_connection_id() -> str:
    return uuid.uuid4().hex[:12]


@dataclass(slots=True)
class ConnectionContext:
    ws: Any
    session: Session = field(default_factory=Session)
    connection_id: str = field(default_factory=_new_connection_id)
    tasks: set[asyncio.Task] = field(default_factory=set)

    def track(self, task: asyncio.Task) -> None:
        self.tasks.add(task)
        task.add_done_callback(self.tasks.discard)

    async def cancel_tasks(self) -> None:
        pending = [t for t in self.tasks if not t.done()]
        for task in pending:
            task.cancel()
        for task in pending:
            with contextlib.suppress(BaseException):
                await task
        if pending:
            logger.debug("connection %s: cancelled %d pending pipeline(s)", self.connection_id, len(pending))
        self.tasks.clear()


__all__ = ["ConnectionContext"]
