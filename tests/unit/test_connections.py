from __future__ import annotations

import asyncio

import pytest

from src.state import ConnectionContext
from src.handlers.connections import ConnectionRegistry


def _ctx() -> ConnectionContext:
    return ConnectionContext(ws=object())


@pytest.mark.asyncio
async def test_admission_is_bounded() -> None:
    registry = ConnectionRegistry(max_connections=2)
    a, b, c = _ctx(), _ctx(), _ctx()
    assert await registry.admit(a)
    assert await registry.admit(b)
    assert not await registry.admit(c)
    assert len(registry) == 2
    assert c.connection_id not in registry

    await registry.release(a)
    assert await registry.admit(c)
    assert a.connection_id not in registry
    assert c.connection_id in registry


@pytest.mark.asyncio
async def test_release_of_unknown_context_is_harmless() -> None:
    registry = ConnectionRegistry(max_connections=1)
    await registry.release(_ctx())
    assert len(registry) == 0


def test_capacity_has_floor_of_one() -> None:
    assert ConnectionRegistry(max_connections=0).capacity == 1


@pytest.mark.asyncio
async def test_cancel_all_pipelines_stops_busy_sessions() -> None:
    registry = ConnectionRegistry(max_connections=4)
    busy, idle = _ctx(), _ctx()
    busy.session.start()
    busy.session.try_begin()
    idle.session.start()
    await registry.admit(busy)
    await registry.admit(idle)

    pipeline = asyncio.create_task(asyncio.Event().wait())
    busy.track(pipeline)

    assert await registry.cancel_all_pipelines() == 1
    assert pipeline.cancelled()
    assert busy.tasks == set()
