from __future__ import annotations

from src.state import Session, SessionPhase


def test_audio_rejected_before_start() -> None:
    session = Session()
    assert session.try_begin() is None
    assert session.phase is SessionPhase.UNINITIALIZED


def test_single_flight() -> None:
    session = Session()
    assert session.start() is True
    generation = session.try_begin()
    assert generation == 1
    assert session.processing
    assert session.try_begin() is None
    assert session.finish(generation) is True
    assert session.phase is SessionPhase.IDLE
    assert session.try_begin() == 2


def test_restart_does_not_reset_processing() -> None:
    session = Session()
    session.start()
    session.try_begin()
    assert session.start() is False
    assert session.processing


def test_interrupt_while_idle_is_noop() -> None:
    session = Session()
    session.start()
    assert session.interrupt() is False
    assert session.phase is SessionPhase.IDLE
    assert session.generation == 0


def test_interrupt_before_start_is_noop() -> None:
    session = Session()
    assert session.interrupt() is False
    assert session.phase is SessionPhase.UNINITIALIZED


def test_interrupt_makes_inflight_generation_stale() -> None:
    session = Session()
    session.start()
    stale = session.try_begin()
    assert session.interrupt() is True
    assert session.phase is SessionPhase.IDLE

    fresh = session.try_begin()
    assert fresh is not None and fresh != stale
    # The stale pipeline finishing must not release the fresh one.
    assert session.finish(stale) is False
    assert session.processing
    assert session.finish(fresh) is True
