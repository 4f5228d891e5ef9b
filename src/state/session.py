"""Per-connection session state with explicit phase transitions.

A session starts ``uninitialized``; ``start_session`` moves it to ``idle``.
Only ``idle`` accepts an utterance (``try_begin``), which moves it to
``processing`` until ``finish`` or ``interrupt`` brings it back to ``idle``.

Every accepted utterance gets a generation number. ``interrupt`` advances the
generation, so a pipeline started before the interrupt can tell that its result
is stale and that releasing the phase is no longer its job.
"""

from __future__ import annotations

from dataclasses import dataclass

from .phase import SessionPhase


@dataclass(slots=True)
class Session:
    phase: SessionPhase = SessionPhase.UNINITIALIZED
    generation: int = 0

    @property
    def initialized(self) -> bool:
        return self.phase is not SessionPhase.UNINITIALIZED

    @property
    def processing(self) -> bool:
        return self.phase is SessionPhase.PROCESSING

    def start(self) -> bool:
        """Initialize the session; returns False if it was already initialized.

        Re-initialization is acknowledged but never resets an active phase.
        """
        if self.initialized:
            return False
        self.phase = SessionPhase.IDLE
        return True

    def try_begin(self) -> int | None:
        if self.phase is not SessionPhase.IDLE:
            return None
        self.generation += 1
        self.phase = SessionPhase.PROCESSING
        return self.generation

    def is_current(self, generation: int) -> bool:
        return self.processing and self.generation == generation

    def finish(self, generation: int) -> bool:
        """Release the processing phase held by ``generation``.

        Returns False (and changes nothing) when the generation is stale.
        """
        if not self.is_current(generation):
            return False
        self.phase = SessionPhase.IDLE
        return True

    def interrupt(self) -> bool:
        if not self.initialized:
            return False
        was_processing = self.processing
        if was_processing:
            self.generation += 1
        self.phase = SessionPhase.IDLE
        return was_processing


__all__ = ["Session"]
