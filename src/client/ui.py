"""Client-visible state: status line, control flags and the transcript."""

from __future__ import annotations

from dataclasses import field, dataclass


@dataclass(slots=True)
class ClientUiState:
    status: str = "Connecting..."
    start_enabled: bool = False
    interrupt_enabled: bool = False
    recording: bool = False
    playing: bool = False
    transcript: list[tuple[str, str]] = field(default_factory=list)

    def add_message(self, sender: str, text: str) -> None:
        self.transcript.append((sender, text))

    def on_connected(self) -> None:
        self.status = "Connected"
        self.start_enabled = True

    def on_disconnected(self) -> None:
        self.status = "Disconnected"
        self.start_enabled = False
        self.interrupt_enabled = False

    def on_reconnecting(self, attempt: int, max_attempts: int) -> None:
        self.status = f"Reconnecting... ({attempt}/{max_attempts})"

    def on_connection_failed(self) -> None:
        self.status = "Connection failed. Please refresh the page."

    def on_error(self, message: str) -> None:
        self.status = f"Error: {message}"
        self.start_enabled = True
        self.interrupt_enabled = False
        self.recording = False
        self.playing = False

    def begin_recording(self) -> None:
        self.recording = True
        self.status = "Listening..."

    def end_recording(self) -> None:
        self.recording = False
        self.status = "Processing..."

    def begin_playback(self) -> None:
        self.playing = True
        self.start_enabled = False
        self.interrupt_enabled = True

    def end_playback(self) -> None:
        self.playing = False
        self.start_enabled = True
        self.interrupt_enabled = False

    def on_interrupted(self) -> None:
        self.end_playback()
        self.status = "Interrupted. Ready for new input."


__all__ = ["ClientUiState"]
