"""Python peer client for the relay protocol.

Kept free of optional dependencies; ``local_speech`` needs the ``client`` extra.
"""

from .ui import ClientUiState
from .sink import AudioSink
from .capture import CaptureSource, CapturedAudio
from .recorder import CaptureRecorder
from .reconnect import ReconnectPolicy, ReconnectTracker
from .file_sink import FileAudioSink
from .relay_client import RelayClient

__all__ = [
    "AudioSink",
    "CaptureRecorder",
    "CaptureSource",
    "CapturedAudio",
    "ClientUiState",
    "FileAudioSink",
    "ReconnectPolicy",
    "ReconnectTracker",
    "RelayClient",
]
