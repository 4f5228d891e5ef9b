"""Shared error types for the voice relay."""

from __future__ import annotations


class RelayError(Exception):
    """Base class for relay failures that are reported to clients generically."""


class ProtocolError(RelayError, ValueError):
    """Raised for malformed or unexpected frames."""


class UpstreamError(RelayError):
    """Raised when the generation service fails or answers with a non-2xx status.

    ``status_code`` and ``body`` are for logs only; they never reach the client.
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class SynthesisError(RelayError):
    """Raised when speech generation or artifact read-back fails."""


class TransportError(RelayError):
    """Raised for connection-level failures on the relay socket."""


__all__ = ["ProtocolError", "RelayError", "SynthesisError", "TransportError", "UpstreamError"]
