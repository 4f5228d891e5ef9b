"""Adapters for the remote generation and speech services."""

from .speech import SpeechSynthesizer
from .generation import UtteranceProcessor

__all__ = ["SpeechSynthesizer", "UtteranceProcessor"]
