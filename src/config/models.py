"""Generation endpoint configuration (env names and defaults only)."""

from __future__ import annotations

ENV_GEMINI_API_URL = "GEMINI_API_URL"
ENV_GEMINI_MODEL_ID = "GEMINI_MODEL_ID"
ENV_GEMINI_SYSTEM_INSTRUCTIONS = "GEMINI_SYSTEM_INSTRUCTIONS"
ENV_GEMINI_TIMEOUT_S = "GEMINI_TIMEOUT_S"

DEFAULT_GEMINI_API_URL = "https://generativelanguage.googleapis.com/v1beta/models"
# Text-only replies; speech is produced locally by the synthesizer.
DEFAULT_GEMINI_MODEL_ID = "gemini-1.5-flash-latest"
DEFAULT_GEMINI_SYSTEM_INSTRUCTIONS = (
    "You are Rev, an AI assistant for Revolt Motors. Only provide information about Revolt Motors products, "
    "services, and company. If asked about unrelated topics, politely redirect to Revolt Motors. Be helpful, "
    "friendly, and concise. Revolt Motors specializes in electric motorcycles and scooters."
)
# 0 disables the timeout: a hung upstream keeps the session busy until interrupt or close.
DEFAULT_GEMINI_TIMEOUT_S: float = 0.0

# Only the text modality is requested.
GEMINI_RESPONSE_MODALITIES: tuple[str, ...] = ("TEXT",)

__all__ = [
    "DEFAULT_GEMINI_API_URL",
    "DEFAULT_GEMINI_MODEL_ID",
    "DEFAULT_GEMINI_SYSTEM_INSTRUCTIONS",
    "DEFAULT_GEMINI_TIMEOUT_S",
    "ENV_GEMINI_API_URL",
    "ENV_GEMINI_MODEL_ID",
    "ENV_GEMINI_SYSTEM_INSTRUCTIONS",
    "ENV_GEMINI_TIMEOUT_S",
    "GEMINI_RESPONSE_MODALITIES",
]
