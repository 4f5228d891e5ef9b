"""HTTP server bind configuration (env names and defaults only)."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT: int = 3000

__all__ = ["DEFAULT_HOST", "DEFAULT_PORT", "ENV_HOST", "ENV_PORT"]
