"""Log noise filters for third-party libraries.

httpx logs every request line at INFO, which would print the API key query
parameter. Keep these loggers at WARNING unless explicitly enabled.
"""

from __future__ import annotations

import os
import logging

from src.config.logging import NOISY_LOGGERS


def configure() -> None:
    if (os.getenv("SHOW_HTTP_LOGS") or "").strip().lower() in {"1", "true", "yes"}:
        return
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


__all__ = ["configure"]
