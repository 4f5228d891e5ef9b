"""Local ``.env`` loading."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

ENV_RELAY_ENV_FILE = "RELAY_ENV_FILE"
DEFAULT_ENV_FILE = ".env"


def load_env_file(path: Path | None = None) -> bool:
    """Merge a dotenv file into ``os.environ``; variables already set win."""
    target = path or Path(os.getenv(ENV_RELAY_ENV_FILE) or DEFAULT_ENV_FILE)
    return load_dotenv(target, override=False)


__all__ = ["DEFAULT_ENV_FILE", "ENV_RELAY_ENV_FILE", "load_env_file"]
