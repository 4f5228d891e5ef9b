"""Configuration modules (env names and defaults only).

Config modules read the environment at import time, so the ``.env`` file is
merged in here before any of them loads.
"""

from .env_file import load_env_file

load_env_file()

__all__ = ["load_env_file"]
