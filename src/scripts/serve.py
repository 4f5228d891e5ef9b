"""Run the relay server with uvicorn.

Usage: python -m src.scripts.serve
"""

from __future__ import annotations

import uvicorn

from src.runtime.settings_loader import load_settings


def main() -> int:
    settings = load_settings()
    uvicorn.run("src.server:app", host=settings.server.host, port=settings.server.port, log_config=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
