from __future__ import annotations

import sys
from pathlib import Path

import pytest

from src.state.settings import (
    AppSettings,
    LimitsSettings,
    SpeechSettings,
    ServerSettings,
    UpstreamSettings,
    WebSocketSettings,
)


def pytest_configure() -> None:
    # Keep `import src...` working when running `pytest` from the repo root.
    repo_root = Path(__file__).resolve().parents[1]
    repo_root_str = str(repo_root)
    if repo_root_str not in sys.path:
        sys.path.insert(0, repo_root_str)


@pytest.fixture
def app_settings(tmp_path: Path) -> AppSettings:
    return AppSettings(
        upstream=UpstreamSettings(
            api_key="test-key",
            api_url="https://upstream.test/v1beta/models",
            model_id="test-model",
            system_instructions="You are Rev.",
            timeout_s=0.0,
        ),
        speech=SpeechSettings(language="en", temp_dir=tmp_path / "speech", text_fallback=False),
        limits=LimitsSettings(max_concurrent_connections=8),
        websocket=WebSocketSettings(idle_timeout_s=0.0, watchdog_tick_s=5.0, max_connection_duration_s=0.0),
        server=ServerSettings(host="127.0.0.1", port=3000),
    )
