from __future__ import annotations

from pathlib import Path

import pytest

from src.client.url import build_ws_url
from src.config.env_file import load_env_file
from src.runtime.settings_loader import load_settings

_ENV_VARS = (
    "GEMINI_API_KEY",
    "GEMINI_MODEL_ID",
    "GEMINI_TIMEOUT_S",
    "TTS_TEMP_DIR",
    "SPEECH_TEXT_FALLBACK",
    "PORT",
    "WS_IDLE_TIMEOUT_S",
    "WS_WATCHDOG_TICK_S",
    "MAX_CONCURRENT_CONNECTIONS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = load_settings()
    assert settings.upstream.model_id == "gemini-1.5-flash-latest"
    assert settings.upstream.timeout_s == 0.0
    assert settings.speech.temp_dir == Path("temp")
    assert settings.speech.text_fallback is False
    assert settings.server.port == 3000
    assert settings.websocket.idle_timeout_s == 0.0


def test_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GEMINI_API_KEY", "k-123")
    monkeypatch.setenv("GEMINI_MODEL_ID", "gemini-2.0-flash")
    monkeypatch.setenv("GEMINI_TIMEOUT_S", "12.5")
    monkeypatch.setenv("TTS_TEMP_DIR", str(tmp_path))
    monkeypatch.setenv("SPEECH_TEXT_FALLBACK", "yes")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("WS_IDLE_TIMEOUT_S", "off")
    monkeypatch.setenv("WS_WATCHDOG_TICK_S", "-1")
    monkeypatch.setenv("MAX_CONCURRENT_CONNECTIONS", "0")

    settings = load_settings()
    assert settings.upstream.api_key == "k-123"
    assert settings.upstream.model_id == "gemini-2.0-flash"
    assert settings.upstream.timeout_s == 12.5
    assert settings.speech.temp_dir == tmp_path
    assert settings.speech.text_fallback is True
    assert settings.server.port == 8080
    assert settings.websocket.idle_timeout_s == 0.0
    assert settings.websocket.watchdog_tick_s == 5.0
    assert settings.limits.max_concurrent_connections == 1


def test_invalid_port_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValueError):
        load_settings()


@pytest.mark.parametrize(
    "server,secure,expected",
    [
        ("localhost:3000", False, "ws://localhost:3000/"),
        ("relay.example.com", True, "wss://relay.example.com/"),
        ("https://relay.example.com/", False, "wss://relay.example.com/"),
        ("ws://already:1/", False, "ws://already:1/"),
    ],
)
def test_build_ws_url(server: str, secure: bool, expected: str) -> None:
    assert build_ws_url(server, secure=secure, path="/") == expected


def test_env_file_fills_unset_variables_only(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("GEMINI_API_KEY=from-file\nPORT=8081\n")
    monkeypatch.setenv("GEMINI_API_KEY", "from-process")
    # Registers PORT for restoration before the file sets it.
    monkeypatch.setenv("PORT", "1")
    monkeypatch.delenv("PORT")

    assert load_env_file(env_file) is True

    settings = load_settings()
    assert settings.upstream.api_key == "from-process"
    assert settings.server.port == 8081


def test_missing_env_file_is_ignored(tmp_path: Path) -> None:
    assert load_env_file(tmp_path / "absent.env") is False
