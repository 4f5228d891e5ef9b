from __future__ import annotations

from pathlib import Path

import pytest
from gtts import gTTSError

from src.errors import SynthesisError
from src.upstream.speech import SpeechSynthesizer, temp_artifact


class _FakeTts:
    def __init__(self, text: str, lang: str, *, fail: bool = False, write: bool = True) -> None:
        self.text = text
        self.lang = lang
        self._fail = fail
        self._write = write

    def save(self, path: str) -> None:
        if self._fail:
            raise gTTSError("upstream refused")
        if self._write:
            Path(path).write_bytes(b"ID3" + self.text.encode())


def test_temp_artifact_removed_after_exception(tmp_path: Path) -> None:
    with pytest.raises(RuntimeError):
        with temp_artifact(tmp_path) as path:
            path.write_bytes(b"partial")
            raise RuntimeError("boom")
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_synthesize_reads_back_and_deletes_artifact(app_settings) -> None:
    calls: list[_FakeTts] = []

    def factory(text: str, lang: str) -> _FakeTts:
        tts = _FakeTts(text, lang)
        calls.append(tts)
        return tts

    synth = SpeechSynthesizer(app_settings.speech, tts_factory=factory)
    audio = await synth.synthesize("Hello from Rev")

    assert audio == b"ID3Hello from Rev"
    assert calls[0].lang == "en"
    assert list(synth.temp_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_synthesize_failure_raises_and_cleans_up(app_settings) -> None:
    synth = SpeechSynthesizer(app_settings.speech, tts_factory=lambda t, lang: _FakeTts(t, lang, fail=True))
    with pytest.raises(SynthesisError):
        await synth.synthesize("Hello")
    assert list(synth.temp_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_synthesize_empty_artifact_is_an_error(app_settings) -> None:
    synth = SpeechSynthesizer(app_settings.speech, tts_factory=lambda t, lang: _FakeTts(t, lang, write=False))
    with pytest.raises(SynthesisError):
        await synth.synthesize("Hello")
    assert list(synth.temp_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_synthesize_blank_text_skips_remote_call(app_settings) -> None:
    def factory(text: str, lang: str) -> _FakeTts:
        raise AssertionError("should not be called")

    synth = SpeechSynthesizer(app_settings.speech, tts_factory=factory)
    assert await synth.synthesize("   ") == b""
