#!/usr/bin/env python3
"""Interactive relay client (manual debugging).

Captures are read from an audio file; responses are saved under --out and
text-only replies are spoken locally with pyttsx3 (``client`` extra).
"""

from __future__ import annotations

import sys
import asyncio
import argparse
import contextlib
from pathlib import Path

from src.errors import TransportError
from src.client import CapturedAudio, FileAudioSink, CaptureRecorder, RelayClient
from src.client.url import build_ws_url
from src.config.client import derive_default_server
from src.client.local_speech import Pyttsx3Speaker
from src.runtime.logging import configure_logging
from src.config.websocket import DEFAULT_AUDIO_MIME_TYPE


class FileCaptureSource:
    """Pretends to record by returning the contents of a file on stop."""

    def __init__(self, path: Path, mime_type: str) -> None:
        self._path = path
        self._mime_type = mime_type

    async def start(self) -> None:
        if not self._path.is_file():
            raise FileNotFoundError(self._path)

    async def stop(self) -> CapturedAudio:
        audio = await asyncio.to_thread(self._path.read_bytes)
        return CapturedAudio(audio=audio, mime_type=self._mime_type)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Interactive voice relay client")
    p.add_argument("--server", default=derive_default_server())
    p.add_argument("--secure", action="store_true")
    p.add_argument("--audio", type=Path, required=True, help="audio file sent for each /record")
    p.add_argument("--mime", default=DEFAULT_AUDIO_MIME_TYPE)
    p.add_argument("--out", type=Path, default=Path("responses"))
    p.add_argument("--volume", type=int, default=100)
    p.add_argument("--no-local-tts", action="store_true", help="do not speak text-only replies")
    return p.parse_args()


async def _read_stdin_line() -> str:
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, sys.stdin.readline)


def _print_new_messages(client: RelayClient, seen: int) -> int:
    for sender, text in client.ui.transcript[seen:]:
        print(f"<< [{sender}] {text}")
    return len(client.ui.transcript)


async def _interactive_loop(client: RelayClient, recorder: CaptureRecorder) -> None:
    seen = 0
    while True:
        line = await _read_stdin_line()
        if not line:
            return
        line = line.strip()
        seen = _print_new_messages(client, seen)

        try:
            if line == "/record":
                await recorder.toggle()
            elif line == "/interrupt":
                if not await client.interrupt():
                    print("nothing to interrupt")
            elif line.startswith("/volume"):
                parts = line.split()
                if len(parts) == 2 and parts[1].isdigit():
                    await client.set_volume(int(parts[1]))
                print(f"volume: {client.volume}")
            elif line == "/quit":
                return
            elif line:
                print("commands: /record /interrupt /volume N /quit")
        except TransportError as exc:
            print(f"send failed: {exc}")
        print(f"status: {client.ui.status}")


async def run(args: argparse.Namespace) -> int:
    url = build_ws_url(args.server, secure=args.secure)
    speaker = None if args.no_local_tts else Pyttsx3Speaker()
    sink = FileAudioSink(args.out, speak_fn=speaker)
    client = RelayClient(url, sink, volume=args.volume)
    recorder = CaptureRecorder(FileCaptureSource(args.audio, args.mime), client.ui, client.send_audio)

    print(f"ws: {url}")
    print("Commands:")
    print("  /record     (start/stop a capture; auto-stops after 5s)")
    print("  /interrupt")
    print("  /volume N")
    print("  /quit")

    conn_task = asyncio.create_task(client.run())
    try:
        await _interactive_loop(client, recorder)
    finally:
        await recorder.close()
        await client.close()
        conn_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await conn_task
    return 0


def main() -> None:
    configure_logging()
    raise SystemExit(asyncio.run(run(parse_args())))


if __name__ == "__main__":
    main()
