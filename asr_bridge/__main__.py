"""Command-line entry point: hotkey-driven speech-to-clipboard bridge."""

from __future__ import annotations

import signal
import asyncio
import logging
import argparse
import contextlib

from dotenv import load_dotenv

from asr_bridge.bridge import BridgeApp
from asr_bridge.hotkey import GlobalHotkey
from asr_bridge.audio.capture import MicrophoneCapture
from asr_bridge.runtime import load_settings, configure_logging, build_runtime_deps

logger = logging.getLogger("asr_bridge")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream microphone audio to realtime ASR and copy sentences to the clipboard")
    p.add_argument("--url", default=None, help="ASR WebSocket endpoint (default: $ASR_WS_URL or DashScope)")
    p.add_argument("--model", default=None, help="ASR model name (default: $ASR_MODEL or gummy-realtime-v1)")
    p.add_argument("--hotkey", default=None, help="pynput hotkey combo (default: $ASR_HOTKEY or <alt>+`)")
    p.add_argument("--log-level", default=None, help="Logging level (default: $LOG_LEVEL or INFO)")
    return p.parse_args(argv)


def _install_signal_handlers(stop: asyncio.Event) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        # Not supported on Windows event loops; Ctrl+C still cancels run().
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, stop.set)


async def run(args: argparse.Namespace) -> int:
    settings = load_settings(url=args.url, model=args.model, hotkey=args.hotkey)
    deps = build_runtime_deps(settings)

    loop = asyncio.get_running_loop()
    capture = MicrophoneCapture(settings.capture, deps.relay.forward, loop=loop)
    hotkey = GlobalHotkey(settings.hotkey.combo, loop=loop)
    app = BridgeApp(deps, capture=capture, trigger=hotkey)

    stop = asyncio.Event()
    _install_signal_handlers(stop)

    app.start()
    logger.info("Press %s to start/stop recording; Ctrl+C to quit", settings.hotkey.combo)
    try:
        await stop.wait()
    finally:
        await app.shutdown()
    return 0


def main() -> None:
    load_dotenv()
    args = parse_args()
    configure_logging(args.log_level)
    raise SystemExit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
