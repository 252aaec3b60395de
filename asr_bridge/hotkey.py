"""Global hotkey that toggles recording."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from pynput import keyboard

logger = logging.getLogger(__name__)


class GlobalHotkey:
    """pynput listener whose activations are marshalled onto the event loop."""

    def __init__(self, combo: str, *, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self.combo = combo
        self._loop = loop
        self._callback: Callable[[], object] | None = None
        self._listener: keyboard.GlobalHotKeys | None = None

    def start(self, callback: Callable[[], object]) -> None:
        if self._listener is not None:
            return
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        self._callback = callback
        listener = keyboard.GlobalHotKeys({self.combo: self._on_activate})
        listener.start()
        self._listener = listener
        logger.info("Hotkey %s registered", self.combo)

    def stop(self) -> None:
        listener = self._listener
        self._listener = None
        if listener is None:
            return
        listener.stop()
        logger.info("Hotkey %s unregistered", self.combo)

    def _on_activate(self) -> None:  # pragma: no cover - pynput thread
        loop = self._loop
        callback = self._callback
        if loop is None or callback is None or loop.is_closed():
            return
        try:
            loop.call_soon_threadsafe(callback)
        except RuntimeError:
            return


__all__ = ["GlobalHotkey"]
