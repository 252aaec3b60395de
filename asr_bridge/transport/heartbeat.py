"""Periodic keep-alive frames for an open socket."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from collections.abc import Callable

logger = logging.getLogger(__name__)


class Heartbeat:
    def __init__(self, beat: Callable[[], object], *, interval_s: float) -> None:
        self._beat = beat
        self._interval_s = float(interval_s)
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        if self._task is None:
            self._task = asyncio.create_task(self._loop())
        return self._task

    def cancel(self) -> None:
        task = self._task
        self._task = None
        if task is not None and not task.done():
            task.cancel()

    async def stop(self) -> None:
        task = self._task
        self.cancel()
        if task is None:
            return
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await task

    async def _loop(self) -> None:
        try:
            while True:
                await asyncio.sleep(self._interval_s)
                self._beat()
                logger.debug("heartbeat sent")
        except asyncio.CancelledError:
            return
        except Exception:
            logger.debug("heartbeat exiting due to unexpected error", exc_info=True)


__all__ = ["Heartbeat"]
