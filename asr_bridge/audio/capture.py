"""Microphone capture feeding PCM16 blocks into the event loop."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import numpy as np
import sounddevice as sd

from asr_bridge.state.settings import CaptureSettings
from asr_bridge.config.audio import ASR_CHANNELS, CAPTURE_DTYPE

logger = logging.getLogger(__name__)

ChunkConsumer = Callable[[bytes], object]


class MicrophoneCapture:
    """Record 16kHz mono int16 blocks and hand them to ``consumer`` on the loop.

    The PortAudio callback runs on its own thread; every block crosses into the
    event loop through ``call_soon_threadsafe`` so the consumer only ever runs
    on the loop thread, in capture order.
    """

    def __init__(
        self,
        settings: CaptureSettings,
        consumer: ChunkConsumer,
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._settings = settings
        self._consumer = consumer
        self._loop = loop
        self._stream: sd.RawInputStream | None = None

    @property
    def active(self) -> bool:
        return self._stream is not None

    @property
    def blocksize(self) -> int:
        return int(self._settings.sample_rate * self._settings.block_ms / 1000)

    def start(self) -> None:
        if self._stream is not None:
            return
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        stream = sd.RawInputStream(
            samplerate=self._settings.sample_rate,
            blocksize=self.blocksize,
            device=self._settings.device,
            dtype=CAPTURE_DTYPE,
            channels=ASR_CHANNELS,
            callback=self._callback,
        )
        stream.start()
        self._stream = stream
        logger.info("Recording started (%d Hz PCM, %d ms blocks)", self._settings.sample_rate, self._settings.block_ms)

    def stop(self) -> None:
        stream = self._stream
        self._stream = None
        if stream is None:
            return
        try:
            stream.stop()
        finally:
            stream.close()
        logger.info("Recording stopped")

    def _apply_gain(self, data: bytes) -> bytes:
        if self._settings.gain == 1.0:
            return data
        samples = np.frombuffer(data, dtype=np.int16)
        amplified = np.clip(samples.astype(np.float32) * self._settings.gain, -32768, 32767)
        return amplified.astype(np.int16).tobytes()

    def _callback(self, indata, _frames, _time_info, status) -> None:  # pragma: no cover - PortAudio thread
        if status:
            logger.debug("capture status: %s", status)
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        try:
            chunk = self._apply_gain(bytes(indata))
            loop.call_soon_threadsafe(self._consumer, chunk)
        except RuntimeError:
            # Loop shut down between the check and the call.
            return
        except Exception:
            logger.exception("error in microphone callback")


__all__ = ["ChunkConsumer", "MicrophoneCapture"]
