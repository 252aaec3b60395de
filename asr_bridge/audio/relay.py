"""Forward captured PCM chunks to the transport."""

from __future__ import annotations

import logging
from typing import Protocol

from asr_bridge.state.connection import SendResult

logger = logging.getLogger(__name__)

AudioChunk = bytes | bytearray | memoryview


class BinarySender(Protocol):
    def send(self, data: AudioChunk) -> SendResult: ...


class AudioRelay:
    """Readiness-gated pass-through for realtime audio.

    Audio is lossy realtime data: a chunk that cannot go out right now is
    dropped and reported, never queued behind a reconnect.
    """

    def __init__(self, sender: BinarySender) -> None:
        self._sender = sender
        self.forwarded_chunks = 0
        self.dropped_chunks = 0

    def forward(self, chunk: AudioChunk) -> bool:
        if self._sender.send(chunk) is SendResult.SENT:
            self.forwarded_chunks += 1
            return True
        self.dropped_chunks += 1
        logger.warning("dropped chunk, transport not ready (%d bytes)", len(chunk))
        return False


__all__ = ["AudioChunk", "AudioRelay", "BinarySender"]
