"""Realtime speech-to-clipboard bridge for streaming ASR over a duplex WebSocket."""

__version__ = "0.1.0"
