"""Audio format and capture configuration."""

from __future__ import annotations

# The service expects PCM16 little-endian mono at 16kHz.
ASR_SAMPLE_RATE_HZ: int = 16000
ASR_CHANNELS: int = 1
ASR_SAMPLE_WIDTH_BYTES: int = 2
ASR_AUDIO_FORMAT = "pcm"
CAPTURE_DTYPE = "int16"

ENV_ASR_CAPTURE_BLOCK_MS = "ASR_CAPTURE_BLOCK_MS"
DEFAULT_ASR_CAPTURE_BLOCK_MS: int = 40

ENV_ASR_INPUT_GAIN = "ASR_INPUT_GAIN"
DEFAULT_ASR_INPUT_GAIN: float = 1.0

ENV_ASR_INPUT_DEVICE = "ASR_INPUT_DEVICE"

__all__ = [
    "ASR_AUDIO_FORMAT",
    "ASR_CHANNELS",
    "ASR_SAMPLE_RATE_HZ",
    "ASR_SAMPLE_WIDTH_BYTES",
    "CAPTURE_DTYPE",
    "DEFAULT_ASR_CAPTURE_BLOCK_MS",
    "DEFAULT_ASR_INPUT_GAIN",
    "ENV_ASR_CAPTURE_BLOCK_MS",
    "ENV_ASR_INPUT_DEVICE",
    "ENV_ASR_INPUT_GAIN",
]
