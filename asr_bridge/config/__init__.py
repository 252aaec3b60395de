"""Configuration module exports (env-resolved constants only)."""

from .secrets import get_api_key
from .audio import ASR_SAMPLE_RATE_HZ
from .logging import LOG_FORMAT, DEFAULT_LOG_LEVEL

__all__ = [
    "ASR_SAMPLE_RATE_HZ",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "get_api_key",
]
