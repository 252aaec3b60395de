"""Logging initialization."""

from __future__ import annotations

import os
import logging

from asr_bridge.config.logging import LOG_FORMAT, ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL, ENV_SHOW_WEBSOCKETS_LOGS


def configure_logging(level: str | None = None) -> None:
    # websockets logs every frame at DEBUG. Keep it tame unless explicitly enabled.
    if (os.getenv(ENV_SHOW_WEBSOCKETS_LOGS) or "").strip().lower() not in {"1", "true", "yes"}:
        logging.getLogger("websockets").setLevel(logging.WARNING)
    resolved = (level or os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


__all__ = ["configure_logging"]
