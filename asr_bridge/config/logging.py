"""Logging configuration."""

from __future__ import annotations

ENV_LOG_LEVEL = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

ENV_SHOW_WEBSOCKETS_LOGS = "SHOW_WEBSOCKETS_LOGS"

__all__ = ["DEFAULT_LOG_LEVEL", "ENV_LOG_LEVEL", "ENV_SHOW_WEBSOCKETS_LOGS", "LOG_FORMAT"]
