"""Duplex socket configuration and constants."""

from __future__ import annotations

ENV_ASR_WS_URL = "ASR_WS_URL"
DEFAULT_ASR_WS_URL = "wss://dashscope.aliyuncs.com/api-ws/v1/inference/"

# Zero-length binary frame keeps an idle connection open.
ENV_ASR_HEARTBEAT_INTERVAL_S = "ASR_HEARTBEAT_INTERVAL_S"
DEFAULT_ASR_HEARTBEAT_INTERVAL_S: float = 30.0
HEARTBEAT_FRAME: bytes = b""

# Reconnect: fixed 3s delay, no growth, no cap unless overridden.
ENV_ASR_RECONNECT_DELAY_S = "ASR_RECONNECT_DELAY_S"
ENV_ASR_RECONNECT_BACKOFF = "ASR_RECONNECT_BACKOFF"
ENV_ASR_RECONNECT_MAX_DELAY_S = "ASR_RECONNECT_MAX_DELAY_S"
ENV_ASR_RECONNECT_MAX_ATTEMPTS = "ASR_RECONNECT_MAX_ATTEMPTS"
DEFAULT_ASR_RECONNECT_DELAY_S: float = 3.0
DEFAULT_ASR_RECONNECT_BACKOFF: float = 1.0
DEFAULT_ASR_RECONNECT_MAX_DELAY_S: float = 3.0
DEFAULT_ASR_RECONNECT_MAX_ATTEMPTS: int = 0

# Disable websockets library keepalive; the heartbeat frame replaces it.
WS_PING_INTERVAL_S: float | None = None
WS_PING_TIMEOUT_S: float | None = None
WS_MAX_MESSAGE_BYTES: int = 4 * 1024 * 1024
WS_CLOSE_TIMEOUT_S: float = 2.0

WS_AUTH_HEADER = "Authorization"
WS_AUTH_SCHEME = "bearer"

# Credential masking for logs.
CREDENTIAL_PREFIX_MAX_CHARS = 10
CREDENTIAL_MISSING_LABEL = "MISSING"

__all__ = [
    "CREDENTIAL_MISSING_LABEL",
    "CREDENTIAL_PREFIX_MAX_CHARS",
    "DEFAULT_ASR_HEARTBEAT_INTERVAL_S",
    "DEFAULT_ASR_RECONNECT_BACKOFF",
    "DEFAULT_ASR_RECONNECT_DELAY_S",
    "DEFAULT_ASR_RECONNECT_MAX_ATTEMPTS",
    "DEFAULT_ASR_RECONNECT_MAX_DELAY_S",
    "DEFAULT_ASR_WS_URL",
    "ENV_ASR_HEARTBEAT_INTERVAL_S",
    "ENV_ASR_RECONNECT_BACKOFF",
    "ENV_ASR_RECONNECT_DELAY_S",
    "ENV_ASR_RECONNECT_MAX_ATTEMPTS",
    "ENV_ASR_RECONNECT_MAX_DELAY_S",
    "ENV_ASR_WS_URL",
    "HEARTBEAT_FRAME",
    "WS_AUTH_HEADER",
    "WS_AUTH_SCHEME",
    "WS_CLOSE_TIMEOUT_S",
    "WS_MAX_MESSAGE_BYTES",
    "WS_PING_INTERVAL_S",
    "WS_PING_TIMEOUT_S",
]
