"""Connection state enums."""

from __future__ import annotations

from enum import Enum


class ConnectionState(str, Enum):
    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    OPEN = "open"
    CLOSING = "closing"


class SendResult(str, Enum):
    SENT = "sent"
    NOT_READY = "not_ready"


__all__ = ["ConnectionState", "SendResult"]
