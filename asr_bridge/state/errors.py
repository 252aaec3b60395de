"""Error types (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass

from .connection import ConnectionState


@dataclass(frozen=True, slots=True)
class TransportNotReadyError(Exception):
    """Raised when a frame must go out but the socket is not open."""

    state: ConnectionState

    def __str__(self) -> str:
        return f"transport not ready (state={self.state.value})"


@dataclass(frozen=True, slots=True)
class TaskAlreadyActiveError(Exception):
    """Raised when a task is started while another one is running."""

    task_id: str

    def __str__(self) -> str:
        return f"task already running: {self.task_id}"


class EventDecodeError(ValueError):
    """Raised when an inbound frame is not a well-formed event."""


__all__ = ["EventDecodeError", "TaskAlreadyActiveError", "TransportNotReadyError"]
