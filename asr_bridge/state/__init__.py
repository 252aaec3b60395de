from .session import Session
from .settings import AppSettings
from .task import Task, TaskStatus
from .connection import SendResult, ConnectionState
from .events import Event, EventKind, Transcription
from .errors import EventDecodeError, TaskAlreadyActiveError, TransportNotReadyError

__all__ = [
    "AppSettings",
    "ConnectionState",
    "Event",
    "EventDecodeError",
    "EventKind",
    "SendResult",
    "Session",
    "Task",
    "TaskAlreadyActiveError",
    "TaskStatus",
    "Transcription",
    "TransportNotReadyError",
]
