"""Decoded inbound events (dataclasses only)."""

from __future__ import annotations

from enum import Enum
from typing import Any
from dataclasses import field, dataclass

from asr_bridge.config.protocol import (
    EVENT_ERROR,
    EVENT_TASK_FAILED,
    EVENT_TASK_STARTED,
    EVENT_TASK_FINISHED,
    EVENT_RESULT_GENERATED,
)


class EventKind(str, Enum):
    TASK_STARTED = EVENT_TASK_STARTED
    RESULT_GENERATED = EVENT_RESULT_GENERATED
    TASK_FINISHED = EVENT_TASK_FINISHED
    TASK_FAILED = EVENT_TASK_FAILED
    ERROR = EVENT_ERROR
    UNKNOWN = "unknown"

    @classmethod
    def from_wire(cls, name: str) -> EventKind:
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True, slots=True)
class Transcription:
    text: str
    sentence_end: bool


@dataclass(frozen=True, slots=True)
class Event:
    kind: EventKind
    name: str
    task_id: str | None = None
    transcription: Transcription | None = None
    error_code: str | None = None
    error_message: str | None = None
    raw: dict[str, Any] = field(default_factory=dict)


__all__ = ["Event", "EventKind", "Transcription"]
