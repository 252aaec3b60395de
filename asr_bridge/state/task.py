"""Transcription task state."""

from __future__ import annotations

from enum import Enum
from dataclasses import dataclass


class TaskStatus(str, Enum):
    IDLE = "idle"
    STARTED = "started"
    FINISHED = "finished"
    FAILED = "failed"


@dataclass(slots=True)
class Task:
    id: str
    status: TaskStatus = TaskStatus.IDLE

    @property
    def is_done(self) -> bool:
        return self.status in (TaskStatus.FINISHED, TaskStatus.FAILED)


__all__ = ["Task", "TaskStatus"]
