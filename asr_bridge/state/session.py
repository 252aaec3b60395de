"""Session state shared by the transport and the task controller."""

from __future__ import annotations

import logging
from typing import Protocol
from dataclasses import dataclass

from .task import Task, TaskStatus
from .connection import ConnectionState
from .errors import TaskAlreadyActiveError, TransportNotReadyError

logger = logging.getLogger(__name__)


class HeartbeatHandle(Protocol):
    def cancel(self) -> None: ...


@dataclass(slots=True)
class Session:
    """Connection state, active task and heartbeat ownership for one bridge.

    Invariant: ``active_task`` is set only while the connection is OPEN. Every
    transition away from OPEN drops the task and releases the heartbeat.
    """

    connection_state: ConnectionState = ConnectionState.DISCONNECTED
    active_task: Task | None = None
    heartbeat: HeartbeatHandle | None = None

    @property
    def active_task_id(self) -> str | None:
        return self.active_task.id if self.active_task is not None else None

    @property
    def is_open(self) -> bool:
        return self.connection_state is ConnectionState.OPEN

    def set_connection_state(self, state: ConnectionState) -> ConnectionState:
        previous = self.connection_state
        self.connection_state = state
        if state is not ConnectionState.OPEN:
            dropped = self.clear_task(TaskStatus.FAILED)
            if dropped is not None:
                logger.warning("task %s dropped on %s", dropped.id, state.value)
            self.release_heartbeat()
        return previous

    def attach_task(self, task: Task) -> None:
        if self.active_task is not None:
            raise TaskAlreadyActiveError(task_id=self.active_task.id)
        if not self.is_open:
            raise TransportNotReadyError(state=self.connection_state)
        self.active_task = task

    def clear_task(self, status: TaskStatus) -> Task | None:
        task = self.active_task
        if task is None:
            return None
        task.status = status
        self.active_task = None
        return task

    def release_heartbeat(self) -> None:
        heartbeat = self.heartbeat
        self.heartbeat = None
        if heartbeat is not None:
            heartbeat.cancel()


__all__ = ["HeartbeatHandle", "Session"]
