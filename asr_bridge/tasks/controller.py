"""Task lifecycle: run-task / finish-task for one utterance at a time."""

from __future__ import annotations

import logging
from typing import Protocol
from collections.abc import Callable

from asr_bridge.state.session import Session
from asr_bridge.state.task import Task, TaskStatus
from asr_bridge.state.settings import TaskSettings
from asr_bridge.state.connection import SendResult
from asr_bridge.state.errors import TaskAlreadyActiveError, TransportNotReadyError

from .ids import new_task_id
from .messages import build_run_task, build_finish_task

logger = logging.getLogger(__name__)


class FrameSender(Protocol):
    def send(self, data: dict) -> SendResult: ...


class TaskLifecycleController:
    def __init__(
        self,
        session: Session,
        sender: FrameSender,
        settings: TaskSettings,
        *,
        id_factory: Callable[[], str] = new_task_id,
    ) -> None:
        self._session = session
        self._sender = sender
        self._settings = settings
        self._id_factory = id_factory
        self._cleared_listeners: list[Callable[[Task], object]] = []

    def add_cleared_listener(self, listener: Callable[[Task], object]) -> None:
        """Called when the server ends the active task (task-finished or task-failed)."""
        self._cleared_listeners.append(listener)

    @property
    def active_task_id(self) -> str | None:
        return self._session.active_task_id

    def start_task(self) -> Task:
        """Send run-task and attach the new task once the frame is accepted.

        Raises TaskAlreadyActiveError while a task runs and
        TransportNotReadyError if the socket is not open; in both cases no
        task id is retained.
        """
        active = self._session.active_task
        if active is not None:
            raise TaskAlreadyActiveError(task_id=active.id)
        if not self._session.is_open:
            raise TransportNotReadyError(state=self._session.connection_state)

        task = Task(id=self._id_factory())
        if self._sender.send(build_run_task(task.id, self._settings)) is not SendResult.SENT:
            raise TransportNotReadyError(state=self._session.connection_state)

        task.status = TaskStatus.STARTED
        self._session.attach_task(task)
        logger.info("run-task sent task_id=%s model=%s", task.id, self._settings.model)
        return task

    def finish_task(self) -> bool:
        task = self._session.active_task
        if task is None:
            logger.warning("No current task to finish")
            return False

        result = self._sender.send(build_finish_task(task.id))
        self._session.clear_task(TaskStatus.FINISHED)
        if result is not SendResult.SENT:
            logger.warning("finish-task for %s not sent; transport not ready", task.id)
            return False
        logger.info("finish-task sent task_id=%s", task.id)
        return True

    def on_task_started(self, task_id: str | None) -> None:
        logger.info("Task started, ready to receive audio task_id=%s", task_id)

    def on_task_finished(self, task_id: str | None) -> Task | None:
        return self._clear_if_current(task_id, TaskStatus.FINISHED)

    def on_task_failed(self, task_id: str | None, message: str | None) -> Task | None:
        logger.debug("task-failed task_id=%s: %s", task_id, message or "unknown error")
        return self._clear_if_current(task_id, TaskStatus.FAILED)

    def _clear_if_current(self, task_id: str | None, status: TaskStatus) -> Task | None:
        active = self._session.active_task
        if active is None:
            return None
        if task_id and task_id != active.id:
            logger.debug("ignoring %s for stale task %s (active %s)", status.value, task_id, active.id)
            return None
        task = self._session.clear_task(status)
        for listener in list(self._cleared_listeners):
            try:
                listener(task)
            except Exception:
                logger.exception("task cleared listener failed")
        return task


__all__ = ["FrameSender", "TaskLifecycleController"]
