"""Dispatch decoded events to the task controller and result sink."""

from __future__ import annotations

import logging
from typing import Protocol
from collections.abc import Callable

from asr_bridge.state.errors import EventDecodeError
from asr_bridge.state.events import Event, EventKind

from .parser import decode_event

logger = logging.getLogger(__name__)

ErrorNotifier = Callable[[str], None]


class TaskEvents(Protocol):
    def on_task_started(self, task_id: str | None) -> None: ...

    def on_task_finished(self, task_id: str | None) -> object: ...

    def on_task_failed(self, task_id: str | None, message: str | None) -> object: ...


class ResultConsumer(Protocol):
    def on_result(self, text: str, is_sentence_final: bool) -> None: ...


def _log_error(message: str) -> None:
    logger.error("%s", message)


class EventDispatcher:
    """Single consumer of inbound frames.

    Malformed frames are dropped; handler failures are logged. Neither ever
    reaches the transport's receive loop.
    """

    def __init__(
        self,
        tasks: TaskEvents,
        sink: ResultConsumer,
        *,
        notify_error: ErrorNotifier | None = None,
    ) -> None:
        self._tasks = tasks
        self._sink = sink
        self._notify_error = notify_error or _log_error
        self.decode_errors = 0
        self._handlers: dict[EventKind, Callable[[Event], None]] = {
            EventKind.TASK_STARTED: self._handle_task_started,
            EventKind.RESULT_GENERATED: self._handle_result_generated,
            EventKind.TASK_FINISHED: self._handle_task_finished,
            EventKind.TASK_FAILED: self._handle_task_failed,
            EventKind.ERROR: self._handle_error,
            EventKind.UNKNOWN: self._handle_unknown,
        }

    def on_error(self, notifier: ErrorNotifier) -> None:
        self._notify_error = notifier

    def handle_frame(self, raw: str | bytes) -> Event | None:
        try:
            event = decode_event(raw)
        except EventDecodeError as exc:
            self.decode_errors += 1
            logger.warning("Dropping undecodable frame: %s", exc)
            return None
        self.dispatch(event)
        return event

    def dispatch(self, event: Event) -> None:
        handler = self._handlers[event.kind]
        try:
            handler(event)
        except Exception:
            logger.exception("handler for %s failed", event.name)

    def _handle_task_started(self, event: Event) -> None:
        self._tasks.on_task_started(event.task_id)

    def _handle_result_generated(self, event: Event) -> None:
        transcription = event.transcription
        if transcription is None:
            logger.debug("result-generated without transcription task_id=%s", event.task_id)
            return
        logger.info("Recognition result: %s", transcription.text)
        self._sink.on_result(transcription.text, transcription.sentence_end)

    def _handle_task_finished(self, event: Event) -> None:
        logger.info("Task finished task_id=%s", event.task_id)
        self._tasks.on_task_finished(event.task_id)

    def _handle_task_failed(self, event: Event) -> None:
        message = event.error_message or "task failed"
        self._tasks.on_task_failed(event.task_id, message)
        self._notify_error(f"Task failed: {message}")

    def _handle_error(self, event: Event) -> None:
        message = event.error_message or str(event.raw)
        self._notify_error(f"Error event: {message}")

    def _handle_unknown(self, event: Event) -> None:
        logger.warning("Unknown event: %s %s", event.name, event.raw)


__all__ = ["ErrorNotifier", "EventDispatcher", "ResultConsumer", "TaskEvents"]
