"""Recording toggle, startup and ordered shutdown for the bridge process."""

from __future__ import annotations

import logging
from typing import Protocol
from collections.abc import Callable

from asr_bridge.state.task import Task
from asr_bridge.state.runtime import RuntimeDeps
from asr_bridge.state.connection import ConnectionState
from asr_bridge.state.errors import TaskAlreadyActiveError, TransportNotReadyError

logger = logging.getLogger(__name__)


class Recorder(Protocol):
    def start(self) -> None: ...

    def stop(self) -> None: ...


class Trigger(Protocol):
    def start(self, callback: Callable[[], object]) -> None: ...

    def stop(self) -> None: ...


class BridgeApp:
    """Glue between the external trigger, the microphone and the session core.

    Each recording is one task: starting sends run-task before the microphone
    opens, stopping closes the microphone before finish-task goes out. A
    connection drop ends the recording because no task survives a reconnect.
    """

    def __init__(
        self,
        deps: RuntimeDeps,
        *,
        capture: Recorder | None = None,
        trigger: Trigger | None = None,
    ) -> None:
        self._deps = deps
        self._capture = capture
        self._trigger = trigger
        self._recording = False
        self._started = False
        self._shut_down = False
        deps.transport.add_state_listener(self._on_connection_state)
        deps.dispatcher.on_error(self.notify_error)
        deps.controller.add_cleared_listener(self._on_task_cleared)

    @property
    def recording(self) -> bool:
        return self._recording

    def start(self) -> None:
        if self._started:
            return
        self._started = True
        self._deps.transport.connect()
        if self._trigger is not None:
            self._trigger.start(self.toggle_recording)

    def toggle_recording(self) -> bool:
        if self._recording:
            self.stop_recording()
        else:
            self.start_recording()
        return self._recording

    def start_recording(self) -> bool:
        if self._recording:
            return True
        logger.info("Start recording and ASR task...")
        try:
            self._deps.controller.start_task()
        except (TaskAlreadyActiveError, TransportNotReadyError) as exc:
            logger.warning("Cannot start recording: %s", exc)
            return False

        if self._capture is not None:
            try:
                self._capture.start()
            except Exception:
                logger.exception("microphone failed to start")
                self._deps.controller.finish_task()
                return False
        self._recording = True
        return True

    def stop_recording(self) -> None:
        if not self._recording:
            return
        logger.info("Stop recording and finish ASR task...")
        self._recording = False
        self._stop_capture()
        self._deps.controller.finish_task()

    def notify_error(self, message: str) -> None:
        logger.error("%s", message)

    async def shutdown(self) -> None:
        if self._shut_down:
            return
        self._shut_down = True
        if self._trigger is not None:
            try:
                self._trigger.stop()
            except Exception:
                logger.exception("failed to unregister trigger")
        self.stop_recording()
        await self._deps.transport.close()
        self._deps.session.release_heartbeat()
        logger.info("Bridge shut down")

    def _stop_capture(self) -> None:
        if self._capture is None:
            return
        try:
            self._capture.stop()
        except Exception:
            logger.exception("microphone failed to stop")

    def _on_task_cleared(self, task: Task) -> None:
        if not self._recording:
            return
        # The server ended the task; audio has nowhere to go.
        logger.warning("Task %s ended by the server; recording stopped", task.id)
        self._recording = False
        self._stop_capture()

    def _on_connection_state(self, previous: ConnectionState, state: ConnectionState) -> None:
        if previous is ConnectionState.OPEN and self._recording:
            logger.warning("Connection lost while recording; recording stopped")
            self._recording = False
            self._stop_capture()
        if state is ConnectionState.DISCONNECTED and not self._shut_down:
            logger.info("Waiting to reconnect")


__all__ = ["BridgeApp", "Recorder", "Trigger"]
