"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from asr_bridge.sink import ResultSink
    from asr_bridge.audio import AudioRelay
    from asr_bridge.state.session import Session
    from asr_bridge.events import EventDispatcher
    from asr_bridge.state.settings import AppSettings
    from asr_bridge.tasks import TaskLifecycleController
    from asr_bridge.transport import ConnectionTransport


@dataclass(slots=True)
class RuntimeDeps:
    settings: AppSettings
    session: Session
    transport: ConnectionTransport
    controller: TaskLifecycleController
    dispatcher: EventDispatcher
    relay: AudioRelay
    sink: ResultSink


__all__ = ["RuntimeDeps"]
