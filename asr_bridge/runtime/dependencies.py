"""Runtime dependency construction (session, transport, task protocol, sinks)."""

from __future__ import annotations

import logging

from asr_bridge.sink import ResultSink, ClipboardPublisher
from asr_bridge.audio import AudioRelay
from asr_bridge.state import Session, AppSettings
from asr_bridge.events import EventDispatcher
from asr_bridge.tasks import TaskLifecycleController
from asr_bridge.state.runtime import RuntimeDeps
from asr_bridge.config.secrets import ENV_API_KEY
from asr_bridge.events.dispatch import ErrorNotifier
from asr_bridge.sink.result_sink import Publisher, PartialObserver
from asr_bridge.transport.connection import ConnectFn, ConnectionTransport

logger = logging.getLogger(__name__)


def build_runtime_deps(
    settings: AppSettings,
    *,
    publish: Publisher | None = None,
    on_partial: PartialObserver | None = None,
    notify_error: ErrorNotifier | None = None,
    connect_fn: ConnectFn | None = None,
) -> RuntimeDeps:
    if not settings.auth.api_key:
        logger.warning(
            "%s not found in environment variables; the connection will be rejected until it is set",
            ENV_API_KEY,
        )

    session = Session()
    transport = ConnectionTransport(
        session,
        settings.transport,
        api_key=settings.auth.api_key,
        connect_fn=connect_fn,
    )
    controller = TaskLifecycleController(session, transport, settings.task)
    sink = ResultSink(publish or ClipboardPublisher(), on_partial=on_partial)
    dispatcher = EventDispatcher(controller, sink, notify_error=notify_error)
    transport.on_message(dispatcher.handle_frame)

    return RuntimeDeps(
        settings=settings,
        session=session,
        transport=transport,
        controller=controller,
        dispatcher=dispatcher,
        relay=AudioRelay(transport),
        sink=sink,
    )


__all__ = ["RuntimeDeps", "build_runtime_deps"]
