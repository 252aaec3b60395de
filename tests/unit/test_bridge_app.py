from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from asr_bridge.bridge import BridgeApp
from asr_bridge.runtime.dependencies import build_runtime_deps
from tests.utils.fakes import FakeConnector, wait_until, make_app_settings, make_transport_settings


class _Recorder:
    def __init__(self, *, fail: bool = False) -> None:
        self.fail = fail
        self.calls: list[str] = []

    def start(self) -> None:
        if self.fail:
            raise OSError("no input device")
        self.calls.append("start")

    def stop(self) -> None:
        self.calls.append("stop")


class _Trigger:
    def __init__(self) -> None:
        self.callback: Callable[[], object] | None = None
        self.stopped = False

    def start(self, callback: Callable[[], object]) -> None:
        self.callback = callback

    def stop(self) -> None:
        self.stopped = True

    def press(self) -> None:
        assert self.callback is not None
        self.callback()


def _app(*, fail_capture: bool = False, reconnect_delay_s: float = 0.01):
    connector = FakeConnector()
    published: list[str] = []
    settings = make_app_settings(transport=make_transport_settings(reconnect_delay_s=reconnect_delay_s))
    deps = build_runtime_deps(settings, publish=published.append, connect_fn=connector)
    recorder = _Recorder(fail=fail_capture)
    trigger = _Trigger()
    app = BridgeApp(deps, capture=recorder, trigger=trigger)
    return app, deps, connector, recorder, trigger, published


@pytest.mark.asyncio
async def test_start_connects_and_registers_trigger() -> None:
    app, deps, connector, _, trigger, _ = _app()

    app.start()
    app.start()
    await wait_until(lambda: deps.transport.is_open)

    assert len(connector.calls) == 1
    assert trigger.callback is not None
    await app.shutdown()


@pytest.mark.asyncio
async def test_toggle_before_open_leaves_recording_off(caplog: pytest.LogCaptureFixture) -> None:
    app, deps, _, recorder, _, _ = _app()

    with caplog.at_level(logging.WARNING):
        assert app.toggle_recording() is False

    assert recorder.calls == []
    assert deps.session.active_task is None
    assert "Cannot start recording" in caplog.text


@pytest.mark.asyncio
async def test_toggle_starts_task_before_capture_and_stops_capture_before_finish() -> None:
    app, deps, connector, recorder, trigger, _ = _app()
    app.start()
    await wait_until(lambda: deps.transport.is_open)
    ws = connector.latest

    trigger.press()
    assert app.recording
    assert recorder.calls == ["start"]
    await wait_until(lambda: ws.actions() == ["run-task"])

    trigger.press()
    assert not app.recording
    assert recorder.calls == ["start", "stop"]
    await wait_until(lambda: ws.actions() == ["run-task", "finish-task"])
    assert deps.session.active_task is None

    await app.shutdown()


@pytest.mark.asyncio
async def test_capture_failure_finishes_the_task() -> None:
    app, deps, connector, _, _, _ = _app(fail_capture=True)
    app.start()
    await wait_until(lambda: deps.transport.is_open)

    assert app.start_recording() is False
    assert not app.recording
    assert deps.session.active_task is None
    await wait_until(lambda: connector.latest.actions() == ["run-task", "finish-task"])

    await app.shutdown()


@pytest.mark.asyncio
async def test_connection_loss_stops_recording() -> None:
    app, deps, connector, recorder, trigger, _ = _app(reconnect_delay_s=0.05)
    app.start()
    await wait_until(lambda: deps.transport.is_open)
    trigger.press()
    first = connector.latest
    await wait_until(lambda: first.actions() == ["run-task"])

    first.drop()
    await wait_until(lambda: not deps.transport.is_open)

    assert not app.recording
    assert recorder.calls == ["start", "stop"]
    assert deps.session.active_task is None

    await wait_until(lambda: deps.transport.is_open and len(connector.sockets) == 2)
    assert first.actions() == ["run-task"]
    await app.shutdown()


@pytest.mark.asyncio
async def test_server_task_failure_stops_recording() -> None:
    app, deps, connector, recorder, trigger, _ = _app()
    app.start()
    await wait_until(lambda: deps.transport.is_open)
    trigger.press()
    task_id = deps.session.active_task_id

    connector.latest.push({"header": {"event": "task-failed", "task_id": task_id, "error_message": "bad"}})
    await wait_until(lambda: not app.recording)

    assert recorder.calls == ["start", "stop"]
    assert deps.session.active_task is None
    await app.shutdown()


@pytest.mark.asyncio
async def test_shutdown_finishes_task_then_closes_once() -> None:
    app, deps, connector, recorder, trigger, _ = _app()
    app.start()
    await wait_until(lambda: deps.transport.is_open)
    trigger.press()
    ws = connector.latest

    await app.shutdown()
    await app.shutdown()

    assert trigger.stopped
    assert recorder.calls == ["start", "stop"]
    assert ws.actions() == ["run-task", "finish-task"]
    assert ws.close_calls == 1
    assert deps.session.heartbeat is None
    assert not deps.transport.reconnect_pending


@pytest.mark.asyncio
async def test_server_task_finish_stops_recording() -> None:
    app, deps, connector, recorder, trigger, _ = _app()
    app.start()
    await wait_until(lambda: deps.transport.is_open)
    trigger.press()
    task_id = deps.session.active_task_id

    connector.latest.push({"header": {"event": "task-finished", "task_id": task_id}})
    await wait_until(lambda: not app.recording)

    assert recorder.calls == ["start", "stop"]
    trigger.press()
    assert app.recording
    assert deps.session.active_task_id not in (None, task_id)

    await app.shutdown()


@pytest.mark.asyncio
async def test_task_failure_is_logged_once(caplog: pytest.LogCaptureFixture) -> None:
    app, deps, connector, _, trigger, _ = _app()
    app.start()
    await wait_until(lambda: deps.transport.is_open)
    trigger.press()
    task_id = deps.session.active_task_id

    with caplog.at_level(logging.DEBUG):
        connector.latest.push({"header": {"event": "task-failed", "task_id": task_id, "error_message": "bad"}})
        await wait_until(lambda: not app.recording)

    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert [r.getMessage() for r in errors] == ["Task failed: bad"]

    await app.shutdown()
