from __future__ import annotations

import pytest

from asr_bridge.bridge import BridgeApp
from asr_bridge.tasks.ids import is_valid_task_id
from asr_bridge.state.connection import ConnectionState
from asr_bridge.runtime.dependencies import build_runtime_deps
from tests.utils.fakes import (
    FakeConnector,
    wait_until,
    result_event,
    make_app_settings,
    make_transport_settings,
)


@pytest.mark.asyncio
async def test_utterance_is_committed_once() -> None:
    connector = FakeConnector()
    published: list[str] = []
    partials: list[str] = []
    deps = build_runtime_deps(
        make_app_settings(),
        publish=published.append,
        on_partial=partials.append,
        connect_fn=connector,
    )
    app = BridgeApp(deps)

    app.start()
    await wait_until(lambda: deps.transport.is_open)
    ws = connector.latest

    assert app.start_recording()
    task_id = deps.session.active_task_id
    assert task_id is not None and is_valid_task_id(task_id)
    ws.push({"header": {"event": "task-started", "task_id": task_id}})

    chunks = [bytes([i]) * 640 for i in range(5)]
    for chunk in chunks:
        assert deps.relay.forward(chunk)
    ws.push(result_event("hel", False, task_id))
    ws.push(result_event("hello", False, task_id))
    ws.push(result_event("hello world", True, task_id))
    await wait_until(lambda: published == ["hello world"])

    app.stop_recording()
    ws.push({"header": {"event": "task-finished", "task_id": task_id}})
    await wait_until(lambda: ws.actions() == ["run-task", "finish-task"])

    assert partials == ["hel", "hello"]
    assert ws.binary_sent == chunks
    assert ws.sent[1:6] == chunks
    assert len(ws.sent) == 7
    run_task, finish_task = ws.json_sent
    assert run_task["header"]["task_id"] == finish_task["header"]["task_id"] == task_id
    assert deps.session.active_task is None
    assert deps.relay.dropped_chunks == 0

    await app.shutdown()
    assert published == ["hello world"]


@pytest.mark.asyncio
async def test_drop_mid_utterance_recovers_with_a_new_task() -> None:
    connector = FakeConnector()
    settings = make_app_settings(transport=make_transport_settings(reconnect_delay_s=0.05))
    deps = build_runtime_deps(settings, publish=lambda _: None, connect_fn=connector)
    app = BridgeApp(deps)
    app.start()
    await wait_until(lambda: deps.transport.is_open)

    assert app.start_recording()
    first_id = deps.session.active_task_id
    first = connector.latest
    first.drop()
    await wait_until(lambda: deps.transport.state is ConnectionState.DISCONNECTED)

    assert deps.session.active_task is None
    assert deps.relay.forward(b"\x00" * 640) is False
    assert deps.relay.dropped_chunks == 1

    await wait_until(lambda: deps.transport.is_open and len(connector.sockets) == 2)
    assert app.start_recording()
    second_id = deps.session.active_task_id

    assert second_id is not None and second_id != first_id
    assert first.actions() == ["run-task"]
    await wait_until(lambda: connector.latest.actions() == ["run-task"])

    await app.shutdown()
