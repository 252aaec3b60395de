"""Bridge against a real websockets server speaking the task protocol."""

from __future__ import annotations

import orjson
import pytest
from websockets.asyncio.server import serve

from asr_bridge.bridge import BridgeApp
from asr_bridge.runtime.dependencies import build_runtime_deps
from tests.utils.fakes import wait_until, result_event, make_app_settings, make_transport_settings


class _MockAsrServer:
    def __init__(self) -> None:
        self.auth_headers: list[str | None] = []
        self.actions: list[str] = []
        self.audio_bytes = 0
        self.heartbeats = 0

    async def handler(self, ws) -> None:
        self.auth_headers.append(ws.request.headers.get("Authorization"))
        async for raw in ws:
            if isinstance(raw, bytes):
                if raw:
                    self.audio_bytes += len(raw)
                else:
                    self.heartbeats += 1
                continue
            header = orjson.loads(raw)["header"]
            self.actions.append(header["action"])
            task_id = header["task_id"]
            if header["action"] == "run-task":
                await ws.send(orjson.dumps({"header": {"event": "task-started", "task_id": task_id}}).decode())
            elif header["action"] == "finish-task":
                await ws.send(orjson.dumps(result_event("hello world", True, task_id)).decode())
                await ws.send(orjson.dumps({"header": {"event": "task-finished", "task_id": task_id}}).decode())


@pytest.mark.asyncio
async def test_round_trip_against_local_server() -> None:
    mock = _MockAsrServer()
    async with serve(mock.handler, "127.0.0.1", 0) as server:
        port = server.sockets[0].getsockname()[1]
        settings = make_app_settings(
            transport=make_transport_settings(url=f"ws://127.0.0.1:{port}", heartbeat_interval_s=0.02)
        )
        published: list[str] = []
        deps = build_runtime_deps(settings, publish=published.append)
        app = BridgeApp(deps)

        app.start()
        await wait_until(lambda: deps.transport.is_open, timeout=5.0)
        assert app.start_recording()
        for _ in range(4):
            deps.relay.forward(b"\x00\x00" * 640)
        await wait_until(lambda: mock.audio_bytes == 4 * 1280, timeout=5.0)
        await wait_until(lambda: mock.heartbeats >= 1, timeout=5.0)

        app.stop_recording()
        await wait_until(lambda: published == ["hello world"], timeout=5.0)
        await app.shutdown()

    assert mock.auth_headers == ["bearer sk-test-1234567890"]
    assert mock.actions == ["run-task", "finish-task"]
