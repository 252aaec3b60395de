"""Duplex WebSocket transport to the streaming ASR endpoint."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from typing import Any
from collections.abc import Callable, Awaitable

import orjson
import websockets
from websockets.exceptions import ConnectionClosed

from asr_bridge.state.session import Session
from asr_bridge.state.settings import TransportSettings
from asr_bridge.state.connection import SendResult, ConnectionState
from asr_bridge.config.websocket import (
    HEARTBEAT_FRAME,
    WS_PING_TIMEOUT_S,
    WS_CLOSE_TIMEOUT_S,
    WS_PING_INTERVAL_S,
    WS_MAX_MESSAGE_BYTES,
)

from .heartbeat import Heartbeat
from .reconnect import ReconnectPolicy
from .auth import mask_credential, build_auth_headers

logger = logging.getLogger(__name__)

ConnectFn = Callable[..., Awaitable[Any]]
MessageHandler = Callable[[str | bytes], object]
StateListener = Callable[[ConnectionState, ConnectionState], None]
Frame = bytes | bytearray | memoryview | dict[str, Any]


class ConnectionTransport:
    """Owns one socket: open/close, ordered sends, heartbeat and reconnect.

    Connection state lives on the shared ``Session`` so the task controller
    sees every transition. ``send`` never blocks and never buffers while the
    socket is not open; frames sent while open are written in call order by a
    per-connection writer task.

    Reconnect is driven only by the socket closing (or a connect attempt
    failing), never by individual send/receive errors, so one outage schedules
    exactly one attempt at a time. An explicit ``close`` turns it off.
    """

    def __init__(
        self,
        session: Session,
        settings: TransportSettings,
        *,
        api_key: str,
        connect_fn: ConnectFn | None = None,
    ) -> None:
        self._session = session
        self._settings = settings
        self._api_key = api_key
        self._connect_fn: ConnectFn = connect_fn or websockets.connect
        self._policy = ReconnectPolicy(settings.reconnect)

        self._ws: Any = None
        self._outbox: asyncio.Queue | None = None
        self._run_task: asyncio.Task | None = None
        self._writer_task: asyncio.Task | None = None
        self._reconnect_handle: asyncio.TimerHandle | None = None
        self._attempts = 0
        self._closed = False

        self._handler: MessageHandler | None = None
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> ConnectionState:
        return self._session.connection_state

    @property
    def is_open(self) -> bool:
        return self._session.is_open

    @property
    def reconnect_pending(self) -> bool:
        return self._reconnect_handle is not None

    @property
    def reconnect_attempts(self) -> int:
        return self._attempts

    def on_message(self, handler: MessageHandler) -> None:
        self._handler = handler

    def add_state_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def connect(self) -> asyncio.Task:
        if self._run_task is not None and not self._run_task.done():
            return self._run_task
        self._closed = False
        self._cancel_reconnect()
        self._set_state(ConnectionState.CONNECTING)
        self._run_task = asyncio.create_task(self._run())
        return self._run_task

    def send(self, data: Frame) -> SendResult:
        outbox = self._outbox
        if outbox is None or not self._session.is_open:
            logger.debug("send skipped; transport state=%s", self.state.value)
            return SendResult.NOT_READY
        if isinstance(data, dict):
            frame: str | bytes = orjson.dumps(data).decode("utf-8")
        else:
            frame = bytes(data)
        outbox.put_nowait(frame)
        return SendResult.SENT

    async def close(self) -> None:
        self._closed = True
        self._cancel_reconnect()
        ws = self._ws
        outbox = self._outbox
        if self.state is not ConnectionState.DISCONNECTED:
            self._set_state(ConnectionState.CLOSING)

        if ws is not None:
            if outbox is not None:
                # Let already-accepted frames (e.g. finish-task) reach the wire.
                with contextlib.suppress(TimeoutError):
                    await asyncio.wait_for(outbox.join(), timeout=WS_CLOSE_TIMEOUT_S)
            with contextlib.suppress(Exception):
                await ws.close()

        run_task = self._run_task
        if run_task is not None and not run_task.done():
            if ws is None:
                run_task.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await asyncio.wait_for(run_task, timeout=WS_CLOSE_TIMEOUT_S)
        self._run_task = None

        self._teardown_connection()
        self._set_state(ConnectionState.DISCONNECTED)
        logger.info("WebSocket closed by client")

    async def _run(self) -> None:
        url = self._settings.url
        logger.info("Connecting to %s with API key %s", url, mask_credential(self._api_key))
        try:
            ws = await self._connect_fn(
                url,
                additional_headers=build_auth_headers(self._api_key),
                ping_interval=WS_PING_INTERVAL_S,
                ping_timeout=WS_PING_TIMEOUT_S,
                max_size=WS_MAX_MESSAGE_BYTES,
            )
        except asyncio.CancelledError:
            raise
        except Exception as exc:
            logger.error("WebSocket connect failed: %s", exc)
            self._handle_closed()
            return

        if self._closed:
            with contextlib.suppress(Exception):
                await ws.close()
            return

        self._open(ws)
        try:
            async for raw in ws:
                self._deliver(raw)
        except ConnectionClosed as exc:
            logger.warning("WebSocket connection lost: %s", exc)
        except Exception as exc:
            logger.error("WebSocket error: %s", exc)
        finally:
            self._teardown_connection()

        if not self._closed:
            logger.warning("WebSocket closed")
            self._handle_closed()

    def _open(self, ws: Any) -> None:
        self._ws = ws
        self._attempts = 0
        outbox: asyncio.Queue = asyncio.Queue()
        self._outbox = outbox
        self._set_state(ConnectionState.OPEN)

        heartbeat = Heartbeat(self._send_heartbeat, interval_s=self._settings.heartbeat_interval_s)
        self._session.heartbeat = heartbeat
        heartbeat.start()

        self._writer_task = asyncio.create_task(self._writer_loop(ws, outbox))
        logger.info("WebSocket connected")

    async def _writer_loop(self, ws: Any, outbox: asyncio.Queue) -> None:
        try:
            while True:
                frame = await outbox.get()
                try:
                    await ws.send(frame)
                finally:
                    outbox.task_done()
        except asyncio.CancelledError:
            return
        except ConnectionClosed:
            logger.debug("writer stopped; connection closed")
        except Exception:
            logger.error("WebSocket send failed", exc_info=True)
        # Nothing drains this outbox any more: refuse further sends and close the
        # socket so the reader ends and the normal close path reconnects.
        if self._outbox is outbox:
            self._outbox = None
        while not outbox.empty():
            outbox.get_nowait()
            outbox.task_done()
        with contextlib.suppress(Exception):
            await ws.close()

    def _send_heartbeat(self) -> None:
        self.send(HEARTBEAT_FRAME)

    def _deliver(self, raw: str | bytes) -> None:
        handler = self._handler
        if handler is None:
            logger.debug("no message handler registered; dropping frame")
            return
        try:
            handler(raw)
        except Exception:
            logger.exception("message handler failed")

    def _teardown_connection(self) -> None:
        writer = self._writer_task
        self._writer_task = None
        if writer is not None and not writer.done():
            writer.cancel()
        self._ws = None
        self._outbox = None

    def _handle_closed(self) -> None:
        self._set_state(ConnectionState.DISCONNECTED)
        if self._closed:
            return
        self._schedule_reconnect()

    def _schedule_reconnect(self) -> None:
        if self._reconnect_handle is not None:
            return
        self._attempts += 1
        if not self._policy.should_retry(self._attempts):
            logger.error("Giving up reconnecting after %s attempts", self._attempts - 1)
            return
        delay = self._policy.delay_for(self._attempts)
        logger.info("Reconnecting in %.1fs (attempt %s)", delay, self._attempts)
        self._reconnect_handle = asyncio.get_running_loop().call_later(delay, self._reconnect)

    def _reconnect(self) -> None:
        self._reconnect_handle = None
        if self._closed:
            return
        self.connect()

    def _cancel_reconnect(self) -> None:
        handle = self._reconnect_handle
        self._reconnect_handle = None
        if handle is not None:
            handle.cancel()

    def _set_state(self, state: ConnectionState) -> None:
        previous = self._session.set_connection_state(state)
        if previous is state:
            return
        logger.debug("transport %s -> %s", previous.value, state.value)
        for listener in list(self._listeners):
            try:
                listener(previous, state)
            except Exception:
                logger.exception("state listener failed")


__all__ = ["ConnectionTransport", "ConnectFn", "MessageHandler", "StateListener"]
