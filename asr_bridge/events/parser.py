"""Inbound frame decoding into typed events."""

from __future__ import annotations

from typing import Any

import orjson

from asr_bridge.state.errors import EventDecodeError
from asr_bridge.state.events import Event, EventKind, Transcription
from asr_bridge.config.protocol import (
    KEY_TEXT,
    KEY_EVENT,
    KEY_HEADER,
    KEY_OUTPUT,
    KEY_PAYLOAD,
    KEY_TASK_ID,
    KEY_ERROR_CODE,
    KEY_SENTENCE_END,
    KEY_ERROR_MESSAGE,
    KEY_TRANSCRIPTION,
)


def _optional_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _extract_transcription(payload: dict[str, Any]) -> Transcription | None:
    output = payload.get(KEY_OUTPUT)
    if not isinstance(output, dict):
        return None
    transcription = output.get(KEY_TRANSCRIPTION)
    if not isinstance(transcription, dict):
        return None
    text = transcription.get(KEY_TEXT)
    if not isinstance(text, str):
        return None
    return Transcription(text=text, sentence_end=transcription.get(KEY_SENTENCE_END) is True)


def decode_event(raw: str | bytes | bytearray) -> Event:
    try:
        msg = orjson.loads(raw)
    except Exception as exc:
        raise EventDecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(msg, dict):
        raise EventDecodeError("event must be a JSON object")

    header = msg.get(KEY_HEADER)
    if not isinstance(header, dict):
        raise EventDecodeError("event missing object 'header'")

    name = header.get(KEY_EVENT)
    if not isinstance(name, str) or not name.strip():
        raise EventDecodeError("event missing non-empty 'header.event'")
    name = name.strip()

    payload = msg.get(KEY_PAYLOAD)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise EventDecodeError("event 'payload' must be an object")

    return Event(
        kind=EventKind.from_wire(name),
        name=name,
        task_id=_optional_str(header.get(KEY_TASK_ID)),
        transcription=_extract_transcription(payload),
        error_code=_optional_str(header.get(KEY_ERROR_CODE)),
        error_message=_optional_str(header.get(KEY_ERROR_MESSAGE)),
        raw=msg,
    )


__all__ = ["decode_event"]
