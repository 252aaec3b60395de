from __future__ import annotations

import orjson
import pytest

from asr_bridge.state.events import EventKind
from asr_bridge.state.errors import EventDecodeError
from asr_bridge.events.parser import decode_event
from tests.utils.fakes import result_event


def test_decode_result_generated() -> None:
    raw = orjson.dumps(result_event("hello world", True, task_id="a" * 32))

    event = decode_event(raw)

    assert event.kind is EventKind.RESULT_GENERATED
    assert event.task_id == "a" * 32
    assert event.transcription is not None
    assert event.transcription.text == "hello world"
    assert event.transcription.sentence_end is True


def test_sentence_end_must_be_boolean_true() -> None:
    msg = result_event("hi", True)
    msg["payload"]["output"]["transcription"]["sentence_end"] = "true"

    event = decode_event(orjson.dumps(msg).decode())

    assert event.transcription is not None
    assert event.transcription.sentence_end is False


def test_decode_task_failed_carries_error() -> None:
    raw = '{"header":{"event":"task-failed","task_id":"x","error_code":"E1","error_message":"bad audio"}}'

    event = decode_event(raw)

    assert event.kind is EventKind.TASK_FAILED
    assert event.error_code == "E1"
    assert event.error_message == "bad audio"
    assert event.transcription is None


def test_unknown_event_name_is_preserved() -> None:
    event = decode_event('{"header":{"event":"speech-detected"},"payload":{}}')

    assert event.kind is EventKind.UNKNOWN
    assert event.name == "speech-detected"


def test_result_without_transcription_decodes() -> None:
    event = decode_event('{"header":{"event":"result-generated"},"payload":{"output":{}}}')

    assert event.kind is EventKind.RESULT_GENERATED
    assert event.transcription is None


@pytest.mark.parametrize(
    "raw",
    [
        "not json",
        "[]",
        '{"payload":{}}',
        '{"header":"task-started"}',
        '{"header":{"event":""}}',
        '{"header":{"event":7}}',
        '{"header":{"event":"task-started"},"payload":[1]}',
    ],
)
def test_malformed_frames_raise(raw: str) -> None:
    with pytest.raises(EventDecodeError):
        decode_event(raw)
