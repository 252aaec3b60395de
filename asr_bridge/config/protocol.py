"""ASR task protocol keys, actions and event names."""

from __future__ import annotations

ENV_ASR_MODEL = "ASR_MODEL"
DEFAULT_ASR_MODEL = "gummy-realtime-v1"

# Envelope keys
KEY_HEADER = "header"
KEY_PAYLOAD = "payload"
KEY_ACTION = "action"
KEY_TASK_ID = "task_id"
KEY_STREAMING = "streaming"
KEY_EVENT = "event"
KEY_ERROR_CODE = "error_code"
KEY_ERROR_MESSAGE = "error_message"
KEY_OUTPUT = "output"
KEY_TRANSCRIPTION = "transcription"
KEY_TEXT = "text"
KEY_SENTENCE_END = "sentence_end"

STREAMING_DUPLEX = "duplex"

# Outbound actions
ACTION_RUN_TASK = "run-task"
ACTION_FINISH_TASK = "finish-task"

# run-task payload
TASK_GROUP = "audio"
TASK_NAME = "asr"
TASK_FUNCTION = "recognition"

# Inbound events
EVENT_TASK_STARTED = "task-started"
EVENT_RESULT_GENERATED = "result-generated"
EVENT_TASK_FINISHED = "task-finished"
EVENT_TASK_FAILED = "task-failed"
EVENT_ERROR = "error"

TASK_ID_HEX_LENGTH = 32

__all__ = [
    "ACTION_FINISH_TASK",
    "ACTION_RUN_TASK",
    "DEFAULT_ASR_MODEL",
    "ENV_ASR_MODEL",
    "EVENT_ERROR",
    "EVENT_RESULT_GENERATED",
    "EVENT_TASK_FAILED",
    "EVENT_TASK_FINISHED",
    "EVENT_TASK_STARTED",
    "KEY_ACTION",
    "KEY_ERROR_CODE",
    "KEY_ERROR_MESSAGE",
    "KEY_EVENT",
    "KEY_HEADER",
    "KEY_OUTPUT",
    "KEY_PAYLOAD",
    "KEY_SENTENCE_END",
    "KEY_STREAMING",
    "KEY_TASK_ID",
    "KEY_TEXT",
    "KEY_TRANSCRIPTION",
    "STREAMING_DUPLEX",
    "TASK_FUNCTION",
    "TASK_GROUP",
    "TASK_ID_HEX_LENGTH",
    "TASK_NAME",
]
