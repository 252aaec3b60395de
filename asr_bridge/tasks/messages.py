"""Builders for outbound task control messages."""

from __future__ import annotations

from typing import Any

from asr_bridge.state.settings import TaskSettings
from asr_bridge.config.protocol import (
    KEY_ACTION,
    KEY_HEADER,
    TASK_GROUP,
    KEY_PAYLOAD,
    KEY_TASK_ID,
    TASK_NAME,
    KEY_STREAMING,
    TASK_FUNCTION,
    ACTION_RUN_TASK,
    STREAMING_DUPLEX,
    ACTION_FINISH_TASK,
)


def build_header(action: str, task_id: str) -> dict[str, Any]:
    return {
        KEY_ACTION: action,
        KEY_TASK_ID: task_id,
        KEY_STREAMING: STREAMING_DUPLEX,
    }


def build_run_task(task_id: str, settings: TaskSettings) -> dict[str, Any]:
    return {
        KEY_HEADER: build_header(ACTION_RUN_TASK, task_id),
        KEY_PAYLOAD: {
            "task_group": TASK_GROUP,
            "task": TASK_NAME,
            "function": TASK_FUNCTION,
            "model": settings.model,
            "parameters": {
                "sample_rate": settings.sample_rate,
                "format": settings.audio_format,
                "transcription_enabled": True,
            },
            "input": {},
        },
    }


def build_finish_task(task_id: str) -> dict[str, Any]:
    return {
        KEY_HEADER: build_header(ACTION_FINISH_TASK, task_id),
        KEY_PAYLOAD: {"input": {}},
    }


__all__ = ["build_finish_task", "build_header", "build_run_task"]
