"""Task identifier generation."""

from __future__ import annotations

import re
import uuid

from asr_bridge.config.protocol import TASK_ID_HEX_LENGTH

_TASK_ID_RE = re.compile(rf"^[0-9a-f]{{{TASK_ID_HEX_LENGTH}}}$")


def new_task_id() -> str:
    return uuid.uuid4().hex


def is_valid_task_id(value: object) -> bool:
    return isinstance(value, str) and _TASK_ID_RE.match(value) is not None


__all__ = ["is_valid_task_id", "new_task_id"]
