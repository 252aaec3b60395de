"""Global hotkey configuration."""

from __future__ import annotations

# pynput GlobalHotKeys syntax.
ENV_ASR_HOTKEY = "ASR_HOTKEY"
DEFAULT_ASR_HOTKEY = "<alt>+`"

__all__ = ["DEFAULT_ASR_HOTKEY", "ENV_ASR_HOTKEY"]
