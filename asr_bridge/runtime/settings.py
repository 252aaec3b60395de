"""Environment parsing for runtime settings."""

from __future__ import annotations

import os

from asr_bridge.config.secrets import get_api_key
from asr_bridge.config.hotkey import ENV_ASR_HOTKEY, DEFAULT_ASR_HOTKEY
from asr_bridge.config.protocol import ENV_ASR_MODEL, DEFAULT_ASR_MODEL
from asr_bridge.state.settings import (
    AppSettings,
    AuthSettings,
    TaskSettings,
    HotkeySettings,
    CaptureSettings,
    ReconnectSettings,
    TransportSettings,
)
from asr_bridge.config.audio import (
    ASR_AUDIO_FORMAT,
    ENV_ASR_INPUT_GAIN,
    ASR_SAMPLE_RATE_HZ,
    ENV_ASR_INPUT_DEVICE,
    DEFAULT_ASR_INPUT_GAIN,
    ENV_ASR_CAPTURE_BLOCK_MS,
    DEFAULT_ASR_CAPTURE_BLOCK_MS,
)
from asr_bridge.config.websocket import (
    ENV_ASR_WS_URL,
    DEFAULT_ASR_WS_URL,
    ENV_ASR_RECONNECT_BACKOFF,
    ENV_ASR_RECONNECT_DELAY_S,
    DEFAULT_ASR_RECONNECT_BACKOFF,
    DEFAULT_ASR_RECONNECT_DELAY_S,
    ENV_ASR_HEARTBEAT_INTERVAL_S,
    ENV_ASR_RECONNECT_MAX_DELAY_S,
    ENV_ASR_RECONNECT_MAX_ATTEMPTS,
    DEFAULT_ASR_HEARTBEAT_INTERVAL_S,
    DEFAULT_ASR_RECONNECT_MAX_DELAY_S,
    DEFAULT_ASR_RECONNECT_MAX_ATTEMPTS,
)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except Exception:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except Exception:
        return default


def _load_reconnect_settings() -> ReconnectSettings:
    delay = _float_env(ENV_ASR_RECONNECT_DELAY_S, DEFAULT_ASR_RECONNECT_DELAY_S)
    if delay < 0:
        delay = DEFAULT_ASR_RECONNECT_DELAY_S
    backoff = max(1.0, _float_env(ENV_ASR_RECONNECT_BACKOFF, DEFAULT_ASR_RECONNECT_BACKOFF))
    # The ceiling never sits below the first delay.
    max_delay = max(delay, _float_env(ENV_ASR_RECONNECT_MAX_DELAY_S, DEFAULT_ASR_RECONNECT_MAX_DELAY_S))
    max_attempts = max(0, _int_env(ENV_ASR_RECONNECT_MAX_ATTEMPTS, DEFAULT_ASR_RECONNECT_MAX_ATTEMPTS))

    return ReconnectSettings(
        initial_delay_s=delay,
        backoff_factor=backoff,
        max_delay_s=max_delay,
        max_attempts=max_attempts,
    )


def _load_transport_settings(url: str | None = None) -> TransportSettings:
    heartbeat = _float_env(ENV_ASR_HEARTBEAT_INTERVAL_S, DEFAULT_ASR_HEARTBEAT_INTERVAL_S)
    if heartbeat <= 0:
        heartbeat = DEFAULT_ASR_HEARTBEAT_INTERVAL_S

    return TransportSettings(
        url=url or _str_env(ENV_ASR_WS_URL, DEFAULT_ASR_WS_URL),
        heartbeat_interval_s=heartbeat,
        reconnect=_load_reconnect_settings(),
    )


def _load_capture_settings() -> CaptureSettings:
    block_ms = _int_env(ENV_ASR_CAPTURE_BLOCK_MS, DEFAULT_ASR_CAPTURE_BLOCK_MS)
    if block_ms <= 0:
        block_ms = DEFAULT_ASR_CAPTURE_BLOCK_MS
    gain = _float_env(ENV_ASR_INPUT_GAIN, DEFAULT_ASR_INPUT_GAIN)
    if gain <= 0:
        gain = DEFAULT_ASR_INPUT_GAIN
    device = (os.getenv(ENV_ASR_INPUT_DEVICE) or "").strip() or None

    return CaptureSettings(
        sample_rate=ASR_SAMPLE_RATE_HZ,
        block_ms=block_ms,
        gain=gain,
        device=device,
    )


def load_settings(
    *,
    url: str | None = None,
    model: str | None = None,
    hotkey: str | None = None,
) -> AppSettings:
    """Resolve settings from the environment; explicit arguments win."""
    return AppSettings(
        auth=AuthSettings(api_key=get_api_key()),
        transport=_load_transport_settings(url),
        task=TaskSettings(
            model=model or _str_env(ENV_ASR_MODEL, DEFAULT_ASR_MODEL),
            sample_rate=ASR_SAMPLE_RATE_HZ,
            audio_format=ASR_AUDIO_FORMAT,
        ),
        capture=_load_capture_settings(),
        hotkey=HotkeySettings(combo=hotkey or _str_env(ENV_ASR_HOTKEY, DEFAULT_ASR_HOTKEY)),
    )


__all__ = ["load_settings"]
