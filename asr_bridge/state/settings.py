"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    api_key: str


@dataclass(frozen=True, slots=True)
class ReconnectSettings:
    initial_delay_s: float
    backoff_factor: float
    max_delay_s: float
    max_attempts: int


@dataclass(frozen=True, slots=True)
class TransportSettings:
    url: str
    heartbeat_interval_s: float
    reconnect: ReconnectSettings


@dataclass(frozen=True, slots=True)
class TaskSettings:
    model: str
    sample_rate: int
    audio_format: str


@dataclass(frozen=True, slots=True)
class CaptureSettings:
    sample_rate: int
    block_ms: int
    gain: float
    device: str | None


@dataclass(frozen=True, slots=True)
class HotkeySettings:
    combo: str


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    transport: TransportSettings
    task: TaskSettings
    capture: CaptureSettings
    hotkey: HotkeySettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "CaptureSettings",
    "HotkeySettings",
    "ReconnectSettings",
    "TaskSettings",
    "TransportSettings",
]
