"""Reconnect scheduling policy."""

from __future__ import annotations

from asr_bridge.state.settings import ReconnectSettings


class ReconnectPolicy:
    """Delay schedule for reconnect attempts.

    With the defaults (3s, factor 1.0, no cap on attempts) every attempt waits
    the same fixed delay, forever. ``max_attempts <= 0`` means unlimited.
    """

    def __init__(self, settings: ReconnectSettings) -> None:
        self.initial_delay_s = max(0.0, float(settings.initial_delay_s))
        self.backoff_factor = max(1.0, float(settings.backoff_factor))
        self.max_delay_s = max(self.initial_delay_s, float(settings.max_delay_s))
        self.max_attempts = max(0, int(settings.max_attempts))

    def delay_for(self, attempt: int) -> float:
        """Delay before the 1-based ``attempt``."""
        exponent = max(0, int(attempt) - 1)
        delay = self.initial_delay_s * (self.backoff_factor**exponent)
        return min(delay, self.max_delay_s)

    def should_retry(self, attempt: int) -> bool:
        if self.max_attempts <= 0:
            return True
        return attempt <= self.max_attempts


__all__ = ["ReconnectPolicy"]
